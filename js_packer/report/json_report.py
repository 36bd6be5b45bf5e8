# js_packer/report/json_report.py

"""
JSON report of a packing run.

Serializes a PackResult (bundles, the documents using them, written files) to disk.
"""
import json
from pathlib import Path
from typing import Any, Dict

from js_packer.config import PackerConfig
from js_packer.models import PackResult


def build_report(result: PackResult, config: PackerConfig) -> Dict[str, Any]:
    return {
        'ok': result.ok,
        'error': str(result.error) if result.error else None,
        'inline': config.inline,
        'bundles': [
            {
                'bundle_key': b.bundle_key,
                'script_keys': list(b.script_keys),
                'documents': list(b.using_documents),
                'artifact': None if config.inline else config.bundle_file(b.bundle_key),
            }
            for b in result.bundles
        ],
        'artifacts': list(result.artifacts),
    }


def render_json(
    result: PackResult,
    config: PackerConfig,
    output_path: Path | str,
    *,
    pretty: bool = True,
) -> Path:
    """
    Save the report of *result* as JSON at the given path.

    :param result: PackResult returned by the engine
    :param config: configuration the run used
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from js_packer.report.json_report import render_json
    report_path = render_json(result, config, 'reports/pack.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(build_report(result, config), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
