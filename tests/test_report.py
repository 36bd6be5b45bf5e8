# File: tests/test_report.py
import json

from js_packer.config import PackerConfig
from js_packer.models import Bundle, PackResult
from js_packer.report import build_report, render_json


def sample_result() -> PackResult:
    bundle = Bundle("bk", ("s1", "s2"), ["a.html", "b.html"])
    return PackResult(bundles=[bundle], artifacts=["assets/javascript/bk.min.js"])


def test_render_json_writes_compact_report(tmp_path):
    out = render_json(sample_result(), PackerConfig(), tmp_path / "nested" / "pack.json", pretty=False)

    text = out.read_text(encoding="utf-8")
    assert "\n" not in text
    assert json.loads(text) == {
        "ok": True,
        "error": None,
        "inline": False,
        "bundles": [
            {
                "bundle_key": "bk",
                "script_keys": ["s1", "s2"],
                "documents": ["a.html", "b.html"],
                "artifact": "assets/javascript/bk.min.js",
            }
        ],
        "artifacts": ["assets/javascript/bk.min.js"],
    }


def test_inline_report_has_no_artifact():
    result = PackResult(bundles=[Bundle("bk", ("s1",), ["a.html"])])
    report = build_report(result, PackerConfig(inline=True))
    assert report["bundles"][0]["artifact"] is None
    assert report["inline"] is True


def test_failed_run_report():
    report = build_report(PackResult(error=RuntimeError("boom")), PackerConfig())
    assert report["ok"] is False
    assert report["error"] == "boom"
