# File: js_packer/report/__init__.py
"""js_packer.report: reports of packing runs used by the CLI and tests."""

from js_packer.report.json_report import build_report, render_json

__all__ = ["build_report", "render_json"]
