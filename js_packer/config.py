# === FILE: js_packer/config.py ===
"""
Loading and validation of the JsPacker configuration.
The schema is described with Pydantic; files may be YAML or JSON.

Option names follow the site-generator plugin convention (``siteRootPath``,
``outputPath``, ``uglifyOptions``...) and are also accepted in snake_case.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from js_packer import __version__

__all__ = ("PackerConfig", "load_config")


class PackerConfig(BaseModel):
    """Configuration of one packing run."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    inline: bool = Field(False, description="Inline bundles into pages instead of writing files.")
    site_root_path: str = Field("/", alias="siteRootPath", description="Prefix for generated URLs.")
    output_path: str = Field(
        "assets/javascript/",
        alias="outputPath",
        description="Directory of externalized bundles, relative to the site root.",
    )
    uglify: bool = Field(True, description="Minify collected scripts.")
    uglify_options: Dict[str, Any] = Field(
        default_factory=dict,
        alias="uglifyOptions",
        description="Passed verbatim to the minifier.",
    )
    minifier: Literal["rjsmin", "terser"] = Field("rjsmin", description="Minifier backend.")
    terser_path: Optional[str] = Field(None, alias="terserPath")
    terser_args: List[str] = Field(default_factory=lambda: ["-c", "-m"], alias="terserArgs")
    source_dir: Path = Field(
        Path("src"), alias="source", description="Content root for local scripts."
    )
    html_extension: str = Field(".html", alias="htmlExtension", min_length=1)
    user_agent: str = Field(f"JsPacker/{__version__}", alias="userAgent", min_length=1)
    fetch_timeout: Optional[float] = Field(
        None, alias="fetchTimeout", gt=0, description="Per-request timeout (seconds)."
    )
    retry_times: int = Field(0, alias="retryTimes", ge=0, description="Retries for remote fetches.")

    @field_validator("output_path", mode="before")
    def _ensure_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str) and v and not v.endswith("/"):
            return v + "/"
        return v

    def bundle_file(self, bundle_key: str) -> str:
        """Output-relative path of an externalized bundle."""
        return f"{self.output_path}{bundle_key}.min.js"

    def bundle_url(self, bundle_key: str) -> str:
        """URL under which pages reference an externalized bundle."""
        return self.site_root_path + self.bundle_file(bundle_key)


_DEFAULT_CFG = Path("js_packer.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"YAML top level must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"JSON top level must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> PackerConfig:
    """
    Read YAML or JSON and return a validated PackerConfig.

    Without an explicit path, ``js_packer.yaml`` in the working directory is
    used when present and the defaults otherwise.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return PackerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    try:
        return PackerConfig(**data)
    except ValidationError:
        raise
