# File: js_packer/site_files.py
"""js_packer.site_files: a built site directory as a path → bytes collection."""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Dict, Mapping, Optional, Union

from js_packer.logger import logger

__all__ = ["load_site", "write_site", "changed_paths"]


def load_site(directory: Union[str, Path]) -> Dict[str, bytes]:
    """Read every file below *directory*, keyed by POSIX path relative to it."""
    root = Path(directory).expanduser()
    if not root.is_dir():
        raise FileNotFoundError(f"Site directory not found: {root}")
    files = {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
    logger.debug("Loaded %d files from %s", len(files), root)
    return files


def write_site(
    directory: Union[str, Path],
    files: Mapping[str, bytes],
    only: Optional[Collection[str]] = None,
) -> int:
    """Write *files* (or just the paths in *only*) below *directory*; returns the count."""
    root = Path(directory).expanduser()
    written = 0
    for rel, content in files.items():
        if only is not None and rel not in only:
            continue
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        written += 1
    logger.debug("Wrote %d files to %s", written, root)
    return written


def changed_paths(before: Mapping[str, bytes], after: Mapping[str, bytes]) -> list[str]:
    """Paths added or modified between two snapshots, in *after* order."""
    return [rel for rel, content in after.items() if before.get(rel) != content]
