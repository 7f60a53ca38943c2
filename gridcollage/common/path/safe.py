# gridcollage/common/path/safe.py
from __future__ import annotations

from pathlib import Path


def resolve_root(root: Path | str) -> Path:
    """Resolve an output root directory to an absolute path."""
    return Path(root).expanduser().resolve()


def safe_join(root: Path | str, rel: Path | str) -> Path:
    """
    Join 'root' and a caller-supplied path, keeping the result inside 'root'.
    Absolute 'rel' values and '..' traversal that leave the root raise ValueError.
    """
    r = resolve_root(root)
    p = (r / str(rel)).resolve()
    if p != r and r not in p.parents:
        raise ValueError(f"path {p} escapes root {r}")
    return p
