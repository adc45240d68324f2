"""Helpers for locating templates and their generated modules."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_templates(src_dir: Path, suffix: str = ".html") -> Iterator[Path]:
    """Yield template files under `src_dir` in a stable order."""
    for path in sorted(src_dir.rglob(f"*{suffix}")):
        if path.is_file():
            yield path


def output_path_for(template: Path, src_dir: Path, out_dir: Path, extension: str) -> Path:
    """Return the generated module path for `template`, e.g. `a/b.html` -> `out/a/b.jsx`."""
    relative = template.relative_to(src_dir)
    return (out_dir / relative).with_suffix(extension)
