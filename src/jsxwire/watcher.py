"""Rebuilds templates as they change on disk."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from watchfiles import Change, awatch

from jsxwire.compiler.build import compile_file
from jsxwire.compiler.exceptions import JsxWireError
from jsxwire.compiler.paths import output_path_for
from jsxwire.config import JsxWireConfig

log = logging.getLogger(__name__)


def apply_changes(
    changes: Iterable[Tuple[Change, str]],
    src_dir: Path,
    out_dir: Path,
    config: JsxWireConfig,
) -> List[Path]:
    """Recompile changed templates and drop outputs of removed ones.

    A batch from `awatch` is an unordered set and an atomic save reports the
    same path as both deleted and added, so each path is handled once based
    on whether the template is still on disk.

    Compilation errors are logged and skipped so a watch session survives a
    half-edited template. Returns the paths that were written.
    """
    written: List[Path] = []
    paths: Set[Path] = set()

    for _, raw_path in changes:
        path = Path(raw_path).resolve()
        if path.suffix != config.template_suffix:
            continue
        paths.add(path)

    for path in sorted(paths):
        try:
            target = output_path_for(path, src_dir, out_dir, config.extension)
        except ValueError:
            # Outside the watched tree
            continue

        if not path.is_file():
            if target.exists():
                target.unlink()
                log.info("Removed %s", target)
            continue

        try:
            compile_file(path, target, config=config)
        except JsxWireError as e:
            log.error("[red]%s[/]", e)
            continue
        written.append(target)

    return written


async def watch_templates(
    src_dir: Path,
    out_dir: Optional[Path] = None,
    config: Optional[JsxWireConfig] = None,
    stop_event: Optional[asyncio.Event] = None,
) -> None:
    """Watch `src_dir` and rebuild templates until `stop_event` is set."""
    config = config or JsxWireConfig()
    src_dir = src_dir.resolve()
    out_dir = out_dir.resolve() if out_dir is not None else src_dir

    log.info("Watching [cyan]%s[/] for changes...", src_dir)
    async for changes in awatch(src_dir, stop_event=stop_event):
        apply_changes(changes, src_dir, out_dir, config)
