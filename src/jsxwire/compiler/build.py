"""Compiles template files into JSX modules."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from jsxwire.compiler.codegen.module import ModuleGenerator, component_name
from jsxwire.compiler.exceptions import JsxWireError
from jsxwire.compiler.parser import TemplateParser
from jsxwire.compiler.paths import iter_templates, output_path_for
from jsxwire.config import JsxWireConfig

log = logging.getLogger(__name__)


@dataclass
class BuildSummary:
    compiled: int
    out_dir: Path
    outputs: List[Path] = field(default_factory=list)


def compile_source(
    content: str,
    name: str = "Component",
    file_path: str = "",
    config: Optional[JsxWireConfig] = None,
) -> str:
    """Compile template source text into a JSX module."""
    parsed = TemplateParser().parse(content, file_path)
    return ModuleGenerator(config).generate(parsed, name)


def compile_file(
    src: Path,
    out: Optional[Path] = None,
    name: Optional[str] = None,
    config: Optional[JsxWireConfig] = None,
) -> str:
    """Compile one template file; write it to `out` when given."""
    parsed = TemplateParser().parse_file(src)
    source = ModuleGenerator(config).generate(parsed, name or component_name(src.stem))

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(source, encoding="utf-8")
        log.info("Compiled %s -> %s", src, out)

    return source


def build_project(
    src_dir: Path,
    out_dir: Optional[Path] = None,
    config: Optional[JsxWireConfig] = None,
) -> BuildSummary:
    """Compile every template under `src_dir`, mirroring its layout in `out_dir`.

    Output files sit next to their templates when `out_dir` is not given.
    """
    config = config or JsxWireConfig()
    src_dir = src_dir.resolve()
    out_dir = out_dir.resolve() if out_dir is not None else src_dir

    if not src_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {src_dir}")

    summary = BuildSummary(compiled=0, out_dir=out_dir)
    for template in iter_templates(src_dir, config.template_suffix):
        target = output_path_for(template, src_dir, out_dir, config.extension)
        try:
            compile_file(template, target, config=config)
        except JsxWireError:
            log.error("Failed to compile %s", template)
            raise
        summary.compiled += 1
        summary.outputs.append(target)

    log.info("Built %d template(s) into %s", summary.compiled, out_dir)
    return summary
