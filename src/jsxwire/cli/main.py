"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import rich.panel
import rich_click as click
from jsxwire import __version__
from rich.console import Console
from rich.logging import RichHandler

from jsxwire.compiler.exceptions import JsxWireError
from jsxwire.config import JsxWireConfig

console = Console()

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_TABLE_EXPAND = False
click.rich_click.STYLE_COMMANDS_TABLE_HEADER = "bold magenta"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'jsxwire --help' for more information."
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None
click.rich_click.STYLE_COMMANDS_PANEL_BOX = None

click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "jsxwire": [
        {
            "name": "Commands",
            "commands": ["compile", "build", "watch"],
        }
    ]
}


# rich-click wraps tables in Panels which default to expand=True
original_panel_init = rich.panel.Panel.__init__


def panel_init(self, *args, **kwargs):
    kwargs.setdefault("expand", False)
    original_panel_init(self, *args, **kwargs)


rich.panel.Panel.__init__ = panel_init  # type: ignore[method-assign]


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
        force=True,
    )


def _config(indent: int, ext: str, no_react_import: bool) -> JsxWireConfig:
    try:
        return JsxWireConfig(
            indent=" " * indent, extension=ext, react_import=not no_react_import
        )
    except ValueError as e:
        raise click.BadParameter(str(e))


def _common_options(func):
    func = click.option(
        "--indent", default=2, type=click.IntRange(min=1), help="Spaces per indent level"
    )(func)
    func = click.option(
        "--no-react-import",
        is_flag=True,
        help="Do not emit `import React from 'react';`",
    )(func)
    return func


@click.group(
    help=f"""
[bold white on cyan] jsxwire [/] [bold cyan]v{__version__}[/] Compile HTML templates to JSX components.

Run [bold cyan]jsxwire compile FILE[/] to print one component.
Run [bold cyan]jsxwire build DIR[/] to compile every template in a directory.
"""
)
@click.version_option(__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    configure_logging(verbose)


@cli.command("compile")
@click.argument("template", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--out",
    "-o",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the module here instead of stdout",
)
@click.option("--name", default=None, help="Component name (default: from file name)")
@_common_options
def compile_command(
    template: Path,
    out: Optional[Path],
    name: Optional[str],
    indent: int,
    no_react_import: bool,
) -> None:
    """Compile a single template."""
    from jsxwire.compiler.build import compile_file

    config = _config(indent, ".jsx", no_react_import)
    try:
        source = compile_file(template, out, name=name, config=config)
    except JsxWireError as e:
        raise click.ClickException(str(e))

    if out is None:
        click.echo(source, nl=False)


@cli.command()
@click.argument("src_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--out-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: next to each template)",
)
@click.option("--ext", default=".jsx", help="Extension of generated files")
@_common_options
def build(
    src_dir: Path,
    out_dir: Optional[Path],
    ext: str,
    indent: int,
    no_react_import: bool,
) -> None:
    """Compile every template under SRC_DIR."""
    from jsxwire.compiler.build import build_project

    config = _config(indent, ext, no_react_import)
    console.print(f"🔨 Building [cyan]{src_dir}[/]...")
    try:
        summary = build_project(src_dir, out_dir, config=config)
    except JsxWireError as e:
        raise click.ClickException(str(e))

    console.print(
        f"✅ Build complete (templates={summary.compiled}, out={summary.out_dir})"
    )


@cli.command()
@click.argument("src_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--out-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: next to each template)",
)
@click.option("--ext", default=".jsx", help="Extension of generated files")
@_common_options
def watch(
    src_dir: Path,
    out_dir: Optional[Path],
    ext: str,
    indent: int,
    no_react_import: bool,
) -> None:
    """Build SRC_DIR, then rebuild templates whenever they change."""
    import asyncio

    from jsxwire.compiler.build import build_project
    from jsxwire.watcher import watch_templates

    config = _config(indent, ext, no_react_import)
    try:
        build_project(src_dir, out_dir, config=config)
    except JsxWireError as e:
        # Keep watching, the user is probably mid-edit
        console.print(f"[red]{e}[/]")

    try:
        asyncio.run(watch_templates(src_dir, out_dir, config=config))
    except KeyboardInterrupt:
        console.print("👋 Stopped watching")


if __name__ == "__main__":
    cli()
