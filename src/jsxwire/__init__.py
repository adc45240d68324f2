try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("jsxwire")
    except PackageNotFoundError:
        __version__ = "unknown"

from jsxwire.compiler.ast_nodes import ElementNode, TextNode
from jsxwire.compiler.codegen.jsx import JsxCodegen, render_component
from jsxwire.compiler.exceptions import (
    JsxWireError,
    JsxWireSyntaxError,
    MalformedNodeError,
)
from jsxwire.compiler.parser import TemplateParser
from jsxwire.config import JsxWireConfig

__all__ = [
    "ElementNode",
    "TextNode",
    "JsxCodegen",
    "render_component",
    "TemplateParser",
    "JsxWireConfig",
    "JsxWireError",
    "JsxWireSyntaxError",
    "MalformedNodeError",
]
