"""Wraps generated JSX in a complete ES module."""

from typing import Optional, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from jsxwire.compiler.ast_nodes import ComponentImport, ParsedTemplate
from jsxwire.compiler.attributes import pascal_case
from jsxwire.compiler.codegen.jsx import JsxCodegen
from jsxwire.config import JsxWireConfig

# Generated source is not HTML, autoescape only guards stray .html templates
_env = Environment(
    loader=PackageLoader("jsxwire", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
    keep_trailing_newline=True,
)

MODULE_TEMPLATE = "component.jsx.j2"


def component_name(stem: str) -> str:
    """Component identifier for a template file stem, `user-card` -> `UserCard`."""
    name = pascal_case(stem)
    if not name or not name.isidentifier():
        return "Component"
    return name


class ModuleGenerator:
    """Renders a parsed template as `export default function Name(props) {...}`."""

    def __init__(self, config: Optional[JsxWireConfig] = None) -> None:
        self.config = config or JsxWireConfig()

    def generate(self, parsed: ParsedTemplate, name: str) -> str:
        codegen = JsxCodegen(alias_table=parsed.alias_table, config=self.config)
        body = codegen.render_component(parsed.root)
        return self.render_module(name, body, parsed.imports)

    def render_module(
        self, name: str, body: str, imports: Sequence[ComponentImport] = ()
    ) -> str:
        template = _env.get_template(MODULE_TEMPLATE)
        return template.render(
            name=name,
            body=body.rstrip("\n"),
            imports=imports,
            react_import=self.config.react_import,
        )
