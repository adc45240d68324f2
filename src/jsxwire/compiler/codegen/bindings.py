"""Rewrites `{{ }}` bindings in text and attribute values to JSX expressions."""

from typing import Optional

from jsxwire.compiler.exceptions import MalformedNodeError
from jsxwire.compiler.interpolation.mustache import (
    Binding,
    Interpolation,
    MustacheInterpolationParser,
)

BOOLEAN_LITERALS = ("true", "false")


class BindingResolver:
    """Applies the binding patterns to a single value.

    Attribute values are tested in order Boolean, Strict, General and fall
    back to a plain string literal. Text values only rewrite their bindings.
    """

    def __init__(self, parser: Optional[MustacheInterpolationParser] = None) -> None:
        self.interpolation_parser = parser or MustacheInterpolationParser()

    def parse(self, value: str) -> Interpolation:
        return self.interpolation_parser.parse(value)

    def resolve_text(self, value: str) -> str:
        """`Hello {{ name }}!` -> `Hello { name }!`; literal text is untouched."""
        interpolation = self.parse(value)
        if not interpolation.has_bindings:
            return value

        return "".join(
            f"{{ {part.expression} }}" if isinstance(part, Binding) else part.text
            for part in interpolation.parts
        )

    def resolve_prop(self, value: Optional[str]) -> str:
        """Return the right-hand side of a JSX prop for a template attribute value."""
        # `attr` and `attr=""` both mean `true`
        node_value = value or "true"
        interpolation = self.parse(node_value)

        if interpolation.is_single_span:
            expression = interpolation.expressions[0]
            # attr="{{ True }}" -> attr={ true }
            if expression.lower() in BOOLEAN_LITERALS:
                return f"{{ {expression.lower()} }}"
            # attr="{{ expression }}" -> attr={ expression }
            return f"{{ {expression} }}"

        # attr="hello {{ name }}" -> attr={ `hello ${ name }` }
        if interpolation.has_bindings:
            template = "".join(
                f"${{ {part.expression} }}"
                if isinstance(part, Binding)
                else escape_template_literal(part.text)
                for part in interpolation.parts
            )
            return f"{{ `{template}` }}"

        return quote_literal(node_value)

    def unwrap(self, value: str) -> str:
        """Inner expression of a single binding, or the value itself otherwise."""
        interpolation = self.parse(value)
        if interpolation.is_single_span:
            return interpolation.expressions[0]
        return value.strip()

    def resolve_spread(self, value: Optional[str], node_name: Optional[str] = None) -> str:
        interpolation = self.parse(value or "")
        if not interpolation.is_single_span:
            raise MalformedNodeError(
                f"spread attribute must be a single binding like '{{{{ props }}}}', "
                f"got {value!r}",
                node_name=node_name,
            )
        return f"{{ ...{interpolation.expressions[0]} }}"


def quote_literal(value: str) -> str:
    """Quote a literal prop value.

    JSX attribute strings have no escape sequences, so the quote character is
    picked to avoid the ones in the value. A value holding both kinds becomes
    a JS string expression instead.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"{{ '{escaped}' }}"


def escape_template_literal(text: str) -> str:
    """Escape literal text for use inside a JS template string."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
