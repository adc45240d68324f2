"""JSX code generation from a template tree."""

from typing import Mapping, Optional, Tuple

from jsxwire.compiler.ast_nodes import (
    AstNode,
    ConditionalControl,
    ElementNode,
    LoopControl,
    TextNode,
    classify_control,
)
from jsxwire.compiler.attributes import PROPS_SPREADING, AttributeTranslator, to_jsx
from jsxwire.compiler.codegen.bindings import BindingResolver
from jsxwire.compiler.exceptions import MalformedNodeError
from jsxwire.config import JsxWireConfig


class JsxCodegen:
    """Renders template nodes as indented JSX.

    Every `render_*` method takes the indentation prefix of the fragment it
    produces and returns that fragment terminated by a newline.
    """

    def __init__(
        self,
        alias_table: Optional[Mapping[str, str]] = None,
        translate: AttributeTranslator = to_jsx,
        config: Optional[JsxWireConfig] = None,
        resolver: Optional[BindingResolver] = None,
    ) -> None:
        self.alias_table: Mapping[str, str] = (
            alias_table if alias_table is not None else {}
        )
        self.translate = translate
        self.config = config or JsxWireConfig()
        self.bindings = resolver or BindingResolver()

    @property
    def indent_unit(self) -> str:
        return self.config.indent

    def render_component(self, root: ElementNode) -> str:
        """Render the body of a `<template>` root as a `return ( ... );` statement.

        The root element itself is discarded, only its first child is rendered.
        """
        if not root.children:
            raise MalformedNodeError("template has no content", node_name=root.name)

        unit = self.indent_unit
        # A control at the top is already in expression position
        jsx = self.render_node(root.children[0], unit * 2, is_direct_control_child=True)
        return f"{unit}return (\n{jsx}{unit});\n"

    def render_node(
        self, node: AstNode, indent: str, is_direct_control_child: bool = False
    ) -> str:
        if isinstance(node, TextNode):
            return self.render_text(node, indent)
        if isinstance(node, ElementNode):
            if node.is_control:
                return self.render_control(node, indent, is_direct_control_child)
            return self.render_element(node, indent)
        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def render_text(self, node: TextNode, indent: str) -> str:
        return f"{indent}{self.bindings.resolve_text(node.value)}\n"

    def render_element(self, node: ElementNode, indent: str) -> str:
        name = self.alias_table.get(node.name, node.name)
        open_tag = f"{indent}<{name}"
        props = self.render_props(node)

        if not node.children:
            return f"{open_tag}{props} />\n"

        child_indent = f"{self.indent_unit}{indent}"
        children = "".join(
            self.render_node(child, child_indent) for child in node.children
        )
        return f"{open_tag}{props}>\n{children}{indent}</{name}>\n"

    def render_props(self, node: ElementNode) -> str:
        """` name=value` for every attribute, or an empty string."""
        return "".join(
            f" {self.render_prop(attr, value, node.name)}"
            for attr, value in node.attrs.items()
        )

    def render_prop(self, attr: str, value: Optional[str], node_name: str = "") -> str:
        name = self.translate(attr)
        if name == PROPS_SPREADING:
            return self.bindings.resolve_spread(value, node_name=node_name or None)
        return f"{name}={self.bindings.resolve_prop(value)}"

    def render_control(
        self, node: ElementNode, indent: str, is_direct_control_child: bool = False
    ) -> str:
        control = classify_control(node)
        open_block, close_block = self._block_wrapper(not is_direct_control_child)
        child = self._render_control_child(control.child, indent)

        if isinstance(control, ConditionalControl):
            test = self.bindings.unwrap(control.test)
            return (
                f"{indent}{open_block}({test}) && (\n"
                f"{child}"
                f"{indent}){close_block}\n"
            )

        if isinstance(control, LoopControl):
            array = self.bindings.unwrap(control.array)
            item_name = self.bindings.unwrap(control.item_name)
            return (
                f"{indent}{open_block}{array}.map({item_name} => (\n"
                f"{child}"
                f"{indent})){close_block}\n"
            )

        raise TypeError(f"Unknown control type: {type(control).__name__}")

    def _render_control_child(self, child: AstNode, indent: str) -> str:
        # A nested control sits in expression position already
        return self.render_node(
            child, f"{self.indent_unit}{indent}", is_direct_control_child=True
        )

    @staticmethod
    def _block_wrapper(with_wrapper: bool) -> Tuple[str, str]:
        if with_wrapper:
            return "{ ", " }"
        return "", ""


def render_component(
    root: ElementNode,
    alias_table: Optional[Mapping[str, str]] = None,
    config: Optional[JsxWireConfig] = None,
) -> str:
    """Render `root` with a one-off `JsxCodegen`."""
    return JsxCodegen(alias_table=alias_table, config=config).render_component(root)
