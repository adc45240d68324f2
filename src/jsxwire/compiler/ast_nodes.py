"""AST node definitions for template files."""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

from jsxwire.compiler.attributes import (
    CONDITIONALS_TEST,
    CONTROLS_TAG,
    LOOP_ARRAY,
    LOOP_VAR_NAME,
)
from jsxwire.compiler.exceptions import MalformedNodeError


@dataclass(frozen=True)
class TextNode:
    """Literal text, possibly containing `{{ }}` bindings."""

    value: str
    line: int = 0


@dataclass(frozen=True)
class ElementNode:
    """An element with ordered attributes and children."""

    name: str
    attrs: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["AstNode", ...] = ()
    line: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence for children but store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_control(self) -> bool:
        return self.name == CONTROLS_TAG


AstNode = Union[TextNode, ElementNode]


@dataclass(frozen=True)
class ConditionalControl:
    """`<controls test="{{ cond }}">` rendered as `(cond) && (...)`."""

    test: str
    child: AstNode


@dataclass(frozen=True)
class LoopControl:
    """`<controls array="{{ xs }}" item-name="{{ x }}">` rendered as `xs.map(x => (...))`."""

    array: str
    item_name: str
    child: AstNode


ControlNode = Union[ConditionalControl, LoopControl]


@dataclass(frozen=True)
class ComponentImport:
    """A component pulled in with `<link rel="import">`."""

    tag: str
    identifier: str
    source: str


@dataclass
class ParsedTemplate:
    """Complete parsed template file."""

    root: ElementNode
    imports: Tuple[ComponentImport, ...] = ()
    file_path: Optional[str] = None

    @property
    def alias_table(self) -> Dict[str, str]:
        return {imp.tag: imp.identifier for imp in self.imports}


def classify_control(node: ElementNode) -> ControlNode:
    """Validate a control element and return its variant.

    A control must hold exactly one child and either a `test` attribute or
    both `array` and `item-name`. `test` wins when both forms are present.
    """
    if len(node.children) != 1:
        raise MalformedNodeError(
            f"control element must have exactly one child, got {len(node.children)}",
            node_name=node.name,
        )
    child = node.children[0]

    if CONDITIONALS_TEST in node.attrs:
        return ConditionalControl(test=_required(node, CONDITIONALS_TEST), child=child)

    if LOOP_ARRAY in node.attrs and LOOP_VAR_NAME in node.attrs:
        return LoopControl(
            array=_required(node, LOOP_ARRAY),
            item_name=_required(node, LOOP_VAR_NAME),
            child=child,
        )

    raise MalformedNodeError(
        f"control element needs either '{CONDITIONALS_TEST}' or both "
        f"'{LOOP_ARRAY}' and '{LOOP_VAR_NAME}' attributes",
        node_name=node.name,
    )


def _required(node: ElementNode, attr: str) -> str:
    value = node.attrs[attr]
    if not value.strip():
        raise MalformedNodeError(f"'{attr}' must not be empty", node_name=node.name)
    return value
