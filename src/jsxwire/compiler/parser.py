"""Template parser: turns HTML-like markup into `ElementNode` / `TextNode` trees."""

import logging
from dataclasses import dataclass, field
from html.parser import HTMLParser
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from jsxwire.compiler.ast_nodes import (
    AstNode,
    ComponentImport,
    ElementNode,
    ParsedTemplate,
    TextNode,
)
from jsxwire.compiler.attributes import pascal_case
from jsxwire.compiler.exceptions import JsxWireSyntaxError

log = logging.getLogger(__name__)

# HTML void elements that never have children or closing tags
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}


@dataclass
class _OpenElement:
    """Mutable element used while the tree is still being built."""

    name: str
    attrs: Dict[str, str]
    line: int
    children: List[Union["_OpenElement", TextNode]] = field(default_factory=list)

    def freeze(self) -> ElementNode:
        children: List[AstNode] = [
            child.freeze() if isinstance(child, _OpenElement) else child
            for child in self.children
        ]
        return ElementNode(
            name=self.name, attrs=self.attrs, children=tuple(children), line=self.line
        )


class _TreeBuilder(HTMLParser):
    def __init__(self, file_path: str = "") -> None:
        # Character references stay encoded, JSX text decodes them itself
        super().__init__(convert_charrefs=False)
        self.file_path = file_path
        self.document = _OpenElement("#document", {}, line=1)
        self.stack: List[_OpenElement] = [self.document]
        self._text: List[str] = []
        self._text_line = 0

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        element = self._append_element(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self.stack.append(element)

    def handle_startendtag(
        self, tag: str, attrs: List[Tuple[str, Optional[str]]]
    ) -> None:
        self._append_element(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        self._flush_text()
        if tag in VOID_ELEMENTS:
            return

        line, _ = self.getpos()
        current = self.stack[-1]
        if current is self.document:
            raise JsxWireSyntaxError(
                f"Unexpected closing tag </{tag}>", file_path=self.file_path, line=line
            )
        if current.name != tag:
            raise JsxWireSyntaxError(
                f"Expected </{current.name}> (opened on line {current.line}) "
                f"but found </{tag}>",
                file_path=self.file_path,
                line=line,
            )
        self.stack.pop()

    def handle_data(self, data: str) -> None:
        self._add_text(data)

    def handle_entityref(self, name: str) -> None:
        self._add_text(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._add_text(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self._flush_text()

    def finish(self) -> ElementNode:
        self.close()
        self._flush_text()
        if len(self.stack) > 1:
            unclosed = self.stack[-1]
            raise JsxWireSyntaxError(
                f"Unclosed element <{unclosed.name}>",
                file_path=self.file_path,
                line=unclosed.line,
            )
        return self.document.freeze()

    def _add_text(self, chunk: str) -> None:
        if not self._text:
            self._text_line, _ = self.getpos()
        self._text.append(chunk)

    def _flush_text(self) -> None:
        # JSX collapses whitespace runs, do it here so indentation stays ours
        text = " ".join("".join(self._text).split())
        if text:
            self.stack[-1].children.append(TextNode(value=text, line=self._text_line))
        self._text = []

    def _append_element(
        self, tag: str, attrs: List[Tuple[str, Optional[str]]]
    ) -> _OpenElement:
        self._flush_text()
        line, _ = self.getpos()
        # Bare attributes come through as None
        element = _OpenElement(
            name=tag,
            attrs={name: value if value is not None else "" for name, value in attrs},
            line=line,
        )
        self.stack[-1].children.append(element)
        return element


class TemplateParser:
    """Parses template files.

    A template file holds one `<template>` element wrapping the component
    markup, optionally preceded by component imports:

        <link rel="import" href="./button" name="my-button">
        <template>
          <my-button label="{{ props.label }}" />
        </template>
    """

    TEMPLATE_TAG = "template"

    def parse_file(self, file_path: Path) -> ParsedTemplate:
        """Parse a template file."""
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        return self.parse(content, str(file_path))

    def parse(self, content: str, file_path: str = "") -> ParsedTemplate:
        builder = _TreeBuilder(file_path)
        builder.feed(content)
        document = builder.finish()

        root: Optional[ElementNode] = None
        imports: List[ComponentImport] = []

        for node in document.children:
            if not isinstance(node, ElementNode):
                continue
            if node.name == self.TEMPLATE_TAG:
                if root is None:
                    root = node
                else:
                    log.warning(
                        "%s:%d: ignoring extra <%s> element",
                        file_path or "<string>",
                        node.line,
                        self.TEMPLATE_TAG,
                    )
            elif node.name == "link" and node.attrs.get("rel") == "import":
                imports.append(self._parse_import(node, file_path))

        if root is None:
            raise JsxWireSyntaxError(
                f"No <{self.TEMPLATE_TAG}> element found", file_path=file_path or None
            )

        log.debug(
            "Parsed %s: %d import(s), %d root node(s)",
            file_path or "<string>",
            len(imports),
            len(root.children),
        )
        return ParsedTemplate(root=root, imports=tuple(imports), file_path=file_path)

    def _parse_import(self, node: ElementNode, file_path: str) -> ComponentImport:
        href = node.attrs.get("href", "").strip()
        if not href:
            raise JsxWireSyntaxError(
                'Component import needs an "href" attribute',
                file_path=file_path or None,
                line=node.line,
            )

        tag = (node.attrs.get("name") or Path(href).stem).strip().lower()
        identifier = pascal_case(tag)
        if not identifier.isidentifier():
            raise JsxWireSyntaxError(
                f"Cannot derive a component name from {tag!r}",
                file_path=file_path or None,
                line=node.line,
            )

        return ComponentImport(tag=tag, identifier=identifier, source=href)
