import unittest

from jsxwire.compiler.ast_nodes import ElementNode, TextNode
from jsxwire.compiler.codegen.jsx import JsxCodegen, render_component
from jsxwire.compiler.exceptions import MalformedNodeError
from jsxwire.config import JsxWireConfig


def el(name, attrs=None, *children):
    return ElementNode(name=name, attrs=attrs or {}, children=children)


def text(value):
    return TextNode(value=value)


def template(body):
    return el("template", {}, body)


class TestProps(unittest.TestCase):
    def setUp(self) -> None:
        self.codegen = JsxCodegen()

    def test_no_attributes(self) -> None:
        self.assertEqual(self.codegen.render_props(el("div")), "")

    def test_literal_attribute(self) -> None:
        node = el("input", {"type": "text"})
        self.assertEqual(self.codegen.render_props(node), " type='text'")

    def test_names_are_translated(self) -> None:
        node = el("label", {"class": "title", "for": "email", "onclick": "{{ onClick }}"})
        self.assertEqual(
            self.codegen.render_props(node),
            " className='title' htmlFor='email' onClick={ onClick }",
        )

    def test_attribute_order_is_kept(self) -> None:
        node = el("a", {"href": "{{ url }}", "target": "_blank", "data-id": "{{ id }}"})
        self.assertEqual(
            self.codegen.render_props(node),
            " href={ url } target='_blank' data-id={ id }",
        )

    def test_spread(self) -> None:
        node = el("div", {"use-props": "{{ props }}", "class": "box"})
        self.assertEqual(self.codegen.render_props(node), " { ...props } className='box'")

    def test_malformed_spread(self) -> None:
        node = el("div", {"use-props": "props"})
        with self.assertRaises(MalformedNodeError) as ctx:
            self.codegen.render_props(node)
        self.assertIn("<div>", str(ctx.exception))

    def test_custom_translator(self) -> None:
        codegen = JsxCodegen(translate=str.upper)
        self.assertEqual(codegen.render_props(el("div", {"id": "x"})), " ID='x'")


class TestElements(unittest.TestCase):
    def setUp(self) -> None:
        self.codegen = JsxCodegen()

    def test_self_closing(self) -> None:
        self.assertEqual(self.codegen.render_node(el("br"), "  "), "  <br />\n")

    def test_text(self) -> None:
        self.assertEqual(
            self.codegen.render_node(text("Hi {{ name }}"), "    "), "    Hi { name }\n"
        )

    def test_nested_children_are_indented(self) -> None:
        node = el("ul", {"class": "list"}, el("li", {}, text("One")), el("li", {}, text("Two")))
        self.assertEqual(
            self.codegen.render_node(node, ""),
            "<ul className='list'>\n"
            "  <li>\n"
            "    One\n"
            "  </li>\n"
            "  <li>\n"
            "    Two\n"
            "  </li>\n"
            "</ul>\n",
        )

    def test_alias_table(self) -> None:
        codegen = JsxCodegen(alias_table={"my-button": "MyButton"})
        node = el("my-button", {"label": "{{ text }}"}, text("Go"))
        self.assertEqual(
            codegen.render_node(node, ""),
            "<MyButton label={ text }>\n  Go\n</MyButton>\n",
        )

    def test_unaliased_tag_passes_through(self) -> None:
        codegen = JsxCodegen(alias_table={"my-button": "MyButton"})
        self.assertEqual(codegen.render_node(el("span"), ""), "<span />\n")

    def test_configured_indent(self) -> None:
        codegen = JsxCodegen(config=JsxWireConfig(indent="    "))
        node = el("p", {}, text("x"))
        self.assertEqual(codegen.render_node(node, ""), "<p>\n    x\n</p>\n")

    def test_unknown_node_type(self) -> None:
        with self.assertRaises(TypeError):
            self.codegen.render_node("not a node", "")  # type: ignore[arg-type]


class TestControls(unittest.TestCase):
    def setUp(self) -> None:
        self.codegen = JsxCodegen()

    def test_conditional_in_element_is_wrapped(self) -> None:
        node = el("div", {}, el("controls", {"test": "{{ cond }}"}, el("span")))
        self.assertEqual(
            self.codegen.render_node(node, ""),
            "<div>\n"
            "  { (cond) && (\n"
            "    <span />\n"
            "  ) }\n"
            "</div>\n",
        )

    def test_conditional_as_direct_control_child_is_not_wrapped(self) -> None:
        node = el("controls", {"test": "{{ cond }}"}, el("span"))
        self.assertEqual(
            self.codegen.render_node(node, "", is_direct_control_child=True),
            "(cond) && (\n  <span />\n)\n",
        )

    def test_loop(self) -> None:
        node = el(
            "controls",
            {"array": "{{ items }}", "item-name": "{{ it }}"},
            el("li", {}, text("{{ it.label }}")),
        )
        self.assertEqual(
            self.codegen.render_node(node, "", is_direct_control_child=True),
            "items.map(it => (\n"
            "  <li>\n"
            "    { it.label }\n"
            "  </li>\n"
            "))\n",
        )

    def test_loop_with_plain_item_name(self) -> None:
        node = el("controls", {"array": "{{ rows }}", "item-name": "row"}, el("tr"))
        self.assertEqual(
            self.codegen.render_node(node, ""),
            "{ rows.map(row => (\n  <tr />\n)) }\n",
        )

    def test_nested_controls_wrap_once(self) -> None:
        node = el(
            "ul",
            {},
            el(
                "controls",
                {"array": "{{ items }}", "item-name": "{{ it }}"},
                el("controls", {"test": "{{ it.visible }}"}, el("li")),
            ),
        )
        rendered = self.codegen.render_node(node, "")
        self.assertEqual(
            rendered,
            "<ul>\n"
            "  { items.map(it => (\n"
            "    (it.visible) && (\n"
            "      <li />\n"
            "    )\n"
            "  )) }\n"
            "</ul>\n",
        )
        self.assertEqual(rendered.count("{ "), 1)
        self.assertEqual(rendered.count(" }"), 1)

    def test_control_inside_element_inside_control_is_wrapped(self) -> None:
        node = el(
            "controls",
            {"test": "{{ open }}"},
            el("div", {}, el("controls", {"test": "{{ ready }}"}, el("p"))),
        )
        self.assertEqual(
            self.codegen.render_node(node, "", is_direct_control_child=True),
            "(open) && (\n"
            "  <div>\n"
            "    { (ready) && (\n"
            "      <p />\n"
            "    ) }\n"
            "  </div>\n"
            ")\n",
        )

    def test_test_wins_over_loop_attributes(self) -> None:
        node = el(
            "controls",
            {"test": "{{ ok }}", "array": "{{ xs }}", "item-name": "x"},
            el("i"),
        )
        self.assertTrue(
            self.codegen.render_node(node, "", True).startswith("(ok) && (")
        )

    def test_control_without_children(self) -> None:
        with self.assertRaises(MalformedNodeError):
            self.codegen.render_node(el("controls", {"test": "{{ x }}"}), "")

    def test_control_with_two_children(self) -> None:
        node = el("controls", {"test": "{{ x }}"}, el("a"), el("b"))
        with self.assertRaises(MalformedNodeError):
            self.codegen.render_node(node, "")

    def test_control_without_discriminant(self) -> None:
        for attrs in [{}, {"array": "{{ xs }}"}, {"item-name": "x"}]:
            with self.subTest(attrs=attrs):
                with self.assertRaises(MalformedNodeError):
                    self.codegen.render_node(el("controls", attrs, el("a")), "")

    def test_control_with_empty_test(self) -> None:
        with self.assertRaises(MalformedNodeError):
            self.codegen.render_node(el("controls", {"test": ""}, el("a")), "")

    def test_malformed_nested_control_aborts_render(self) -> None:
        node = el("div", {}, el("p"), el("controls", {}, el("a")))
        with self.assertRaises(MalformedNodeError):
            self.codegen.render_node(node, "")
        # The same codegen keeps working afterwards
        self.assertEqual(self.codegen.render_node(el("p"), ""), "<p />\n")


class TestRenderComponent(unittest.TestCase):
    def test_wraps_body_in_return(self) -> None:
        root = template(el("div", {"class": "card"}, text("{{ title }}")))
        self.assertEqual(
            render_component(root),
            "  return (\n"
            "    <div className='card'>\n"
            "      { title }\n"
            "    </div>\n"
            "  );\n",
        )

    def test_top_level_control_is_not_wrapped(self) -> None:
        root = template(
            el(
                "controls",
                {"array": "{{ items }}", "item-name": "{{ it }}"},
                el("controls", {"test": "{{ it.visible }}"}, el("li", {}, text("{{ it.name }}"))),
            )
        )
        self.assertEqual(
            render_component(root),
            "  return (\n"
            "    items.map(it => (\n"
            "      (it.visible) && (\n"
            "        <li>\n"
            "          { it.name }\n"
            "        </li>\n"
            "      )\n"
            "    ))\n"
            "  );\n",
        )

    def test_only_first_child_is_rendered(self) -> None:
        root = el("template", {}, el("main"), el("aside"))
        self.assertNotIn("aside", render_component(root))

    def test_uses_alias_table(self) -> None:
        root = template(el("x-icon", {"name": "star"}))
        self.assertEqual(
            render_component(root, {"x-icon": "Icon"}),
            "  return (\n    <Icon name='star' />\n  );\n",
        )

    def test_empty_template(self) -> None:
        with self.assertRaises(MalformedNodeError):
            render_component(el("template"))
