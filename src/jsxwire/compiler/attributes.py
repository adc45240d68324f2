"""Template attribute names and their JSX prop spellings."""

import re
from typing import Callable, Dict

# Reserved element carrying conditional / loop logic
CONTROLS_TAG = "controls"
CONDITIONALS_TEST = "test"
LOOP_ARRAY = "array"
LOOP_VAR_NAME = "item-name"

# `<div use-props="{{ props }}">` spreads an object into the element's props.
# `to_jsx` maps the template name onto the marker below.
SPREAD_ATTRIBUTE = "use-props"
PROPS_SPREADING = "..."

AttributeTranslator = Callable[[str], str]

# HTML attributes whose JSX prop name is not derivable by camel-casing
HTML_TO_JSX: Dict[str, str] = {
    "class": "className",
    "for": "htmlFor",
    "accept-charset": "acceptCharset",
    "accesskey": "accessKey",
    "allowfullscreen": "allowFullScreen",
    "autocomplete": "autoComplete",
    "autofocus": "autoFocus",
    "autoplay": "autoPlay",
    "cellpadding": "cellPadding",
    "cellspacing": "cellSpacing",
    "charset": "charSet",
    "colspan": "colSpan",
    "contenteditable": "contentEditable",
    "crossorigin": "crossOrigin",
    "datetime": "dateTime",
    "enctype": "encType",
    "formaction": "formAction",
    "frameborder": "frameBorder",
    "http-equiv": "httpEquiv",
    "inputmode": "inputMode",
    "maxlength": "maxLength",
    "minlength": "minLength",
    "novalidate": "noValidate",
    "readonly": "readOnly",
    "rowspan": "rowSpan",
    "spellcheck": "spellCheck",
    "srcdoc": "srcDoc",
    "srcset": "srcSet",
    "tabindex": "tabIndex",
    "usemap": "useMap",
    SPREAD_ATTRIBUTE: PROPS_SPREADING,
}

# DOM event attributes, `onclick` -> `onClick`
EVENT_TO_JSX: Dict[str, str] = {
    "onblur": "onBlur",
    "onchange": "onChange",
    "onclick": "onClick",
    "oncontextmenu": "onContextMenu",
    "ondblclick": "onDoubleClick",
    "ondrag": "onDrag",
    "ondragend": "onDragEnd",
    "ondragenter": "onDragEnter",
    "ondragleave": "onDragLeave",
    "ondragover": "onDragOver",
    "ondragstart": "onDragStart",
    "ondrop": "onDrop",
    "onfocus": "onFocus",
    "oninput": "onInput",
    "onkeydown": "onKeyDown",
    "onkeypress": "onKeyPress",
    "onkeyup": "onKeyUp",
    "onload": "onLoad",
    "onmousedown": "onMouseDown",
    "onmouseenter": "onMouseEnter",
    "onmouseleave": "onMouseLeave",
    "onmousemove": "onMouseMove",
    "onmouseout": "onMouseOut",
    "onmouseover": "onMouseOver",
    "onmouseup": "onMouseUp",
    "onreset": "onReset",
    "onscroll": "onScroll",
    "onsubmit": "onSubmit",
    "ontouchend": "onTouchEnd",
    "ontouchmove": "onTouchMove",
    "ontouchstart": "onTouchStart",
    "onwheel": "onWheel",
}

_KEBAB_SEGMENT = re.compile(r"-([a-z0-9])")


def to_jsx(name: str) -> str:
    """Translate a template attribute name to its JSX prop name."""
    if name in HTML_TO_JSX:
        return HTML_TO_JSX[name]
    if name in EVENT_TO_JSX:
        return EVENT_TO_JSX[name]

    # data-* and aria-* are valid JSX as written
    if name.startswith(("data-", "aria-")):
        return name

    # item-count -> itemCount
    return _KEBAB_SEGMENT.sub(lambda m: m.group(1).upper(), name)


def pascal_case(name: str) -> str:
    """`my-button` -> `MyButton`, used for component identifiers."""
    return "".join(
        word[:1].upper() + word[1:] for word in re.split(r"[^0-9A-Za-z]+", name) if word
    )
