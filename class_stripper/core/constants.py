"""
Constants module for the cleaner.

This module centralizes the fixed attribute sets, default option values and
iteration ceilings used by the cleaning pipeline.
"""

# =============================================================================
# ATTRIBUTE CONSTANTS
# =============================================================================

CLASS_ATTRIBUTE = "class"
ID_ATTRIBUTE = "id"
STYLE_ATTRIBUTE = "style"

DATA_ATTRIBUTE_PREFIX = "data-"
ARIA_ATTRIBUTE_PREFIX = "aria-"

EVENT_HANDLER_ATTRIBUTES = frozenset(
    {
        "onclick",
        "ondblclick",
        "onmousedown",
        "onmouseup",
        "onmouseover",
        "onmousemove",
        "onmouseout",
        "onfocus",
        "onblur",
        "onkeypress",
        "onkeydown",
        "onkeyup",
        "onsubmit",
        "onreset",
        "onselect",
        "onchange",
        "onload",
        "onunload",
        "onerror",
        "onresize",
        "onscroll",
    }
)


# =============================================================================
# STRUCTURE CONSTANTS
# =============================================================================

WRAPPER_TAG = "div"

# Outer bubbling/pruning passes per optimize call
MAX_OPTIMIZE_PASSES = 10

# Wrapper bubbling sweeps per bubbling run
MAX_BUBBLE_SWEEPS = 10

# Empty div deletions per pruning run
MAX_EMPTY_DIV_REMOVALS = 20


# =============================================================================
# MARKUP CONSTANTS
# =============================================================================

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose end tag may be omitted
OPTIONAL_END_TAG_ELEMENTS = frozenset(
    {
        "p",
        "li",
        "dt",
        "dd",
        "option",
        "optgroup",
        "tr",
        "td",
        "th",
        "thead",
        "tbody",
        "tfoot",
        "colgroup",
        "caption",
        "rb",
        "rt",
        "rtc",
        "rp",
    }
)

# Start tag -> open elements it implicitly closes
IMPLIED_END_TAGS = {
    "p": frozenset({"p"}),
    "li": frozenset({"li"}),
    "dt": frozenset({"dt", "dd"}),
    "dd": frozenset({"dt", "dd"}),
    "option": frozenset({"option"}),
    "optgroup": frozenset({"option", "optgroup"}),
    "tr": frozenset({"tr", "td", "th"}),
    "td": frozenset({"td", "th"}),
    "th": frozenset({"td", "th"}),
    "tbody": frozenset({"thead", "tbody", "tr", "td", "th"}),
    "tfoot": frozenset({"thead", "tbody", "tr", "td", "th"}),
    "rt": frozenset({"rb", "rt", "rp"}),
    "rp": frozenset({"rb", "rt", "rp"}),
}

# Text inside these tags is left untouched by the beautifier
WHITESPACE_SENSITIVE_TAGS = frozenset({"pre", "textarea"})

# Phrasing content: kept on the line of the surrounding text when beautifying
INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "audio",
        "b",
        "bdi",
        "bdo",
        "big",
        "br",
        "button",
        "canvas",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "iframe",
        "img",
        "input",
        "ins",
        "kbd",
        "label",
        "mark",
        "math",
        "meter",
        "noscript",
        "object",
        "output",
        "picture",
        "progress",
        "q",
        "ruby",
        "s",
        "samp",
        "script",
        "select",
        "small",
        "span",
        "strike",
        "strong",
        "style",
        "sub",
        "sup",
        "svg",
        "textarea",
        "time",
        "tt",
        "u",
        "var",
        "video",
        "wbr",
    }
)


# =============================================================================
# BEAUTIFY CONSTANTS
# =============================================================================

DEFAULT_INDENT_SIZE = 2


# =============================================================================
# SETTINGS CONSTANTS
# =============================================================================

TRUTHY_VALUES = ("true", "1", "yes", "on")
FALSY_VALUES = ("false", "0", "no", "off")
