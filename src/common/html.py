"""HTML emission helpers shared by components and renderers.

Props arrive in the JSX spelling used by compiled MDX documents
(``className``, ``htmlFor``); they are translated to HTML attribute
names here.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from markupsafe import Markup, escape

PROP_ALIASES = {
    "className": "class",
    "htmlFor": "for",
    "tabIndex": "tabindex",
    "srcSet": "srcset",
}

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})

_VALID_NAME = re.compile(r"^[A-Za-z_:][-A-Za-z0-9_:.]*$")


def attr_name(prop: str) -> str:
    """Translate a JSX-style prop name to its HTML attribute name."""
    return PROP_ALIASES.get(prop, prop)


def merge_classes(*values: Any) -> str:
    """Join class lists, dropping blanks and duplicates (first wins)."""
    seen: list[str] = []
    for value in values:
        if not value:
            continue
        if isinstance(value, (list, tuple, set)):
            tokens = [str(v) for v in value]
        else:
            tokens = str(value).split()
        for token in tokens:
            if token and token not in seen:
                seen.append(token)
    return " ".join(seen)


def render_attrs(props: dict[str, Any]) -> Markup:
    """Render a property bag as an escaped HTML attribute string.

    ``children`` is never an attribute. ``None``/``False`` drop the attribute,
    ``True`` renders it bare. Callables (event handlers), mappings and names
    that are not valid HTML attribute names cannot be serialized and are
    skipped.
    """
    parts: list[str] = []
    for prop, value in props.items():
        if prop == "children" or value is None or value is False:
            continue
        if callable(value) or isinstance(value, dict):
            continue
        name = attr_name(prop)
        if not _VALID_NAME.match(name):
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, (list, tuple, set)):
            value = " ".join(str(v) for v in value)
        parts.append(f' {name}="{escape(value)}"')
    return Markup("".join(parts))


def render_children(children: Any) -> Markup:
    """Render child content: markup passes through, text is escaped."""
    if children is None or children is False:
        return Markup("")
    if isinstance(children, (list, tuple)):
        return Markup("").join(render_children(c) for c in children)
    return escape(children)


def render_element(tag: str, attrs: dict[str, Any], children: Any = None) -> Markup:
    """Render a single HTML element."""
    attr_markup = render_attrs(attrs)
    if tag in VOID_ELEMENTS:
        return Markup(f"<{tag}{attr_markup} />")
    return Markup(f"<{tag}{attr_markup}>") + render_children(children) + Markup(f"</{tag}>")


def without(props: dict[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Copy of ``props`` without ``keys``."""
    excluded = set(keys)
    return {k: v for k, v in props.items() if k not in excluded}
