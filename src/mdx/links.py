"""Link adapter — routes internal links in-app, hardens external ones.

Internal links (href starting with ``/`` or ``#``) go through the navigation
primitive. Everything else, including a missing href, opens in a new
browsing context with ``rel="noopener noreferrer"``.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from src.common.html import merge_classes, render_element, without

from .models import LinkDescriptor, LinkKind
from .navigation import NavigationLink, router_link

INTERNAL_PREFIXES = ("/", "#")
EXTERNAL_REL = ("noopener", "noreferrer")


def classify_href(href: Any) -> LinkDescriptor:
    """Classify an href as internal or external.

    Args:
        href: Raw href value from the property bag (may be missing)

    Returns:
        LinkDescriptor for this render
    """
    if isinstance(href, str) and href.startswith(INTERNAL_PREFIXES):
        return LinkDescriptor(href=href, kind=LinkKind.INTERNAL)
    return LinkDescriptor(href=href if isinstance(href, str) else None, kind=LinkKind.EXTERNAL)


def external_link_attrs(attrs: dict[str, Any]) -> dict[str, Any]:
    """Apply the external link policy to an attribute bag.

    ``target`` is always ``_blank``; ``rel`` always carries ``noopener`` and
    ``noreferrer`` in addition to any caller tokens.
    """
    merged = dict(attrs)
    merged["target"] = "_blank"
    merged["rel"] = merge_classes(attrs.get("rel"), EXTERNAL_REL)
    return merged


class CustomLink:
    """Registry entry for the ``a`` tag."""

    def __init__(self, navigation: NavigationLink = router_link):
        self.navigation = navigation

    def __call__(self, props: dict[str, Any]) -> Markup:
        link = classify_href(props.get("href"))
        children = props.get("children")

        if link.is_internal:
            rest = without(props, ("href", "children"))
            return self.navigation(link.href, children, **rest)

        return render_element("a", external_link_attrs(without(props, ("children",))), children)

    def __repr__(self) -> str:
        return f"CustomLink(navigation={getattr(self.navigation, '__name__', self.navigation)!r})"
