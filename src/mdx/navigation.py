"""Default in-app navigation primitive.

The site's client router picks up anchors marked ``data-router-link`` and
navigates without a full reload. Any callable with the same signature can be
injected into the link adapter instead.
"""

from __future__ import annotations

from typing import Any, Callable

from markupsafe import Markup

from src.common.html import render_element

NavigationLink = Callable[..., Markup]


def router_link(href: str, children: Any = None, **props: Any) -> Markup:
    """Render an in-app link for ``href`` with pass-through props."""
    attrs = {"href": href, **props, "data-router-link": True}
    return render_element("a", attrs, children)
