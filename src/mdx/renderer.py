"""
Document renderer for compiled MDX trees.
Resolves custom elements through the component registry and emits HTML.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from markupsafe import Markup, escape

from src.common.config import settings
from src.common.html import render_element
from src.common.layout import render_page
from src.common.logging import setup_logging

from .models import ComponentPropsError, DocumentNode
from .registry import MDX_COMPONENTS, ComponentRegistry

logger = setup_logging(module_name="mdx.renderer")

_TAG_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


class DocumentRenderer:
    """
    Renders compiled MDX documents to HTML.

    Usage:
        renderer = DocumentRenderer()
        html = renderer.render(load_document(Path("content/blog/post.json")))
    """

    def __init__(self, components: ComponentRegistry = MDX_COMPONENTS):
        """
        Initialize the document renderer.

        Args:
            components: Registry used to resolve custom elements.
        """
        self.components = components

    def render(self, node: DocumentNode) -> Markup:
        """
        Render a document node and its descendants.

        Args:
            node: Root, element, or text node

        Returns:
            Rendered HTML markup
        """
        if node.type == "text":
            return escape(node.value)

        children = Markup("").join(self.render(child) for child in node.children)
        if node.type == "root":
            return children

        return self._render_element(node, children)

    def _render_element(self, node: DocumentNode, children: Markup) -> Markup:
        component = self.components.resolve(node.tag)

        if component is None:
            if not _TAG_NAME.match(node.tag):
                logger.warning("Dropping element with invalid tag name %r", node.tag)
                return children
            return render_element(node.tag, node.props, children if node.children else None)

        props: dict[str, Any] = dict(node.props)
        if node.children:
            props["children"] = children

        try:
            return component(props)
        except ComponentPropsError as e:
            logger.warning("Skipping <%s>: %s", node.tag, e.detail)
            return Markup("")


def load_document(path: Path) -> DocumentNode:
    """
    Load a compiled MDX document from a JSON file.

    Args:
        path: Path to the compiled document

    Returns:
        Root DocumentNode. A bare list of nodes is wrapped in a root.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return DocumentNode.root([DocumentNode.model_validate(n) for n in data])
    return DocumentNode.model_validate(data)


def render_document(
    path: Path,
    renderer: DocumentRenderer | None = None,
) -> str:
    """
    Convenience function to render a compiled document file as a full page.

    Title, description, and date come from the document's root props
    (the MDX front matter), falling back to the site defaults.
    """
    renderer = renderer or DocumentRenderer()
    tree = load_document(path)
    meta = tree.props
    return render_page(
        renderer.render(tree),
        title=meta.get("title") or settings.site.title,
        description=meta.get("summary") or meta.get("description", ""),
        path=meta.get("path", "/"),
        date=meta.get("publishedAt"),
        og_type="article" if meta.get("publishedAt") else "website",
    )
