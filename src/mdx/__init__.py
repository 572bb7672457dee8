# MDX Components — tag registry and renderer for compiled MDX documents

from .cards import CalloutCard, Step
from .images import ImageLoader, ImageWithTheme, OptimizedImage, RoundedImage
from .links import CustomLink, classify_href, external_link_attrs
from .models import (
    Component,
    ComponentPropsError,
    DocumentNode,
    LinkDescriptor,
    LinkKind,
)
from .navigation import router_link
from .registry import MDX_COMPONENTS, ComponentRegistry, create_mdx_components
from .renderer import DocumentRenderer, load_document, render_document

__all__ = [
    "CalloutCard",
    "Step",
    "ImageLoader",
    "ImageWithTheme",
    "OptimizedImage",
    "RoundedImage",
    "CustomLink",
    "classify_href",
    "external_link_attrs",
    "Component",
    "ComponentPropsError",
    "DocumentNode",
    "LinkDescriptor",
    "LinkKind",
    "router_link",
    "MDX_COMPONENTS",
    "ComponentRegistry",
    "create_mdx_components",
    "DocumentRenderer",
    "load_document",
    "render_document",
]
