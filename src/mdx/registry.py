"""Component registry — maps MDX tag names to components.

The registry is assembled once and is read-only afterwards. Lookup is exact
match on the tag name; a miss is a normal outcome and the renderer falls back
to emitting the tag as a literal element.

Usage:
    components = create_mdx_components(data=SWRCache(fetcher))
    component = components.resolve("ProsCard")
    if component is not None:
        html = component({"title": "SWR", "pros": ["Caching"]})
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from src.dashboard.fetcher import SWRCache
from src.dashboard.widgets import AnalyticsCard, GumroadCard

from .cards import CalloutCard, Step
from .images import ImageLoader, ImageWithTheme, OptimizedImage, RoundedImage
from .links import CustomLink
from .models import Component
from .navigation import NavigationLink, router_link


class ComponentRegistry(Mapping[str, Component]):
    """Immutable tag name → component lookup table."""

    def __init__(self, entries: Iterable[tuple[str, Component]]):
        table: dict[str, Component] = {}
        for tag, component in entries:
            if tag in table:
                raise ValueError(f"Duplicate component tag: {tag}")
            table[tag] = component
        self._table = MappingProxyType(table)

    def resolve(self, tag: str) -> Optional[Component]:
        """Return the component for ``tag``, or None if not registered."""
        return self._table.get(tag)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._table)

    def __getitem__(self, tag: str) -> Component:
        return self._table[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ComponentRegistry({', '.join(self._table)})"


def create_mdx_components(
    data: SWRCache | None = None,
    navigation: NavigationLink = router_link,
    image_loader: ImageLoader | None = None,
) -> ComponentRegistry:
    """Assemble the registry of components available to MDX documents.

    Args:
        data: Data-fetching hook shared by the metric widgets
        navigation: In-app link primitive used for internal links
        image_loader: Loader used by the image optimizer

    Returns:
        Read-only ComponentRegistry
    """
    if data is None:
        data = SWRCache()
    image = OptimizedImage(image_loader)

    return ComponentRegistry([
        ("Image", RoundedImage(image)),
        ("ImageWithTheme", ImageWithTheme(image)),
        ("a", CustomLink(navigation)),
        ("Analytics", AnalyticsCard(data)),
        ("ConsCard", CalloutCard("cons")),
        ("Gumroad", GumroadCard(data)),
        ("ProsCard", CalloutCard("pros")),
        ("Step", Step()),
    ])


# Default registry, built at import
MDX_COMPONENTS = create_mdx_components()
