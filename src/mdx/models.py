"""Data models for the MDX component layer.

Components take an open property bag. Each component declares the keys it
relies on as a pydantic model that tolerates extra keys, so pass-through
attributes survive validation untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Literal, Optional

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# A component renders a property bag into markup.
Component = Callable[[dict[str, Any]], Markup]


class ComponentPropsError(ValueError):
    """Raised when a component receives a property bag it cannot render."""

    def __init__(self, component: str, detail: str):
        self.component = component
        self.detail = detail
        super().__init__(f"{component}: {detail}")


class LinkKind(str, Enum):
    """How a hyperlink target is handled."""
    INTERNAL = "internal"  # routed in-app
    EXTERNAL = "external"  # new browsing context


@dataclass(frozen=True)
class LinkDescriptor:
    """Classification of a link, derived from its href at render time."""
    href: Optional[str]
    kind: LinkKind

    @property
    def is_internal(self) -> bool:
        return self.kind is LinkKind.INTERNAL


# === Component capability models ===

class _Props(BaseModel):
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)


class ImageProps(_Props):
    """Anything renderable by the image optimizer."""
    alt: str
    src: str
    width: Optional[int] = None
    height: Optional[int] = None


class ThemedImageProps(_Props):
    """Image with one source per color scheme."""
    alt: str
    light: str
    dark: str
    width: Optional[int] = None
    height: Optional[int] = None


class CalloutProps(_Props):
    """Pros/cons call-out card."""
    title: str
    items: list[str] = Field(default_factory=list)


class StepProps(_Props):
    """Numbered step indicator."""
    number: int = Field(ge=0)
    title: str


def validate_props(model: type[_Props], component: str, props: dict[str, Any]) -> Any:
    """Validate a property bag against a capability model.

    Raises:
        ComponentPropsError: If required keys are missing or mistyped.
    """
    try:
        return model.model_validate(props)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors()
        )
        raise ComponentPropsError(component, f"invalid props ({fields})") from e


# === Compiled document tree ===

class DocumentNode(BaseModel):
    """A node of a compiled MDX document.

    ``root`` and ``element`` nodes hold children; ``text`` nodes hold
    ``value``. Element ``props`` are the raw attribute bag from the source.
    """
    type: Literal["root", "element", "text"] = "element"
    tag: str = ""
    props: dict[str, Any] = Field(default_factory=dict)
    value: str = ""
    children: list[DocumentNode] = Field(default_factory=list)

    @classmethod
    def text(cls, value: str) -> DocumentNode:
        return cls(type="text", value=value)

    @classmethod
    def element(cls, tag: str, props: dict[str, Any] | None = None,
                children: list[DocumentNode] | None = None) -> DocumentNode:
        return cls(type="element", tag=tag, props=props or {}, children=children or [])

    @classmethod
    def root(cls, children: list[DocumentNode]) -> DocumentNode:
        return cls(type="root", children=children)


DocumentNode.model_rebuild()
