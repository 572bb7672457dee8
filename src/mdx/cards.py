"""Call-out cards and the numbered step indicator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from markupsafe import Markup

from src.common.templating import TemplateRenderer

from .models import CalloutProps, StepProps, validate_props

TEMPLATES_DIR = Path(__file__).parent / "templates"


class CalloutCard:
    """Pros or cons call-out: "You might (not) use {title} if..." + list."""

    def __init__(self, variant: str, renderer: TemplateRenderer | None = None):
        if variant not in ("pros", "cons"):
            raise ValueError(f"Unknown call-out variant: {variant}")
        self.variant = variant
        self.renderer = renderer or TemplateRenderer(TEMPLATES_DIR)

    @property
    def name(self) -> str:
        return "ProsCard" if self.variant == "pros" else "ConsCard"

    def __call__(self, props: dict[str, Any]) -> Markup:
        items = props.get(self.variant, [])
        if isinstance(items, str):
            items = [items]
        card = validate_props(
            CalloutProps, self.name, {"title": props.get("title"), "items": items}
        )
        return self.renderer.render(
            "callout_card.jinja2",
            variant=self.variant,
            title=card.title,
            items=card.items,
        )


class Step:
    """Registry entry for ``Step``."""

    def __init__(self, renderer: TemplateRenderer | None = None):
        self.renderer = renderer or TemplateRenderer(TEMPLATES_DIR)

    def __call__(self, props: dict[str, Any]) -> Markup:
        step = validate_props(StepProps, "Step", props)
        return self.renderer.render("step.jinja2", number=step.number, title=step.title)

