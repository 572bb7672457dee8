"""
Jinja2 template loading and rendering.
Shared by the MDX components and the dashboard page.
"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup


class TemplateRenderer:
    """
    Renders HTML fragments and pages from a templates directory.

    Usage:
        renderer = TemplateRenderer(Path(__file__).parent / "templates")
        html = renderer.render("metric_card.jinja2", header="Views", metric=10)
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the template renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> Markup:
        """
        Render a template to markup.

        Args:
            template_name: Template file name (e.g., "pros_card.jinja2")
            **context: Template variables

        Returns:
            Rendered, already-escaped markup
        """
        template = self.env.get_template(template_name)
        return Markup(template.render(**context))
