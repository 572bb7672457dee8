"""Image components: optimizer, rounded image adapter, theme-aware image."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlencode

from markupsafe import Markup

from src.common.config import ImageSettings, settings
from src.common.html import merge_classes, render_element, without

from .models import ImageProps, ThemedImageProps, validate_props

# Props consumed by the optimizer rather than emitted as attributes
_OPTIMIZER_PROPS = ("src", "unoptimized", "priority", "quality", "children")


class ImageLoader:
    """Builds optimizer URLs and srcsets for an image source."""

    def __init__(self, config: ImageSettings | None = None):
        self.config = config or settings.images

    def url(self, src: str, width: int, quality: int | None = None) -> str:
        query = urlencode({"url": src, "w": width, "q": quality or self.config.quality})
        return f"{self.config.loader_path}?{query}"

    def widths(self, intrinsic_width: Optional[int]) -> list[int]:
        """Candidate widths, capped at the intrinsic width when known."""
        sizes = sorted(set(self.config.device_sizes))
        if not intrinsic_width:
            return sizes
        capped = [w for w in sizes if w < intrinsic_width]
        return capped + [intrinsic_width]

    def srcset(self, src: str, intrinsic_width: Optional[int], quality: int | None = None) -> str:
        return ", ".join(
            f"{self.url(src, w, quality)} {w}w" for w in self.widths(intrinsic_width)
        )


class OptimizedImage:
    """Image optimization service.

    Renders ``<img>`` pointing at the loader with a responsive srcset.
    ``unoptimized`` (or a ``data:`` URI) keeps the original source.
    """

    def __init__(self, loader: ImageLoader | None = None):
        self.loader = loader or ImageLoader()

    def __call__(self, props: dict[str, Any]) -> Markup:
        image = validate_props(ImageProps, "OptimizedImage", props)
        attrs: dict[str, Any] = {"alt": image.alt}

        if props.get("unoptimized") or image.src.startswith("data:"):
            attrs["src"] = image.src
        else:
            quality = props.get("quality")
            widths = self.loader.widths(image.width)
            attrs["src"] = self.loader.url(image.src, widths[-1], quality)
            attrs["srcSet"] = self.loader.srcset(image.src, image.width, quality)

        if props.get("priority"):
            attrs["loading"] = "eager"
            attrs["fetchpriority"] = "high"
        else:
            attrs["loading"] = "lazy"
        attrs["decoding"] = "async"

        attrs.update(without(props, _OPTIMIZER_PROPS))
        return render_element("img", attrs)


class RoundedImage:
    """Registry entry for ``Image``: optimized image with rounded corners.

    The rounding class is always added to whatever classes the caller passes;
    every other caller prop wins.
    """

    ROUNDED_CLASS = "rounded-lg"

    def __init__(self, image: OptimizedImage | None = None):
        self.image = image or OptimizedImage()

    def __call__(self, props: dict[str, Any]) -> Markup:
        image = validate_props(ImageProps, "Image", props)
        merged = without(props, ("class",))
        merged["alt"] = image.alt
        merged["className"] = merge_classes(
            props.get("className"), props.get("class"), self.ROUNDED_CLASS
        )
        return self.image(merged)


class ImageWithTheme:
    """Registry entry for ``ImageWithTheme``: one image per color scheme."""

    def __init__(self, image: OptimizedImage | None = None):
        self.image = image or OptimizedImage()

    def __call__(self, props: dict[str, Any]) -> Markup:
        themed = validate_props(ThemedImageProps, "ImageWithTheme", props)
        rest = without(props, ("light", "dark", "children"))

        dark = self.image({**rest, "src": themed.dark})
        light = self.image({**rest, "src": themed.light})
        return (
            render_element("div", {"className": "hidden dark:block"}, dark)
            + render_element("div", {"className": "block dark:hidden"}, light)
        )
