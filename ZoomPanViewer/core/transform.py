"""Transform math for the zoom/pan viewer.

The image element is drawn with a uniform scale followed by a translation,
both relative to the viewport's top-left corner:

    viewport = image_local * scale + translate

This module is UI-independent. All functions are pure and return a new
:class:`ViewTransform`; the viewer controller owns the current value.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config import ViewerConfig
from .constants import MIN_SCALE, MAX_SCALE

Point = Tuple[float, float]
Size = Tuple[float, float]


@dataclass(frozen=True)
class ViewTransform:
    """Uniform scale plus 2D translation of the image inside the viewport."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def to_image(self, point: Point) -> Point:
        """Convert a viewport-local point to image-local (untransformed) space."""
        x, y = point
        return ((x - self.translate_x) / self.scale, (y - self.translate_y) / self.scale)

    def to_viewport(self, point: Point) -> Point:
        """Convert an image-local point to viewport-local space."""
        x, y = point
        return (x * self.scale + self.translate_x, y * self.scale + self.translate_y)

    def translated(self, dx: float, dy: float) -> "ViewTransform":
        """Return a copy moved by (dx, dy) viewport pixels."""
        return replace(self, translate_x=self.translate_x + dx, translate_y=self.translate_y + dy)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def zoom_at_point(
    transform: ViewTransform,
    requested_scale: float,
    point: Point,
    min_scale: float = MIN_SCALE,
    max_scale: float = MAX_SCALE,
) -> ViewTransform:
    """Change the scale while keeping ``point`` visually stationary.

    The image-local point under ``point`` is computed with the current
    transform, the scale is replaced by the clamped request and the
    translation recomputed so the same image-local point lands on ``point``
    again. Pan clamping is left to the caller.

    Args:
        transform: Current transform
        requested_scale: Desired scale before clamping
        point: Anchor in viewport-local coordinates
        min_scale: Lower scale bound
        max_scale: Upper scale bound

    Returns:
        New transform with the clamped scale
    """
    new_scale = clamp(requested_scale, min_scale, max_scale)
    local_x, local_y = transform.to_image(point)
    px, py = point
    return ViewTransform(
        scale=new_scale,
        translate_x=px - local_x * new_scale,
        translate_y=py - local_y * new_scale,
    )


def _clamp_axis(translate: float, viewport_size: float, image_size: float) -> float:
    if image_size <= viewport_size:
        # Image fits on this axis: keep it centered, no panning
        return (viewport_size - image_size) / 2
    # translate = 0 puts the image's leading edge on the viewport's leading edge,
    # translate = viewport - image puts the trailing edges together
    return clamp(translate, viewport_size - image_size, 0.0)


def clamp_pan(transform: ViewTransform, viewport_size: Size, image_size: Size) -> ViewTransform:
    """Keep the scaled image from being dragged out of view.

    Each axis is handled independently: an image that fits is centered,
    a larger one is clamped so its edges never move inside the viewport.

    Args:
        transform: Current transform
        viewport_size: (width, height) of the viewport
        image_size: (width, height) of the image's intrinsic size

    Returns:
        Transform with a clamped translation and unchanged scale
    """
    vw, vh = viewport_size
    iw = image_size[0] * transform.scale
    ih = image_size[1] * transform.scale
    return replace(
        transform,
        translate_x=_clamp_axis(transform.translate_x, vw, iw),
        translate_y=_clamp_axis(transform.translate_y, vh, ih),
    )


def fit_to_viewport(viewport_size: Size, image_size: Size, config: ViewerConfig) -> Optional[ViewTransform]:
    """Compute the initial/reset framing.

    The contain-fit scale is multiplied by ``config.start_zoom``, clamped to
    the configured range, the image centered with the configured offsets
    added, and the pan clamped.

    Args:
        viewport_size: (width, height) of the viewport
        image_size: (width, height) of the image's intrinsic size
        config: Framing configuration

    Returns:
        The fitted transform, or None when any dimension is zero (image not
        loaded yet or viewport not laid out)
    """
    vw, vh = viewport_size
    iw, ih = image_size
    if not iw or not ih or not vw or not vh:
        return None

    fit_scale = min(vw / iw, vh / ih) * config.start_zoom
    scale = clamp(fit_scale, config.min_scale, config.max_scale)
    centered = ViewTransform(
        scale=scale,
        translate_x=(vw - iw * scale) / 2 + config.start_offset_x,
        translate_y=(vh - ih * scale) / 2 + config.start_offset_y,
    )
    return clamp_pan(centered, viewport_size, image_size)


def wheel_zoom_factor(delta: float, step: float) -> float:
    """Return ``step`` for a positive wheel delta (zoom in), ``1 / step`` otherwise."""
    return step if delta > 0 else 1.0 / step
