"""Viewport visibility: is an element inside the (padded) viewport, and how much of it."""

from __future__ import annotations

import logging

from layoutrel.config import settings
from layoutrel.engine.registry import Arity, check
from layoutrel.errors import require_non_negative, require_ratio
from layoutrel.measure import collaborator
from layoutrel.measure.collaborator import ElementHandle, measure_rectangle, measure_viewport
from layoutrel.utils.geometry import area, bottom, clamp_visible, right, translate

logger = logging.getLogger(__name__)


@check(
    name="is_in_viewport",
    arity=Arity.ONE,
    description="Element is fully or sufficiently visible inside the padded viewport",
)
async def is_in_viewport(
    element: ElementHandle,
    *,
    fully_visible: bool = False,
    threshold: float = 0.0,
    padding: float = 0.0,
    scroll_into_view: bool = False,
    scroll_timeout_ms: float | None = None,
) -> bool:
    """Check whether ``element`` is in the viewport.

    Args:
        fully_visible: Require every edge inside the padded viewport; ``threshold``
            is ignored in this mode.
        threshold: Minimum visible-area fraction in [0, 1].
        padding: Safe-area inset (px) removed from each viewport edge.
        scroll_into_view: Ask the collaborator to scroll first. A failed or
            timed-out scroll makes the check False.
        scroll_timeout_ms: Scroll budget; defaults to
            ``settings.layoutrel_scroll_timeout_ms``.

    Raises:
        UsageError: ``padding`` negative, or ``threshold`` outside [0, 1]
            while ``fully_visible`` is False.
    """
    require_non_negative(padding, "padding")
    if not fully_visible:
        require_ratio(threshold, "threshold")

    if scroll_into_view:
        if scroll_timeout_ms is None:
            scroll_timeout_ms = settings.layoutrel_scroll_timeout_ms
        if not await collaborator.scroll_into_view(element, scroll_timeout_ms):
            return False

    box = await measure_rectangle(element)
    if box is None or area(box) <= 0:
        return False

    viewport = await measure_viewport(element)
    if viewport is None:
        return False

    view_w = viewport.width - padding * 2
    view_h = viewport.height - padding * 2
    if view_w <= 0 or view_h <= 0:
        logger.debug("Padding %s leaves no usable viewport (%s)", padding, viewport)
        return False

    if fully_visible:
        return (
            box.x >= padding
            and box.y >= padding
            and right(box) <= viewport.width - padding
            and bottom(box) <= viewport.height - padding
        )

    visible = clamp_visible(view_w, view_h, translate(box, -padding, -padding))
    return area(visible) / area(box) >= threshold


@check(
    name="visible_area_ratio",
    arity=Arity.ONE,
    description="Fraction of the element's area inside the viewport",
)
async def visible_area_ratio(element: ElementHandle) -> float:
    """Visible area fraction in [0, 1]; 0 when the element or viewport is unavailable."""
    box = await measure_rectangle(element)
    if box is None or area(box) == 0:
        return 0.0
    viewport = await measure_viewport(element)
    if viewport is None:
        return 0.0
    visible = clamp_visible(viewport.width, viewport.height, box)
    return min(1.0, max(0.0, area(visible) / area(box)))
