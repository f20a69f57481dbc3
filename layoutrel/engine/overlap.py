"""Intersection area ratio between two elements."""

from __future__ import annotations

from layoutrel.engine.registry import Arity, check
from layoutrel.measure.collaborator import ElementHandle, measure_pair
from layoutrel.utils.geometry import area, intersect


@check(
    name="intersection_area_ratio",
    arity=Arity.PAIR,
    description="Share of the first element's area covered by the second",
)
async def intersection_area_ratio(first: ElementHandle, second: ElementHandle) -> float:
    """area(first ∩ second) / area(first), in [0, 1].

    The denominator is always the first element, so the ratio is asymmetric.
    Returns 0 when either element is missing or the first has no area.
    """
    a, b = await measure_pair(first, second)
    if a is None or b is None or area(a) == 0:
        return 0.0
    return min(1.0, max(0.0, area(intersect(a, b)) / area(a)))
