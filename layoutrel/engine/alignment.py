"""Alignment of two elements by edges or centers."""

from __future__ import annotations

from layoutrel.engine.constants import DEFAULT_ALIGN_TOLERANCE
from layoutrel.engine.registry import Arity, check
from layoutrel.engine.types import AlignMode, Axis
from layoutrel.errors import coerce_enum
from layoutrel.measure.collaborator import ElementHandle, measure_pair
from layoutrel.utils.geometry import Rectangle, bottom, center_x, center_y, right


def _within(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) <= tolerance


def aligned(a: Rectangle, b: Rectangle, axis: Axis, mode: AlignMode, tolerance: float) -> bool:
    if axis is Axis.X:
        if mode is AlignMode.EDGES:
            return _within(a.y, b.y, tolerance) and _within(bottom(a), bottom(b), tolerance)
        return _within(center_y(a), center_y(b), tolerance)
    if mode is AlignMode.EDGES:
        return _within(a.x, b.x, tolerance) and _within(right(a), right(b), tolerance)
    return _within(center_x(a), center_x(b), tolerance)


@check(
    name="are_aligned",
    arity=Arity.PAIR,
    description="Two elements share edges or centers on an axis",
)
async def are_aligned(
    first: ElementHandle,
    second: ElementHandle,
    *,
    axis: Axis | str,
    mode: AlignMode | str,
    tolerance: float = DEFAULT_ALIGN_TOLERANCE,
) -> bool:
    """True if the boxes are aligned within ``tolerance`` px.

    ``axis='x'`` compares top/bottom edges (or vertical centers) of elements
    laid out in a row; ``axis='y'`` compares left/right edges (or horizontal
    centers) of elements stacked in a column.
    """
    axis = coerce_enum(Axis, axis, "axis")
    mode = coerce_enum(AlignMode, mode, "mode")
    a, b = await measure_pair(first, second)
    if a is None or b is None:
        return False
    return aligned(a, b, axis, mode, tolerance)
