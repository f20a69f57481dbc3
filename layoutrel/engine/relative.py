"""Relative position and signed edge distance between two elements.

Tolerance always relaxes the ordering check: it is added on whichever side
of the inequality would otherwise make the check fail.
"""

from __future__ import annotations

from layoutrel.engine.constants import LOGICAL_TO_PHYSICAL
from layoutrel.engine.registry import Arity, check
from layoutrel.engine.types import Direction, LogicalDirection, WritingDirection
from layoutrel.errors import coerce_enum, require_non_negative, require_ratio
from layoutrel.measure.collaborator import ElementHandle, measure_pair
from layoutrel.utils.geometry import Rectangle, bottom, overlap_ratio_1d, right


def map_logical(
    direction: Direction,
    logical: LogicalDirection | None,
    writing_direction: WritingDirection = WritingDirection.LTR,
) -> Direction:
    """Resolve a logical start/end request to a physical direction.

    Vertical directions pass through unchanged.
    """
    if logical is None or not direction.is_horizontal:
        return direction
    return LOGICAL_TO_PHYSICAL[(logical, writing_direction)]


def _vertical_overlap(a: Rectangle, b: Rectangle) -> float:
    return overlap_ratio_1d(a.y, bottom(a), b.y, bottom(b))


def _horizontal_overlap(a: Rectangle, b: Rectangle) -> float:
    return overlap_ratio_1d(a.x, right(a), b.x, right(b))


def position_holds(
    subject: Rectangle,
    reference: Rectangle,
    direction: Direction,
    *,
    overlap_ratio: float = 0.0,
    gap: float = 0.0,
    tolerance: float = 0.0,
) -> bool:
    """Evaluate the relative-position predicate on measured rectangles."""
    s, r, tol = subject, reference, tolerance
    if direction is Direction.LEFT:
        ordering = right(s) <= r.x - gap + tol
        overlap = _vertical_overlap(s, r)
    elif direction is Direction.RIGHT:
        ordering = s.x + tol >= right(r) + gap
        overlap = _vertical_overlap(s, r)
    elif direction is Direction.ABOVE:
        ordering = bottom(s) <= r.y - gap + tol
        overlap = _horizontal_overlap(s, r)
    else:
        ordering = s.y + tol >= bottom(r) + gap
        overlap = _horizontal_overlap(s, r)
    return ordering and overlap + tol >= overlap_ratio


@check(
    name="relative_position",
    arity=Arity.PAIR,
    description="Subject lies left/right/above/below the reference",
)
async def relative_position(
    subject: ElementHandle,
    reference: ElementHandle,
    direction: Direction | str,
    *,
    overlap_ratio: float = 0.0,
    gap: float = 0.0,
    tolerance: float = 0.0,
    logical: LogicalDirection | str | None = None,
    writing_direction: WritingDirection | str = WritingDirection.LTR,
) -> bool:
    """Check that ``subject`` lies in ``direction`` of ``reference``.

    Args:
        direction: 'left', 'right', 'above' or 'below'.
        overlap_ratio: Required overlap on the orthogonal axis, as a fraction
            of the shorter extent.
        gap: Minimum distance (px) between the facing edges.
        tolerance: Pixel slack; relaxes both the ordering and the overlap check.
        logical: 'start'/'end'; when given, a horizontal direction is replaced by
            the physical side it maps to under ``writing_direction``.

    Returns False when either element cannot be measured.
    """
    direction = coerce_enum(Direction, direction, "direction")
    writing_direction = coerce_enum(WritingDirection, writing_direction, "writing_direction")
    if logical is not None:
        logical = coerce_enum(LogicalDirection, logical, "logical")
    require_non_negative(gap, "gap")
    require_ratio(overlap_ratio, "overlap_ratio")

    physical = map_logical(direction, logical, writing_direction)
    a, b = await measure_pair(subject, reference)
    if a is None or b is None:
        return False
    return position_holds(
        a, b, physical, overlap_ratio=overlap_ratio, gap=gap, tolerance=tolerance
    )


def signed_distance(first: Rectangle, second: Rectangle, direction: Direction) -> float:
    """Gap from ``first`` to ``second`` along ``direction``; <= 0 means touching or overlapping."""
    if direction is Direction.LEFT:
        return second.x - right(first)
    if direction is Direction.RIGHT:
        return first.x - right(second)
    if direction is Direction.ABOVE:
        return second.y - bottom(first)
    return first.y - bottom(second)


@check(
    name="edge_distance",
    arity=Arity.PAIR,
    description="Signed distance between facing edges",
)
async def edge_distance(
    first: ElementHandle,
    second: ElementHandle,
    direction: Direction | str,
) -> float | None:
    """Signed edge distance (px) from ``first`` to ``second``, or None if either is missing."""
    direction = coerce_enum(Direction, direction, "direction")
    a, b = await measure_pair(first, second)
    if a is None or b is None:
        return None
    return signed_distance(a, b, direction)
