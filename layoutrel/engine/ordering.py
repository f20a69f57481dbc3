"""Reading order of a sequence of elements along one screen axis."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from layoutrel.engine.registry import Arity, check
from layoutrel.engine.types import Order
from layoutrel.errors import coerce_enum
from layoutrel.measure.collaborator import ElementHandle, measure_many
from layoutrel.utils.geometry import Rectangle, bottom, right

logger = logging.getLogger(__name__)


def _edges(boxes: Sequence[Rectangle]) -> NDArray[np.float64]:
    """Nx4 array of (left, top, right, bottom)."""
    return np.array(
        [(b.x, b.y, right(b), bottom(b)) for b in boxes],
        dtype=np.float64,
    )


def sequence_in_order(boxes: Sequence[Rectangle], order: Order, tolerance: float = 0.0) -> bool:
    """Check every adjacent (prev, next) pair; vacuously true below two boxes."""
    if len(boxes) < 2:
        return True
    edges = _edges(boxes)
    left, top, rgt, bot = edges[:, 0], edges[:, 1], edges[:, 2], edges[:, 3]

    if order is Order.LEFT_TO_RIGHT:
        holds = rgt[:-1] <= left[1:] + tolerance
    elif order is Order.RIGHT_TO_LEFT:
        holds = left[:-1] + tolerance >= rgt[1:]
    elif order is Order.TOP_TO_BOTTOM:
        holds = bot[:-1] <= top[1:] + tolerance
    else:
        holds = top[:-1] + tolerance >= bot[1:]

    if not holds.all():
        logger.debug("Order %s breaks at pair %d", order.value, int(np.argmin(holds)))
        return False
    return True


@check(
    name="in_order",
    arity=Arity.SEQUENCE,
    description="Elements appear in the given reading order",
)
async def in_order(
    elements: Sequence[ElementHandle],
    order: Order | str,
    tolerance: float = 0.0,
) -> bool:
    """True if ``elements`` follow ``order`` within ``tolerance`` px.

    All elements are measured concurrently; if any is missing the order cannot
    be established and the result is False.
    """
    order = coerce_enum(Order, order, "order")
    boxes = await measure_many(elements)
    if any(b is None for b in boxes):
        return False
    return sequence_in_order(boxes, order, tolerance)
