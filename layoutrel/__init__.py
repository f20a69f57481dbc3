"""layoutrel: geometric relationship checks for rendered page elements."""

from layoutrel.engine import (
    AlignMode,
    Axis,
    CheckSuite,
    Direction,
    LogicalDirection,
    Order,
    WritingDirection,
    are_aligned,
    edge_distance,
    in_order,
    intersection_area_ratio,
    is_in_viewport,
    relative_position,
    visible_area_ratio,
)
from layoutrel.errors import UsageError
from layoutrel.utils.geometry import Rectangle, ViewportSize

__version__ = "0.1.0"

__all__ = [
    "AlignMode",
    "Axis",
    "CheckSuite",
    "Direction",
    "LogicalDirection",
    "Order",
    "WritingDirection",
    "are_aligned",
    "edge_distance",
    "in_order",
    "intersection_area_ratio",
    "is_in_viewport",
    "relative_position",
    "visible_area_ratio",
    "UsageError",
    "Rectangle",
    "ViewportSize",
]
