"""Relationship engine: viewport, position, alignment, order and overlap checks.

Importing this package registers every check with the registry.
"""

from layoutrel.engine.registry import Arity, check, get_registry
from layoutrel.engine.types import (
    AlignMode,
    Axis,
    Direction,
    LogicalDirection,
    Order,
    WritingDirection,
)
from layoutrel.engine.viewport import is_in_viewport, visible_area_ratio
from layoutrel.engine.relative import edge_distance, map_logical, relative_position
from layoutrel.engine.alignment import are_aligned
from layoutrel.engine.ordering import in_order
from layoutrel.engine.overlap import intersection_area_ratio
from layoutrel.engine.suite import CheckSuite

__all__ = [
    "Arity",
    "check",
    "get_registry",
    "AlignMode",
    "Axis",
    "Direction",
    "LogicalDirection",
    "Order",
    "WritingDirection",
    "is_in_viewport",
    "visible_area_ratio",
    "relative_position",
    "map_logical",
    "edge_distance",
    "are_aligned",
    "in_order",
    "intersection_area_ratio",
    "CheckSuite",
]
