"""Direction and ordering vocabularies shared by the relationship checks."""

from __future__ import annotations

import enum


class Direction(str, enum.Enum):
    """Physical direction, after any logical mapping."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


class LogicalDirection(str, enum.Enum):
    START = "start"
    END = "end"


class WritingDirection(str, enum.Enum):
    LTR = "ltr"
    RTL = "rtl"


class Order(str, enum.Enum):
    LEFT_TO_RIGHT = "leftToRight"
    RIGHT_TO_LEFT = "rightToLeft"
    TOP_TO_BOTTOM = "topToBottom"
    BOTTOM_TO_TOP = "bottomToTop"


class Axis(str, enum.Enum):
    # 'x' compares top/bottom edges (a row), 'y' compares left/right edges (a column)
    X = "x"
    Y = "y"


class AlignMode(str, enum.Enum):
    EDGES = "edges"
    CENTERS = "centers"
