"""Shared defaults and lookup tables for the relationship checks."""

from layoutrel.engine.types import Direction, LogicalDirection, WritingDirection

# Pixels of slack when comparing edge/center coordinates for alignment.
DEFAULT_ALIGN_TOLERANCE = 1.0

# Bidi policy: logical start/end resolved against the writing direction.
# Vertical directions never consult this table.
LOGICAL_TO_PHYSICAL: dict[tuple[LogicalDirection, WritingDirection], Direction] = {
    (LogicalDirection.START, WritingDirection.LTR): Direction.LEFT,
    (LogicalDirection.END, WritingDirection.LTR): Direction.RIGHT,
    (LogicalDirection.START, WritingDirection.RTL): Direction.RIGHT,
    (LogicalDirection.END, WritingDirection.RTL): Direction.LEFT,
}
