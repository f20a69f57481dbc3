"""Leaf-node rectangle arithmetic. No engine imports.

Every higher-level predicate is expressed through these primitives, so the
policy for degenerate and non-overlapping rectangles lives here only.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box in viewport coordinates.

    Negative width/height is not rejected; every derived computation treats
    it as empty.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_box(cls, box: Any) -> Rectangle:
        """Build a Rectangle from a collaborator payload (Rectangle or mapping)."""
        if isinstance(box, Rectangle):
            return box
        if isinstance(box, Mapping):
            try:
                return cls(
                    x=float(box["x"]),
                    y=float(box["y"]),
                    width=float(box["width"]),
                    height=float(box["height"]),
                )
            except KeyError as e:
                raise TypeError(f"Bounding box is missing key {e}") from None
        raise TypeError(f"Cannot build a Rectangle from {type(box).__name__}")

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class ViewportSize:
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Any) -> ViewportSize:
        if isinstance(size, ViewportSize):
            return size
        if isinstance(size, Mapping):
            try:
                return cls(width=float(size["width"]), height=float(size["height"]))
            except KeyError as e:
                raise TypeError(f"Viewport size is missing key {e}") from None
        raise TypeError(f"Cannot build a ViewportSize from {type(size).__name__}")


def area(r: Rectangle) -> float:
    """width × height, with negative dimensions counted as 0."""
    return max(0.0, r.width) * max(0.0, r.height)


def right(r: Rectangle) -> float:
    return r.x + r.width


def bottom(r: Rectangle) -> float:
    return r.y + r.height


def center_x(r: Rectangle) -> float:
    return r.x + r.width / 2


def center_y(r: Rectangle) -> float:
    return r.y + r.height / 2


def translate(r: Rectangle, dx: float = 0.0, dy: float = 0.0) -> Rectangle:
    """Move the rectangle by (dx, dy); size is unchanged."""
    return Rectangle(r.x + dx, r.y + dy, r.width, r.height)


def clamp_visible(view_width: float, view_height: float, r: Rectangle) -> Rectangle:
    """Intersect ``r`` with the region [0, view_width] × [0, view_height].

    Viewport dimensions are floored at 0. The result never has negative size.
    """
    x1 = max(0.0, r.x)
    y1 = max(0.0, r.y)
    x2 = min(right(r), max(0.0, view_width))
    y2 = min(bottom(r), max(0.0, view_height))
    return Rectangle(x1, y1, max(0.0, x2 - x1), max(0.0, y2 - y1))


def overlap_len(a1: float, a2: float, b1: float, b2: float) -> float:
    """Length of the overlap of intervals [a1, a2] and [b1, b2] (0 if disjoint)."""
    return max(0.0, min(a2, b2) - max(a1, b1))


def overlap_ratio_1d(a1: float, a2: float, b1: float, b2: float) -> float:
    """Overlap length divided by the shorter interval's length.

    Returns 0 when either interval has non-positive length.
    """
    shorter = min(a2 - a1, b2 - b1)
    if shorter <= 0:
        return 0.0
    return overlap_len(a1, a2, b1, b2) / shorter


def intersect(a: Rectangle, b: Rectangle) -> Rectangle:
    """Intersection rectangle; width/height are 0 when the boxes do not overlap."""
    x1 = max(a.x, b.x)
    y1 = max(a.y, b.y)
    x2 = min(right(a), right(b))
    y2 = min(bottom(a), bottom(b))
    return Rectangle(x1, y1, max(0.0, x2 - x1), max(0.0, y2 - y1))
