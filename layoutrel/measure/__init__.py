"""Measurement collaborator adapters."""

from layoutrel.measure.collaborator import (
    ElementHandle,
    PageHandle,
    measure_many,
    measure_pair,
    measure_rectangle,
    measure_viewport,
    scroll_into_view,
)
from layoutrel.measure.static import StaticElement, StaticPage

__all__ = [
    "ElementHandle",
    "PageHandle",
    "measure_many",
    "measure_pair",
    "measure_rectangle",
    "measure_viewport",
    "scroll_into_view",
    "StaticElement",
    "StaticPage",
]
