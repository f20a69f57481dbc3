"""Recorded layout: a viewport plus named element rectangles."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from layoutrel.measure.static import StaticElement, StaticPage
from layoutrel.utils.geometry import Rectangle, ViewportSize

logger = logging.getLogger(__name__)


class BoxModel(BaseModel):
    x: float
    y: float
    width: float
    height: float

    def to_rectangle(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)


class ViewportModel(BaseModel):
    width: float
    height: float


class LayoutSnapshot(BaseModel):
    viewport: ViewportModel | None = Field(
        default=None, description="Viewport size; null when unknown"
    )
    elements: dict[str, BoxModel | None] = Field(
        default_factory=dict,
        description="Element rectangles by name; null marks an unrendered element",
    )

    @classmethod
    def load(cls, path: str | Path) -> LayoutSnapshot:
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    def page(self) -> StaticPage:
        if self.viewport is None:
            return StaticPage(None)
        return StaticPage(ViewportSize(self.viewport.width, self.viewport.height))

    def element(self, name: str, page: StaticPage | None = None) -> StaticElement:
        """Static handle for ``name``; unknown names behave as unrendered elements."""
        if name not in self.elements:
            logger.warning("Element %r not in snapshot; treating it as unrendered", name)
        box = self.elements.get(name)
        rect = box.to_rectangle() if box is not None else None
        return StaticElement(rect, page=page if page is not None else self.page(), name=name)
