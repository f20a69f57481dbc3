"""Shared test fixtures."""

from __future__ import annotations

import asyncio

import pytest

from layoutrel.measure.static import StaticElement, StaticPage
from layoutrel.utils.geometry import Rectangle, ViewportSize

# Viewport used by every scenario below
VIEWPORT = ViewportSize(800, 600)


class ScrollingElement(StaticElement):
    """Static element that can also be asked to scroll."""

    def __init__(self, rect, page=None, *, fail=False, delay=0.0):
        super().__init__(rect, page=page)
        self.fail = fail
        self.delay = delay
        self.scroll_calls: list[float] = []

    async def scroll_into_view_if_needed(self, timeout=None):
        self.scroll_calls.append(timeout)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RuntimeError("element is detached")


@pytest.fixture
def page() -> StaticPage:
    return StaticPage(VIEWPORT)


@pytest.fixture
def make_element(page):
    """Factory: make_element(x, y, w, h) → element on the 800×600 page; None → unrendered."""

    def _make(x=None, y=None, w=None, h=None, *, on_page=True):
        rect = None if x is None else Rectangle(x, y, w, h)
        return StaticElement(rect, page=page if on_page else None)

    return _make


@pytest.fixture
def make_scrolling_element(page):
    def _make(x, y, w, h, *, fail=False, delay=0.0):
        return ScrollingElement(Rectangle(x, y, w, h), page=page, fail=fail, delay=delay)

    return _make
