"""Tests for viewport visibility checks on an 800x600 page."""

from __future__ import annotations

import math

import pytest

from layoutrel.engine.viewport import is_in_viewport, visible_area_ratio
from layoutrel.errors import UsageError
from layoutrel.measure.static import StaticElement, StaticPage
from layoutrel.utils.geometry import Rectangle


@pytest.mark.asyncio
async def test_fully_visible_element(make_element):
    full = make_element(0, 0, 120, 80)
    assert await is_in_viewport(full, fully_visible=True) is True


@pytest.mark.asyncio
async def test_half_visible_meets_threshold(make_element):
    half = make_element(750, 20, 100, 60)
    assert await visible_area_ratio(half) == pytest.approx(0.5)
    assert await is_in_viewport(half, threshold=0.45) is True
    assert await is_in_viewport(half, threshold=0.6) is False
    assert await is_in_viewport(half, fully_visible=True) is False


@pytest.mark.asyncio
async def test_default_threshold_accepts_any_overlap(make_element):
    assert await is_in_viewport(make_element(799, 10, 100, 10)) is True


@pytest.mark.asyncio
async def test_offscreen_element(make_element):
    off = make_element(900, 10, 50, 50)
    assert await visible_area_ratio(off) == 0.0
    assert await is_in_viewport(off, threshold=0.01) is False


@pytest.mark.asyncio
async def test_hidden_element(make_element):
    hidden = make_element()
    assert await is_in_viewport(hidden) is False
    assert await visible_area_ratio(hidden) == 0.0


@pytest.mark.asyncio
async def test_zero_area_element(make_element):
    flat = make_element(10, 10, 50, 0)
    assert await is_in_viewport(flat) is False
    assert await visible_area_ratio(flat) == 0.0


@pytest.mark.asyncio
async def test_padding_larger_than_viewport(make_element):
    full = make_element(0, 0, 120, 80)
    assert await is_in_viewport(full, padding=5000) is False
    assert await is_in_viewport(full, padding=5000, fully_visible=True) is False


@pytest.mark.asyncio
async def test_padding_with_fully_visible(make_element):
    assert await is_in_viewport(make_element(0, 0, 120, 80), fully_visible=True, padding=10) is False
    assert await is_in_viewport(make_element(20, 20, 100, 100), fully_visible=True, padding=10) is True
    assert await is_in_viewport(make_element(690, 20, 100, 100), fully_visible=True, padding=10) is True
    assert await is_in_viewport(make_element(691, 20, 100, 100), fully_visible=True, padding=10) is False


@pytest.mark.asyncio
async def test_padding_shrinks_visible_ratio(make_element):
    # Safe area is [50, 750] x [50, 550]; a quarter of the element lies inside
    corner = make_element(0, 0, 100, 100)
    assert await is_in_viewport(corner, threshold=0.25, padding=50) is True
    assert await is_in_viewport(corner, threshold=0.3, padding=50) is False


@pytest.mark.asyncio
async def test_visible_area_ratio_ignores_padding_and_is_bounded(make_element):
    assert await visible_area_ratio(make_element(0, 0, 100, 100)) == 1.0


@pytest.mark.asyncio
async def test_missing_page_or_viewport():
    rect = Rectangle(0, 0, 10, 10)
    no_page = StaticElement(rect, page=None)
    no_size = StaticElement(rect, page=StaticPage(None))
    for element in (no_page, no_size):
        assert await is_in_viewport(element) is False
        assert await visible_area_ratio(element) == 0.0


@pytest.mark.asyncio
async def test_playwright_shaped_handles():
    class Page:
        def viewport_size(self):
            return {"width": 800, "height": 600}

    class Locator:
        def page(self):
            return Page()

        async def bounding_box(self):
            return {"x": 0, "y": 0, "width": 120, "height": 80}

    assert await is_in_viewport(Locator(), fully_visible=True) is True


@pytest.mark.asyncio
@pytest.mark.parametrize("threshold", [-0.1, 1.5, math.nan])
async def test_threshold_out_of_range(make_element, threshold):
    # Raised even though the element is unrendered: validation precedes measurement
    with pytest.raises(UsageError, match="threshold"):
        await is_in_viewport(make_element(), threshold=threshold)


@pytest.mark.asyncio
async def test_threshold_ignored_when_fully_visible(make_element):
    assert await is_in_viewport(make_element(0, 0, 10, 10), fully_visible=True, threshold=2) is True


@pytest.mark.asyncio
async def test_negative_padding(make_element):
    with pytest.raises(UsageError, match="padding"):
        await is_in_viewport(make_element(0, 0, 10, 10), padding=-1)


@pytest.mark.asyncio
async def test_scroll_before_measuring(make_scrolling_element):
    el = make_scrolling_element(10, 10, 50, 50)
    assert await is_in_viewport(el, scroll_into_view=True, scroll_timeout_ms=250) is True
    assert el.scroll_calls == [250]


@pytest.mark.asyncio
async def test_no_scroll_unless_requested(make_scrolling_element):
    el = make_scrolling_element(10, 10, 50, 50)
    assert await is_in_viewport(el) is True
    assert el.scroll_calls == []


@pytest.mark.asyncio
async def test_scroll_failure_is_false(make_scrolling_element):
    el = make_scrolling_element(10, 10, 50, 50, fail=True)
    assert await is_in_viewport(el, scroll_into_view=True) is False


@pytest.mark.asyncio
async def test_scroll_timeout_is_false(make_scrolling_element):
    el = make_scrolling_element(10, 10, 50, 50, delay=1.0)
    assert await is_in_viewport(el, scroll_into_view=True, scroll_timeout_ms=20) is False


@pytest.mark.asyncio
async def test_scroll_unsupported_still_measures(make_element):
    assert await is_in_viewport(make_element(10, 10, 50, 50), scroll_into_view=True) is True
