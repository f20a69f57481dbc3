"""Tests for edge/center alignment."""

import pytest

from layoutrel.engine.alignment import are_aligned
from layoutrel.engine.types import AlignMode, Axis
from layoutrel.errors import UsageError


@pytest.fixture
def pair(make_element):
    # Row items whose heights differ by one pixel
    return make_element(2, 2, 60, 30), make_element(64, 2, 60, 31)


@pytest.mark.asyncio
async def test_row_edges_with_tolerance(pair):
    a, b = pair
    assert await are_aligned(a, b, axis="x", mode="edges", tolerance=2) is True
    assert await are_aligned(a, b, axis="x", mode="edges", tolerance=0) is False


@pytest.mark.asyncio
async def test_row_centers_with_tolerance(pair):
    a, b = pair
    assert await are_aligned(a, b, axis=Axis.X, mode=AlignMode.CENTERS, tolerance=2) is True
    assert await are_aligned(a, b, axis=Axis.X, mode=AlignMode.CENTERS, tolerance=0) is False


@pytest.mark.asyncio
async def test_default_tolerance_is_one_pixel(pair):
    a, b = pair
    assert await are_aligned(a, b, axis="x", mode="edges") is True


@pytest.mark.asyncio
async def test_column_alignment(make_element):
    top = make_element(10, 0, 40, 20)
    same = make_element(10, 50, 40, 20)
    narrower = make_element(12, 50, 36, 20)
    assert await are_aligned(top, same, axis="y", mode="edges") is True
    assert await are_aligned(top, narrower, axis="y", mode="edges") is False
    assert await are_aligned(top, narrower, axis="y", mode="centers", tolerance=0) is True


@pytest.mark.asyncio
async def test_missing_element(pair, make_element):
    a, _ = pair
    assert await are_aligned(a, make_element(), axis="x", mode="edges") is False


@pytest.mark.asyncio
async def test_invalid_axis_or_mode(pair):
    a, b = pair
    with pytest.raises(UsageError, match="axis"):
        await are_aligned(a, b, axis="z", mode="edges")
    with pytest.raises(UsageError, match="mode"):
        await are_aligned(a, b, axis="x", mode="baseline")
