"""Tests for blockdash.layout."""

from __future__ import annotations

import pytest

from blockdash.layout import Fill, Layout, Length, Rect, _distribute

# ── Rect ───────────────────────────────────────────────────────────────────


class TestRect:
    def test_edges(self) -> None:
        r = Rect(2, 3, 10, 5)
        assert (r.left, r.top, r.right, r.bottom) == (2, 3, 12, 8)
        assert r.area == 50

    def test_inner_applies_margin(self) -> None:
        assert Rect(0, 0, 120, 40).inner(4) == Rect(4, 4, 112, 32)

    def test_inner_saturates_each_axis(self) -> None:
        r = Rect(0, 0, 6, 20).inner(4)
        assert r == Rect(3, 4, 0, 12)
        assert r.is_empty()

    @pytest.mark.parametrize(
        "outer", [Rect(10, 10, 3, 40), Rect(5, 0, 50, 1), Rect(2, 2, 0, 0)]
    )
    def test_inner_stays_inside(self, outer: Rect) -> None:
        assert outer.contains(outer.inner(4))

    def test_intersects(self) -> None:
        a = Rect(0, 0, 10, 10)
        assert a.intersects(Rect(9, 9, 5, 5))
        assert not a.intersects(Rect(10, 0, 5, 5))
        assert not a.intersects(Rect(3, 3, 0, 4))

    def test_contains(self) -> None:
        outer = Rect(0, 0, 10, 10)
        assert outer.contains(Rect(2, 2, 8, 8))
        assert not outer.contains(Rect(2, 2, 9, 8))


# ── _distribute ────────────────────────────────────────────────────────────


class TestDistribute:
    def test_exact_split(self) -> None:
        assert _distribute(28, [1, 2, 1]) == [7, 14, 7]

    def test_sum_is_preserved(self) -> None:
        for total in range(0, 50):
            assert sum(_distribute(total, [1, 2, 3])) == total

    def test_largest_remainder_wins(self) -> None:
        # 110 / 3 → 36.67 and 73.33: the first slot has the bigger remainder
        assert _distribute(110, [1, 2]) == [37, 73]

    def test_tie_goes_to_later_slot(self) -> None:
        assert _distribute(5, [1, 1]) == [2, 3]

    def test_single_cell_goes_to_heavier_share(self) -> None:
        assert _distribute(1, [1, 2]) == [0, 1]

    def test_nothing_to_share(self) -> None:
        assert _distribute(0, [1, 2]) == [0, 0]
        assert _distribute(10, [0, 0]) == [0, 0]


# ── Layout ─────────────────────────────────────────────────────────────────


class TestLayoutSizes:
    def test_length_then_fill(self) -> None:
        layout = Layout.vertical([Length(1), Fill(1), Fill(2), Fill(1)], spacing=1)
        assert layout.sizes(32) == [1, 7, 14, 7]

    def test_length_capped_at_available(self) -> None:
        layout = Layout.vertical([Length(10), Fill(1)])
        assert layout.sizes(5) == [5, 0]

    def test_spacing_larger_than_space(self) -> None:
        layout = Layout.horizontal([Fill(1), Fill(1), Fill(1)], spacing=10)
        assert layout.sizes(8) == [0, 0, 0]

    def test_empty_constraints(self) -> None:
        assert Layout.horizontal([]).split(Rect(0, 0, 10, 10)) == []


class TestLayoutSplit:
    def test_vertical_bands_with_margin(self) -> None:
        bands = Layout.vertical(
            [Length(1), Fill(1), Fill(2), Fill(1)], margin=4, spacing=1
        ).split(Rect(0, 0, 120, 40))
        assert bands == [
            Rect(4, 4, 112, 1),
            Rect(4, 6, 112, 7),
            Rect(4, 14, 112, 14),
            Rect(4, 29, 112, 7),
        ]

    def test_horizontal_equal_halves(self) -> None:
        left, right = Layout.horizontal([Fill(1), Fill(1)], spacing=2).split(
            Rect(4, 6, 112, 7)
        )
        assert left == Rect(4, 6, 55, 7)
        assert right == Rect(61, 6, 55, 7)

    def test_regions_are_consecutive_with_gaps(self) -> None:
        regions = Layout.horizontal([Fill(1), Fill(2), Fill(3)], spacing=3).split(
            Rect(0, 0, 100, 1)
        )
        for a, b in zip(regions, regions[1:]):
            assert b.left - a.right == 3

    @pytest.mark.parametrize(("width", "height"), [(0, 0), (3, 3), (9, 9), (10, 2)])
    def test_tiny_areas_stay_inside(self, width: int, height: int) -> None:
        area = Rect(0, 0, width, height)
        regions = Layout.vertical(
            [Length(1), Fill(1), Fill(2), Fill(1)], margin=4, spacing=1
        ).split(area)
        assert len(regions) == 4
        for r in regions:
            assert r.width >= 0 and r.height >= 0
            assert r.is_empty() or area.contains(r)
