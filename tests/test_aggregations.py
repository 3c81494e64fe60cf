"""Tests for the drill-down facet routines used directly against an index."""

from __future__ import annotations

from facetsearch_core import (
    COLORS,
    SIZES,
    Color,
    MultiKeyIndex,
    Shirt,
    Size,
    color_facet,
    size_facet,
)


class TestColorFacet:
    def test_counts_all_sizes_without_size_filter(self) -> None:
        index = MultiKeyIndex([
            Shirt(Color.RED, Size.SMALL),
            Shirt(Color.RED, Size.LARGE),
            Shirt(Color.BLUE, Size.SMALL),
        ])
        result = color_facet(index, COLORS, (), ())

        assert result.count_of(Color.RED) == 2
        assert result.count_of(Color.BLUE) == 1
        assert result.count_of(Color.BLACK) == 0

    def test_duplicate_size_values_counted_once(self) -> None:
        index = MultiKeyIndex([Shirt(Color.RED, Size.SMALL)])
        result = color_facet(index, COLORS, (), [Size.SMALL, Size.SMALL])

        assert result.count_of(Color.RED) == 1
        assert result.total == 1

    def test_duplicate_color_values_only_mark_selected(self) -> None:
        index = MultiKeyIndex([Shirt(Color.RED, Size.SMALL)])
        result = color_facet(index, COLORS, [Color.RED, Color.RED], ())

        assert [v.value for v in result.values if v.selected] == [Color.RED]
        assert result.count_of(Color.RED) == 1


class TestSizeFacet:
    def test_duplicate_color_values_counted_once(self) -> None:
        index = MultiKeyIndex([
            Shirt(Color.RED, Size.SMALL),
            Shirt(Color.BLUE, Size.LARGE),
        ])
        result = size_facet(index, SIZES, (), [Color.BLUE, Color.RED, Color.BLUE])

        assert result.count_of(Size.SMALL) == 1
        assert result.count_of(Size.LARGE) == 1
        assert result.total == 2

    def test_accepts_generator_filters(self) -> None:
        index = MultiKeyIndex([Shirt(Color.WHITE, Size.MEDIUM)])
        result = size_facet(index, SIZES, (), (c for c in [Color.WHITE, Color.WHITE]))

        assert result.count_of(Size.MEDIUM) == 1
