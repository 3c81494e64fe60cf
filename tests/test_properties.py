"""Property checks: indexed engine against the scan engine on random catalogs."""

from __future__ import annotations

from collections import Counter

import pytest

from facetsearch_core import Color, SearchOptions, Size

QUERIES = [
    SearchOptions(),
    SearchOptions(colors=[Color.RED]),
    SearchOptions(colors=[Color.BLACK, Color.YELLOW, Color.RED]),
    SearchOptions(sizes=[Size.MEDIUM]),
    SearchOptions(sizes=[Size.LARGE, Size.SMALL]),
    SearchOptions(colors=[Color.BLUE], sizes=[Size.SMALL]),
    SearchOptions(colors=[Color.WHITE, Color.BLUE], sizes=[Size.LARGE, Size.MEDIUM]),
    SearchOptions(colors=list(Color), sizes=list(Size)),
]


def matches(shirt, options: SearchOptions) -> bool:
    return (not options.colors or shirt.color in options.colors) and (
        not options.sizes or shirt.size in options.sizes
    )


@pytest.mark.parametrize("options", QUERIES)
class TestAgainstScan:
    """Both engines agree on result sets and facet counts."""

    def test_same_hits(self, engines, options) -> None:
        indexed, scan = engines
        assert Counter(s.id for s in indexed.search(options)) == Counter(
            s.id for s in scan.search(options)
        )

    def test_same_facets(self, engines, options) -> None:
        indexed, scan = engines
        indexed_results = indexed.search(options)
        scan_results = scan.search(options)

        assert indexed_results.color_facet == scan_results.color_facet
        assert indexed_results.size_facet == scan_results.size_facet

    def test_hits_satisfy_filters(self, engines, options, random_catalog) -> None:
        indexed, _ = engines
        results = indexed.search(options)

        assert all(matches(s, options) for s in results)
        assert len(results) == sum(1 for s in random_catalog if matches(s, options))

    def test_facet_totals(self, engines, options, random_catalog) -> None:
        indexed, _ = engines
        results = indexed.search(options)

        size_matches = sum(1 for s in random_catalog if not options.sizes or s.size in options.sizes)
        color_matches = sum(1 for s in random_catalog if not options.colors or s.color in options.colors)
        assert results.color_facet.total == size_matches
        assert results.size_facet.total == color_matches

    def test_idempotent(self, engines, options) -> None:
        indexed, scan = engines
        assert indexed.search(options) == indexed.search(options)
        assert scan.search(options) == scan.search(options)


class TestUnfiltered:
    def test_full_catalog_in_order(self, engines, random_catalog) -> None:
        indexed, scan = engines

        assert indexed.search().shirts == random_catalog
        assert scan.search().shirts == random_catalog

    def test_counts_are_catalog_wide(self, engines, random_catalog) -> None:
        indexed, _ = engines
        results = indexed.search()
        colors = Counter(s.color for s in random_catalog)
        sizes = Counter(s.size for s in random_catalog)

        assert [(v.value, v.count) for v in results.color_counts] == [(c, colors[c]) for c in Color]
        assert [(v.value, v.count) for v in results.size_counts] == [(s, sizes[s]) for s in Size]


def test_scan_engine_returns_catalog_order(engines, random_catalog) -> None:
    _, scan = engines
    options = SearchOptions(colors=[Color.WHITE, Color.RED], sizes=[Size.SMALL, Size.LARGE])

    assert scan.search(options).shirts == [s for s in random_catalog if matches(s, options)]
