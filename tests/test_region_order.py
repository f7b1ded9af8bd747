"""Tests for region sort order and likely order computation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cldrforge.locales import LocaleKey
from cldrforge.regions import (
    CollationKey,
    InMemoryRegionLanguageSource,
    RegionOrderComputer,
    RegionPopulation,
    code_point_key,
    compute_likely_order,
    compute_sort_order,
    join_region_order,
    sort_candidates,
    split_region_order,
)
from tests.strategies.locales import alpha2_codes, region_populations


class TestSortOrder:
    """Test sort candidates and compute_sort_order."""

    def test_candidates_exclude_unknown_and_numeric(self) -> None:
        """ZZ, numeric areas, reserved keys and empty names are not candidates."""
        names = {
            "US": "United States",
            "ZZ": "Unknown Region",
            "001": "World",
            "!sortorder": "US",
            "XK": "",
            "DE": "Germany",
        }
        assert sort_candidates(names) == ["US", "DE"]

    def test_sorted_by_name_not_code(self) -> None:
        """Regions are ordered by display name."""
        names = {"DE": "Germany", "AT": "Austria", "CH": "Switzerland", "ES": "Spain"}
        assert compute_sort_order(names, code_point_key) == ("AT", "DE", "ES", "CH")

    def test_collation_key_applies(self) -> None:
        """The injected key decides the order."""
        names = {"AA": "b", "BB": "A"}
        assert compute_sort_order(names, code_point_key) == ("BB", "AA")
        assert compute_sort_order(names, str.casefold) == ("BB", "AA")
        assert compute_sort_order({"AA": "a", "BB": "B"}, code_point_key) == ("BB", "AA")
        assert compute_sort_order({"AA": "a", "BB": "B"}, str.casefold) == ("AA", "BB")

    def test_equal_names_keep_mapping_order(self) -> None:
        """Ties keep the order of the input mapping."""
        names = {"CD": "Congo", "CG": "congo", "AT": "Austria"}
        assert compute_sort_order(names, str.casefold) == ("AT", "CD", "CG")

    @given(
        names=st.dictionaries(alpha2_codes, st.text(min_size=1, max_size=8), max_size=20)
    )
    def test_order_is_permutation_of_candidates(self, names: dict[str, str]) -> None:
        """The sort order contains each candidate exactly once, names non-decreasing."""
        order = compute_sort_order(names, code_point_key)
        assert sorted(order) == sorted(sort_candidates(names))
        assert "ZZ" not in order
        keys = [names[code] for code in order]
        assert keys == sorted(keys)


class TestLikelyOrder:
    """Test compute_likely_order."""

    def test_population_walk(self, region_source: InMemoryRegionLanguageSource) -> None:
        """Regions below the cut-off end the walk."""
        assert compute_likely_order(LocaleKey.parse("en"), region_source) == (
            "US",
            "IN",
            "GB",
            "CA",
        )

    @pytest.mark.parametrize(
        ("india", "expected"),
        [(50_000_000, "US,GB,IN"), (2_000_000, "US,GB")],
    )
    def test_stored_form_end_to_end(self, india: int, expected: str) -> None:
        """Population order and the cut-off produce the stored likely order."""
        source = InMemoryRegionLanguageSource(
            {
                "en": [
                    RegionPopulation("US", "United States", 300_000_000),
                    RegionPopulation("GB", "United Kingdom", 65_000_000),
                    RegionPopulation("IN", "India", india),
                ]
            }
        )
        order = compute_likely_order(LocaleKey.parse("en"), source)
        assert join_region_order(order) == expected

    def test_region_does_not_matter(self, region_source: InMemoryRegionLanguageSource) -> None:
        """All locales of a language share its likely order."""
        assert compute_likely_order(
            LocaleKey.parse("en_GB"), region_source
        ) == compute_likely_order(LocaleKey.parse("en"), region_source)

    def test_stop_at_first_small_region(self) -> None:
        """A small region stops the walk even if larger ones would follow it."""
        source = InMemoryRegionLanguageSource(
            {
                "xx": [
                    RegionPopulation("AA", "A", 10_000_000),
                    RegionPopulation("BB", "B", 2_000_000),
                ]
            }
        )
        assert compute_likely_order(LocaleKey.parse("xx"), source) == ("AA",)

    def test_limit(self) -> None:
        """At most ``limit`` regions are taken."""
        source = InMemoryRegionLanguageSource(
            {"xx": [RegionPopulation(f"A{i}", "", 10_000_000 - i) for i in range(12)]}
        )
        assert len(compute_likely_order(LocaleKey.parse("xx"), source)) == 10
        assert compute_likely_order(LocaleKey.parse("xx"), source, limit=2) == ("A0", "A1")

    def test_script_query_first(self, region_source: InMemoryRegionLanguageSource) -> None:
        """language_Script is queried before the bare language."""
        assert compute_likely_order(LocaleKey.parse("sr_Latn"), region_source) == ("RS",)

    def test_script_falls_back_to_language(
        self, region_source: InMemoryRegionLanguageSource
    ) -> None:
        """An unknown language_Script falls back to the language."""
        order = compute_likely_order(
            LocaleKey.parse("fr_Latn"), region_source, min_literate_population=0
        )
        assert order == ("FR", "CA")

    def test_default_and_unknown_are_empty(
        self, region_source: InMemoryRegionLanguageSource
    ) -> None:
        """The root locale and unknown languages have an empty likely order."""
        assert compute_likely_order(LocaleKey.DEFAULT, region_source) == ()
        assert compute_likely_order(LocaleKey.parse("de"), region_source) == ()
        assert compute_likely_order(LocaleKey.parse("sr"), region_source) == ()

    @given(
        populations=region_populations(),
        limit=st.integers(1, 12),
        minimum=st.sampled_from([0, 3_000_000, 5_000_000]),
    )
    def test_bounds_hold(
        self, populations: list[RegionPopulation], limit: int, minimum: int
    ) -> None:
        """The result is a bounded, above-threshold prefix of the population order."""
        source = InMemoryRegionLanguageSource({"xx": populations})
        order = compute_likely_order(
            LocaleKey.parse("xx"), source, limit=limit, min_literate_population=minimum
        )
        ranked = [entry.region for entry in source.regions_for("xx")]
        assert len(order) <= limit
        assert list(order) == ranked[: len(order)]
        population = {entry.region: entry.literate_population for entry in populations}
        assert all(population[code] >= minimum for code in order)
        if len(order) < min(limit, len(ranked)):
            assert population[ranked[len(order)]] < minimum


class TestStoredForm:
    """Test the comma-joined stored form of orderings."""

    def test_join_and_split(self) -> None:
        """Orderings are stored comma-joined."""
        assert join_region_order(("US", "GB")) == "US,GB"
        assert split_region_order("US,GB") == ("US", "GB")

    def test_empty(self) -> None:
        """None and the empty string both decode to no regions."""
        assert join_region_order(()) == ""
        assert split_region_order("") == ()
        assert split_region_order(None) == ()


class TestRegionOrderComputer:
    """Test RegionOrderComputer."""

    def test_uses_collation_factory_per_locale(
        self, region_source: InMemoryRegionLanguageSource
    ) -> None:
        """The collation factory is called with the locale being sorted."""
        seen: list[LocaleKey] = []

        def factory(locale: LocaleKey) -> CollationKey:
            seen.append(locale)
            return str.casefold

        computer = RegionOrderComputer(region_source, collation_key=factory)
        names = {"DE": "germany", "AT": "Austria"}
        assert computer.sort_order(LocaleKey.parse("en_GB"), names) == ("AT", "DE")
        assert seen == [LocaleKey.parse("en_GB")]

    def test_likely_order_bounds_from_constructor(
        self, region_source: InMemoryRegionLanguageSource
    ) -> None:
        """Configured bounds are used for the likely order."""
        computer = RegionOrderComputer(
            region_source,
            collation_key=lambda _locale: str.casefold,
            limit=2,
            min_literate_population=0,
        )
        assert computer.likely_order(LocaleKey.parse("en")) == ("US", "IN")


class TestRegionPopulationSource:
    """Test InMemoryRegionLanguageSource."""

    def test_ties_keep_input_order(self) -> None:
        """Equal populations keep the supplied order."""
        source = InMemoryRegionLanguageSource(
            {
                "xx": [
                    RegionPopulation("BB", "", 5),
                    RegionPopulation("AA", "", 5),
                    RegionPopulation("CC", "", 9),
                ]
            }
        )
        assert [entry.region for entry in source.regions_for("xx")] == ["CC", "BB", "AA"]

    def test_most_populated_regions(self, region_source: InMemoryRegionLanguageSource) -> None:
        """The first region per language feeds default currency resolution."""
        assert region_source.most_populated_regions() == {
            "en": "US",
            "fr": "FR",
            "sr_Latn": "RS",
            "sr": "BA",
        }
