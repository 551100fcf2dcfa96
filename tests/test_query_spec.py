"""Tests for turning raw request parameters into a QuerySpec."""

import pytest

from batteryhub.schemas.query import DEFAULT_PAGE_SIZE, QuerySpec, SortKey


class TestDefaults:
    def test_empty_params(self):
        spec = QuerySpec.from_params({})
        assert spec == QuerySpec()
        assert spec.term is None
        assert spec.sort_by is SortKey.NEWEST
        assert spec.page == 1
        assert spec.page_size == DEFAULT_PAGE_SIZE

    def test_empty_strings_are_absent(self):
        spec = QuerySpec.from_params(
            {"q": "", "category": "", "brand": "  ", "minPrice": "", "sortBy": "", "page": ""}
        )
        assert spec == QuerySpec()

    def test_facet_values_kept_verbatim(self):
        spec = QuerySpec.from_params({"category": " Batteries ", "brand": "Exide ", "capacity": "Below 50Ah"})
        assert spec.category == " Batteries "
        assert spec.brand == "Exide "
        assert spec.capacity == "Below 50Ah"

    def test_configured_default_page_size(self):
        assert QuerySpec.from_params({}, default_page_size=25).page_size == 25

    def test_unrecognized_params_ignored(self):
        assert QuerySpec.from_params({"color": "red", "search": "car"}) == QuerySpec()


class TestAliases:
    def test_q_is_term(self):
        assert QuerySpec.from_params({"q": "car"}).term == "car"

    def test_term_wins_over_q(self):
        assert QuerySpec.from_params({"term": "bike", "q": "car"}).term == "bike"

    def test_limit_is_page_size(self):
        assert QuerySpec.from_params({"limit": "3"}).page_size == 3

    def test_page_size_wins_over_limit(self):
        assert QuerySpec.from_params({"pageSize": "4", "limit": "3"}).page_size == 4

    def test_listing_drops_term(self):
        spec = QuerySpec.from_params({"q": "car", "brand": "Exide"}, include_term=False)
        assert spec.term is None
        assert spec.brand == "Exide"


class TestCoercion:
    @pytest.mark.parametrize("raw", ["0", "-2", "abc", "1.5"])
    def test_bad_page_defaults_to_first(self, raw):
        assert QuerySpec.from_params({"page": raw}).page == 1

    @pytest.mark.parametrize("raw", ["0", "-3", "ten"])
    def test_bad_page_size_defaults(self, raw):
        assert QuerySpec.from_params({"pageSize": raw}).page_size == DEFAULT_PAGE_SIZE

    def test_numeric_values_accepted(self):
        spec = QuerySpec.from_params({"page": 3, "pageSize": 5, "minPrice": 10, "maxPrice": 99.5})
        assert (spec.page, spec.page_size) == (3, 5)
        assert (spec.min_price, spec.max_price) == (10.0, 99.5)

    @pytest.mark.parametrize("raw", ["cheap", "nan", "1,000", "inf", "-Infinity", "1e999"])
    def test_unparseable_price_is_unbounded(self, raw):
        spec = QuerySpec.from_params({"minPrice": raw, "maxPrice": raw})
        assert spec.min_price is None
        assert spec.max_price is None
        assert not spec.has_price_range

    def test_zero_price_is_a_bound(self):
        spec = QuerySpec.from_params({"minPrice": "0"})
        assert spec.min_price == 0.0
        assert spec.has_price_range

    def test_unknown_sort_falls_back_to_newest(self):
        assert QuerySpec.from_params({"sortBy": "cheapest"}).sort_by is SortKey.NEWEST

    @pytest.mark.parametrize("raw", ["priceAsc", "priceDesc", "ratingDesc", "newest"])
    def test_known_sort_keys(self, raw):
        assert QuerySpec.from_params({"sortBy": raw}).sort_by == raw

    def test_sort_key_is_case_sensitive(self):
        assert QuerySpec.from_params({"sortBy": "priceasc"}).sort_by is SortKey.NEWEST

    def test_term_is_trimmed(self):
        assert QuerySpec.from_params({"q": "  car battery "}).term == "car battery"


class TestAppliedFilters:
    def test_nothing_applied(self):
        filters = QuerySpec().applied_filters().model_dump(mode="json", by_alias=True)
        assert filters == {
            "searchQuery": None,
            "category": None,
            "brand": None,
            "capacity": None,
            "priceRange": None,
            "sortBy": "newest",
        }

    def test_echoes_given_filters(self):
        spec = QuerySpec.from_params(
            {"q": "car", "brand": "Amaron", "maxPrice": "500", "sortBy": "priceDesc"}
        )
        filters = spec.applied_filters().model_dump(mode="json", by_alias=True)
        assert filters["searchQuery"] == "car"
        assert filters["brand"] == "Amaron"
        assert filters["category"] is None
        assert filters["priceRange"] == [None, 500.0]
        assert filters["sortBy"] == "priceDesc"

    def test_unknown_sort_echoed_as_effective_key(self):
        filters = QuerySpec.from_params({"sortBy": "bogus"}).applied_filters()
        assert filters.sort_by is SortKey.NEWEST
