"""Tests for catalog query construction."""

import pytest
from unittest.mock import MagicMock

from modules.catalog.models import BagCategory, ListingFilter, SortKey
from modules.catalog.query import (
    CatalogQuery,
    Equals,
    Range,
    SortSpec,
    TextSearch,
    build_catalog_query,
)


class TestBuildCatalogQuery:
    def test_defaults(self):
        """No filters: empty predicate, newest first, first page of 12."""
        query = build_catalog_query(ListingFilter())
        assert query == CatalogQuery(
            predicate=(),
            sort=SortSpec(column="created_at", descending=True),
            skip=0,
            limit=12,
        )

    def test_full_filter(self):
        listing = ListingFilter(
            category="tote",
            search="leather",
            min_price=100,
            max_price=500,
            sort="price",
            page=2,
            limit=12,
        )
        query = build_catalog_query(listing)

        assert query.predicate == (
            Equals("category", "tote"),
            TextSearch(("name", "description"), "leather"),
            Range("price", gte=100, lte=500),
        )
        assert query.sort == SortSpec(column="price", descending=False)
        assert query.skip == 12
        assert query.limit == 12

    def test_only_min_price(self):
        query = build_catalog_query(ListingFilter(min_price=50))
        assert query.predicate == (Range("price", gte=50, lte=None),)

    def test_only_max_price(self):
        query = build_catalog_query(ListingFilter(max_price=50))
        assert query.predicate == (Range("price", gte=None, lte=50),)

    def test_zero_price_bound_is_kept(self):
        """A bound of 0 is a real bound, not an absent one."""
        query = build_catalog_query(ListingFilter(max_price=0))
        assert query.predicate == (Range("price", gte=None, lte=0),)

    def test_contradictory_bounds_pass_through(self):
        query = build_catalog_query(ListingFilter(min_price=100, max_price=50))
        assert query.predicate == (Range("price", gte=100, lte=50),)

    @pytest.mark.parametrize("search", ["", "   "])
    def test_blank_search_adds_no_clause(self, search):
        assert build_catalog_query(ListingFilter(search=search)).predicate == ()

    @pytest.mark.parametrize("page,limit,skip", [(1, 12, 0), (3, 10, 20), (5, 100, 400)])
    def test_skip(self, page, limit, skip):
        query = build_catalog_query(ListingFilter(page=page, limit=limit))
        assert query.skip == skip
        assert query.limit == limit

    @pytest.mark.parametrize("key,column,descending", [
        ("price", "price", False),
        ("-price", "price", True),
        ("name", "name", False),
        ("-name", "name", True),
        ("createdAt", "created_at", False),
        ("-createdAt", "created_at", True),
    ])
    def test_sort_keys(self, key, column, descending):
        assert SortSpec.from_key(key) == SortSpec(column=column, descending=descending)

    def test_unknown_sort_key(self):
        with pytest.raises(ValueError):
            SortSpec.from_key("popularity")

    def test_category_uses_enum_value(self):
        query = build_catalog_query(ListingFilter(category=BagCategory.LAPTOP))
        assert query.predicate == (Equals("category", "laptop"),)


class TestListingFilter:
    @pytest.mark.parametrize("overrides", [
        {"page": 0},
        {"limit": 0},
        {"limit": 101},
        {"min_price": -1},
        {"max_price": -0.01},
        {"sort": "popularity"},
        {"category": "suitcase"},
    ])
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            ListingFilter(**overrides)

    def test_default_sort(self):
        assert ListingFilter().sort == SortKey.CREATED_AT_DESC


class TestTextSearch:
    def test_pattern_wraps_text(self):
        assert TextSearch(("name",), "leather").pattern() == "%leather%"

    def test_pattern_escapes_wildcards(self):
        """Wildcards typed by the user match literally."""
        assert TextSearch(("name",), "50%_off").pattern() == "%50\\%\\_off%"

    def test_pattern_escapes_backslash(self):
        assert TextSearch(("name",), "a\\b").pattern() == "%a\\\\b%"

    def test_to_postgrest(self):
        search = TextSearch(("name", "description"), "leather")
        assert search.to_postgrest() == 'name.ilike."%leather%",description.ilike."%leather%"'

    def test_to_postgrest_quotes_reserved_characters(self):
        """Commas, parentheses and quotes stay inside the quoted value."""
        search = TextSearch(("name",), 'big, "soft" (bag)')
        assert search.to_postgrest() == 'name.ilike."%big, \\"soft\\" (bag)%"'


class TestClauseApplication:
    def test_equals_applies_eq(self):
        builder = MagicMock()
        Equals("category", "tote").apply(builder)
        builder.eq.assert_called_once_with("category", "tote")

    def test_text_search_applies_or(self):
        builder = MagicMock()
        TextSearch(("name", "description"), "x").apply(builder)
        builder.or_.assert_called_once_with('name.ilike."%x%",description.ilike."%x%"')

    def test_range_applies_present_bounds(self):
        builder = MagicMock()
        Range("price", gte=10).apply(builder)
        builder.gte.assert_called_once_with("price", 10)
        builder.gte.return_value.lte.assert_not_called()

    def test_range_applies_both_bounds(self):
        builder = MagicMock()
        Range("price", gte=10, lte=20).apply(builder)
        builder.gte.assert_called_once_with("price", 10)
        builder.gte.return_value.lte.assert_called_once_with("price", 20)

    def test_apply_predicate_chains_clauses(self):
        builder = MagicMock()
        query = CatalogQuery(
            predicate=(Equals("category", "tote"), Range("price", lte=50)),
            sort=SortSpec("created_at", True),
            skip=0,
            limit=12,
        )
        result = query.apply_predicate(builder)
        builder.eq.assert_called_once_with("category", "tote")
        builder.eq.return_value.lte.assert_called_once_with("price", 50)
        assert result is builder.eq.return_value.lte.return_value
