"""
Catalog query construction.

Translates a ListingFilter into a store-independent CatalogQuery: a
conjunction of clauses, a sort order, and a skip/limit window. Each
clause knows how to apply itself to a PostgREST query builder, which is
what the bag repository executes.

Absent filter fields add no clause. Contradictory bounds such as
min_price > max_price are passed through untouched and simply match
nothing.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from .models import ListingFilter, SortKey

# Sort key name -> column name
SORT_COLUMNS = {
    "price": "price",
    "name": "name",
    "createdAt": "created_at",
}

SEARCH_COLUMNS = ("name", "description")


class Clause(Protocol):
    """One conjunct of a listing predicate."""

    def apply(self, query: Any) -> Any:
        """Return ``query`` narrowed by this clause."""
        ...


@dataclass(frozen=True)
class Equals:
    """Exact match on a column."""

    column: str
    value: Any

    def apply(self, query: Any) -> Any:
        return query.eq(self.column, self.value)


@dataclass(frozen=True)
class TextSearch:
    """Case-insensitive substring match on any of several columns."""

    columns: tuple[str, ...]
    text: str

    def pattern(self) -> str:
        """ILIKE pattern matching ``text`` literally anywhere in a value."""
        escaped = (
            self.text.replace("\\", "\\\\")
            .replace("%", "\\%")
            .replace("_", "\\_")
        )
        return f"%{escaped}%"

    def to_postgrest(self) -> str:
        """Render as a PostgREST ``or`` filter string."""
        # Quote the value so commas and parentheses in the text stay literal
        quoted = '"' + self.pattern().replace("\\", "\\\\").replace('"', '\\"') + '"'
        return ",".join(f"{column}.ilike.{quoted}" for column in self.columns)

    def apply(self, query: Any) -> Any:
        return query.or_(self.to_postgrest())


@dataclass(frozen=True)
class Range:
    """Inclusive bounds on a numeric column. Either bound may be absent."""

    column: str
    gte: Optional[float] = None
    lte: Optional[float] = None

    def apply(self, query: Any) -> Any:
        if self.gte is not None:
            query = query.gte(self.column, self.gte)
        if self.lte is not None:
            query = query.lte(self.column, self.lte)
        return query


Predicate = tuple[Union[Equals, TextSearch, Range], ...]


@dataclass(frozen=True)
class SortSpec:
    """Order by one column."""

    column: str
    descending: bool = False

    @classmethod
    def from_key(cls, key: Union[SortKey, str]) -> "SortSpec":
        raw = SortKey(key).value
        descending = raw.startswith("-")
        return cls(column=SORT_COLUMNS[raw.lstrip("-")], descending=descending)


@dataclass(frozen=True)
class CatalogQuery:
    """A fully resolved listing query."""

    predicate: Predicate
    sort: SortSpec
    skip: int
    limit: int

    def apply_predicate(self, query: Any) -> Any:
        """Narrow ``query`` by every clause of the predicate."""
        for clause in self.predicate:
            query = clause.apply(query)
        return query


def build_catalog_query(listing: ListingFilter) -> CatalogQuery:
    """
    Build the store query for a catalog listing.

    Args:
        listing: Validated listing parameters

    Returns:
        CatalogQuery with predicate, sort order, skip and limit
    """
    clauses: list[Union[Equals, TextSearch, Range]] = []

    if listing.category is not None:
        clauses.append(Equals("category", listing.category.value))

    if listing.search:
        clauses.append(TextSearch(SEARCH_COLUMNS, listing.search))

    if listing.min_price is not None or listing.max_price is not None:
        clauses.append(Range("price", gte=listing.min_price, lte=listing.max_price))

    return CatalogQuery(
        predicate=tuple(clauses),
        sort=SortSpec.from_key(listing.sort),
        skip=(listing.page - 1) * listing.limit,
        limit=listing.limit,
    )
