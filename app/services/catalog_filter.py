"""Search and category filtering over the in-memory catalog.

Runs on every keystroke, so it rescans the list each call; the catalog is
small enough that no index is kept.
"""

from typing import Callable, List, Sequence

from app.schemas.catalog import ALL_CATEGORIES, CatalogEntry


FieldMatcher = Callable[[CatalogEntry, str], bool]


def _name_matches(entry: CatalogEntry, needle: str) -> bool:
    return needle in entry.name.lower()


def _description_matches(entry: CatalogEntry, needle: str) -> bool:
    return needle in entry.description.lower()


def _tags_match(entry: CatalogEntry, needle: str) -> bool:
    return any(needle in tag.lower() for tag in entry.tags)


def _author_matches(entry: CatalogEntry, needle: str) -> bool:
    return needle in entry.author.lower()


# An entry matches a query when any of these does.
SEARCH_FIELDS: List[FieldMatcher] = [
    _name_matches,
    _description_matches,
    _tags_match,
    _author_matches,
]


def matches_category(entry: CatalogEntry, category_filter: str) -> bool:
    if category_filter == ALL_CATEGORIES:
        return True
    return entry.category.lower() == category_filter.lower()


def matches_query(entry: CatalogEntry, query: str) -> bool:
    """True when the lower-cased query is a substring of any searchable field.

    The query is used verbatim: whitespace is not stripped and multi-word
    queries are not split into terms.
    """
    if not query:
        return True
    needle = query.lower()
    return any(matcher(entry, needle) for matcher in SEARCH_FIELDS)


def filter_apps(
    entries: Sequence[CatalogEntry],
    query: str = "",
    category_filter: str = ALL_CATEGORIES,
) -> List[CatalogEntry]:
    """Return the entries passing the category filter, then the text search.

    Order of ``entries`` is preserved.
    """
    return [
        entry
        for entry in entries
        if matches_category(entry, category_filter) and matches_query(entry, query)
    ]
