"""
Search and category filtering for the education pages.
"""

from typing import Any, Iterable, List, Optional, TypeVar

from waterwise.core.constants import ALL

T = TypeVar("T")


def _field(item: Any, name: str) -> str:
    if isinstance(item, dict):
        value = item.get(name)
    else:
        value = getattr(item, name, None)
    return value or ""


def category_matches(item_category: str, category: Optional[str]) -> bool:
    if not category or category.lower() == ALL:
        return True
    return item_category.lower() == category.lower()


def search_matches(title: str, body: str, search: Optional[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in title.lower() or needle in body.lower()


def matches(
    item: Any,
    search: Optional[str] = None,
    category: Optional[str] = None,
    body_field: str = "content",
) -> bool:
    """
    True when the item is in the selected category (``"all"`` selects every
    category) and the search text occurs in its title or body, ignoring case.
    """
    return category_matches(_field(item, "category"), category) and search_matches(
        _field(item, "title"), _field(item, body_field), search
    )


def filter_items(
    items: Iterable[T],
    search: Optional[str] = None,
    category: Optional[str] = None,
    body_field: str = "content",
) -> List[T]:
    """Keep the items that match, preserving their order."""
    return [
        item
        for item in items
        if matches(item, search=search, category=category, body_field=body_field)
    ]
