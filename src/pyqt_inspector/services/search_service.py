"""
Substring search over the object list.

Qt-free so the object list panel and tests share one filtering code path.
"""

from typing import Callable, Dict, Generic, Hashable, TypeVar
import logging

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
T = TypeVar('T')


class SearchService(Generic[K, T]):
    """
    Case-insensitive substring filter with a minimum character trigger.

    Items keep their insertion order in the filtered result, so a list sorted
    by object index stays sorted after filtering.

    Usage:
        search = SearchService(entries, lambda entry: entry.display_name)
        visible = search.filter("play")
    """

    # Class constant for minimum search characters
    MIN_SEARCH_CHARS = 1

    def __init__(self,
                 all_items: Dict[K, T],
                 searchable_text_extractor: Callable[[T], str],
                 min_chars: int = MIN_SEARCH_CHARS):
        """
        Args:
            all_items: Searchable items (key -> item)
            searchable_text_extractor: Returns the text an item is matched against
            min_chars: Minimum characters required to trigger filtering
        """
        self.all_items = dict(all_items)
        self.searchable_text_extractor = searchable_text_extractor
        self.min_chars = min_chars
        self.search_term = ""
        self.filtered_items = dict(self.all_items)

    def filter(self, search_term: str) -> Dict[K, T]:
        """
        Filter items by search term.

        An empty term shows everything. A term shorter than min_chars keeps
        the current result.
        """
        search_term = search_term.strip()
        self.search_term = search_term

        if not search_term:
            self.filtered_items = dict(self.all_items)
            return self.filtered_items
        if len(search_term) < self.min_chars:
            return self.filtered_items

        search_lower = search_term.lower()
        self.filtered_items = {
            key: item for key, item in self.all_items.items()
            if search_lower in self.searchable_text_extractor(item).lower()
        }
        logger.debug(f"Search {search_term!r}: {len(self.filtered_items)}/{len(self.all_items)} items")
        return self.filtered_items

    def reset(self) -> Dict[K, T]:
        """Clear the filter and show all items."""
        self.search_term = ""
        self.filtered_items = dict(self.all_items)
        return self.filtered_items

    def update_items(self, new_items: Dict[K, T]) -> Dict[K, T]:
        """Replace the searchable items and re-apply the current term."""
        self.all_items = dict(new_items)
        self.filtered_items = dict(new_items)
        return self.filter(self.search_term)
