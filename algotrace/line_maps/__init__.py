"""Static line mapping tables for every algorithm."""

from __future__ import annotations

from algotrace.constants import (
    ANAGRAM_DETECTION,
    BALANCED_PARENTHESES,
    BFS_TRAVERSAL,
    BINARY_SEARCH,
    BUBBLE_SORT,
    COIN_CHANGE,
    CYCLE_DETECTION,
    FACTORIAL,
    IN_ORDER_TRAVERSAL,
    K_LARGEST_ELEMENTS,
    LINEAR_SEARCH,
    MIN_COST_ARRAY,
    REVERSE_LINKED_LIST,
    TWO_SUM,
)
from algotrace.line_mapping import LineMappingTable
from algotrace.resolver import LineResolver

from .anagram_detection import ANAGRAM_DETECTION_LINES
from .balanced_parentheses import BALANCED_PARENTHESES_LINES
from .bfs_traversal import BFS_TRAVERSAL_LINES
from .binary_search import BINARY_SEARCH_LINES
from .bubble_sort import BUBBLE_SORT_LINES
from .coin_change import COIN_CHANGE_LINES
from .cycle_detection import CYCLE_DETECTION_LINES
from .factorial import FACTORIAL_LINES
from .in_order_traversal import IN_ORDER_TRAVERSAL_LINES
from .k_largest_elements import K_LARGEST_ELEMENTS_LINES
from .linear_search import LINEAR_SEARCH_LINES
from .min_cost_array import MIN_COST_ARRAY_LINES
from .reverse_linked_list import REVERSE_LINKED_LIST_LINES
from .two_sum import TWO_SUM_LINES

LINE_MAPPINGS: dict[str, LineMappingTable] = {
    BUBBLE_SORT: BUBBLE_SORT_LINES,
    BINARY_SEARCH: BINARY_SEARCH_LINES,
    LINEAR_SEARCH: LINEAR_SEARCH_LINES,
    TWO_SUM: TWO_SUM_LINES,
    COIN_CHANGE: COIN_CHANGE_LINES,
    CYCLE_DETECTION: CYCLE_DETECTION_LINES,
    K_LARGEST_ELEMENTS: K_LARGEST_ELEMENTS_LINES,
    REVERSE_LINKED_LIST: REVERSE_LINKED_LIST_LINES,
    FACTORIAL: FACTORIAL_LINES,
    BALANCED_PARENTHESES: BALANCED_PARENTHESES_LINES,
    IN_ORDER_TRAVERSAL: IN_ORDER_TRAVERSAL_LINES,
    BFS_TRAVERSAL: BFS_TRAVERSAL_LINES,
    MIN_COST_ARRAY: MIN_COST_ARRAY_LINES,
    ANAGRAM_DETECTION: ANAGRAM_DETECTION_LINES,
}


def build_default_resolver() -> LineResolver:
    """A fresh resolver with every bundled table registered."""
    resolver = LineResolver()
    for algorithm_id, table in LINE_MAPPINGS.items():
        resolver.register_algorithm(algorithm_id, table)
    return resolver


__all__ = ["LINE_MAPPINGS", "build_default_resolver"]
