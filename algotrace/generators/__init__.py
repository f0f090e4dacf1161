"""Trace generators, one per algorithm."""

from __future__ import annotations

import importlib
from typing import Callable

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
from algotrace.trace_types import Step

# Lazy imports: a generator module is loaded on first lookup
_GENERATORS: dict[str, str] = {
    BUBBLE_SORT: "sorting.generate_bubble_sort_steps",
    BINARY_SEARCH: "searching.generate_binary_search_steps",
    LINEAR_SEARCH: "searching.generate_linear_search_steps",
    TWO_SUM: "two_pointers.generate_two_sum_steps",
    COIN_CHANGE: "dp.generate_coin_change_steps",
    CYCLE_DETECTION: "graphs.generate_cycle_detection_steps",
    K_LARGEST_ELEMENTS: "heaps.generate_k_largest_steps",
    REVERSE_LINKED_LIST: "linked_lists.generate_reverse_linked_list_steps",
    FACTORIAL: "recursion.generate_factorial_steps",
    BALANCED_PARENTHESES: "stacks.generate_balanced_parentheses_steps",
    IN_ORDER_TRAVERSAL: "trees.generate_in_order_steps",
    BFS_TRAVERSAL: "queues.generate_bfs_steps",
    MIN_COST_ARRAY: "greedy.generate_min_cost_steps",
    ANAGRAM_DETECTION: "strings.generate_anagram_steps",
}


def get_generator(algorithm_id: str) -> Callable[..., list[Step]]:
    """Return the generator function for *algorithm_id*.

    Raises ``ValueError`` if no generator is registered for it.
    """
    target = _GENERATORS.get(algorithm_id)
    if target is None:
        raise ValueError(f"Unknown algorithm: {algorithm_id}")
    module_name, function_name = target.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    return getattr(mod, function_name)


SUPPORTED_ALGORITHMS: tuple[str, ...] = tuple(_GENERATORS.keys())

__all__ = ["get_generator", "SUPPORTED_ALGORITHMS"]
