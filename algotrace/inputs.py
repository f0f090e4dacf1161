"""Input payload schemas, one per algorithm.

These validate loosely typed payloads (JSON from the CLI, dicts from a
caller) before a generator sees them. Scalars are strict so a payload is
rejected exactly when the generator would reject the same values: ``True``
is not an int and ``"5"`` is not a number. Domain limits such as sizes and
value caps are still enforced by the generators themselves.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, StrictInt, StrictStr

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
from algotrace.snapshot_types import TreeNode


class ArrayInput(BaseModel):
    values: list[StrictInt]

    def to_args(self) -> tuple[Any, ...]:
        return (self.values,)


class TargetInput(BaseModel):
    values: list[StrictInt]
    target: StrictInt

    def to_args(self) -> tuple[Any, ...]:
        return (self.values, self.target)


class KLargestInput(BaseModel):
    values: list[StrictInt]
    k: StrictInt

    def to_args(self) -> tuple[Any, ...]:
        return (self.values, self.k)


class CoinChangeInput(BaseModel):
    coins: list[StrictInt]
    amount: StrictInt

    def to_args(self) -> tuple[Any, ...]:
        return (self.coins, self.amount)


class GraphInput(BaseModel):
    nodes: list[StrictStr]
    edges: list[tuple[StrictStr, StrictStr]] = []

    def to_args(self) -> tuple[Any, ...]:
        return (self.nodes, self.edges)


class FactorialInput(BaseModel):
    n: StrictInt

    def to_args(self) -> tuple[Any, ...]:
        return (self.n,)


class BracketsInput(BaseModel):
    text: StrictStr

    def to_args(self) -> tuple[Any, ...]:
        return (self.text,)


class TreeNodeInput(BaseModel):
    id: StrictStr
    value: StrictInt
    left: StrictStr | None = None
    right: StrictStr | None = None


class TreeInput(BaseModel):
    nodes: list[TreeNodeInput] = []
    root: StrictStr | None = None

    def to_args(self) -> tuple[Any, ...]:
        nodes = [TreeNode(id=n.id, value=n.value, left=n.left, right=n.right) for n in self.nodes]
        return (nodes, self.root)


class AnagramInput(BaseModel):
    first: StrictStr
    second: StrictStr

    def to_args(self) -> tuple[Any, ...]:
        return (self.first, self.second)


INPUT_MODELS: dict[str, type[BaseModel]] = {
    BUBBLE_SORT: ArrayInput,
    BINARY_SEARCH: TargetInput,
    LINEAR_SEARCH: TargetInput,
    TWO_SUM: TargetInput,
    COIN_CHANGE: CoinChangeInput,
    CYCLE_DETECTION: GraphInput,
    K_LARGEST_ELEMENTS: KLargestInput,
    REVERSE_LINKED_LIST: ArrayInput,
    FACTORIAL: FactorialInput,
    BALANCED_PARENTHESES: BracketsInput,
    IN_ORDER_TRAVERSAL: TreeInput,
    BFS_TRAVERSAL: TreeInput,
    MIN_COST_ARRAY: ArrayInput,
    ANAGRAM_DETECTION: AnagramInput,
}

# Sample payloads, used by the CLI when no input is given and by the audit script.
EXAMPLE_INPUTS: dict[str, dict[str, Any]] = {
    BUBBLE_SORT: {"values": [64, 34, 25, 12, 22, 11, 90]},
    BINARY_SEARCH: {"values": [2, 5, 8, 12, 16, 23, 38, 56, 72, 91], "target": 23},
    LINEAR_SEARCH: {"values": [10, 23, 45, 70, 11, 15], "target": 70},
    TWO_SUM: {"values": [2, 7, 11, 15, 1, 8], "target": 9},
    COIN_CHANGE: {"coins": [1, 3, 4], "amount": 6},
    CYCLE_DETECTION: {
        "nodes": ["A", "B", "C", "D", "E"],
        "edges": [["A", "B"], ["B", "C"], ["B", "D"], ["D", "E"], ["C", "E"]],
    },
    K_LARGEST_ELEMENTS: {"values": [3, 1, 5, 12, 2, 11, 7], "k": 3},
    REVERSE_LINKED_LIST: {"values": [1, 2, 3, 4, 5]},
    FACTORIAL: {"n": 5},
    BALANCED_PARENTHESES: {"text": "{[()()]}"},
    IN_ORDER_TRAVERSAL: {
        "nodes": [
            {"id": "a", "value": 4, "left": "b", "right": "c"},
            {"id": "b", "value": 2, "left": "d", "right": "e"},
            {"id": "c", "value": 6},
            {"id": "d", "value": 1},
            {"id": "e", "value": 3},
        ],
        "root": "a",
    },
    BFS_TRAVERSAL: {
        "nodes": [
            {"id": "a", "value": 3, "left": "b", "right": "c"},
            {"id": "b", "value": 9},
            {"id": "c", "value": 20, "left": "d", "right": "e"},
            {"id": "d", "value": 15},
            {"id": "e", "value": 7},
        ],
        "root": "a",
    },
    MIN_COST_ARRAY: {"values": [4, 3, 2, 6]},
    ANAGRAM_DETECTION: {"first": "listen", "second": "silent"},
}
