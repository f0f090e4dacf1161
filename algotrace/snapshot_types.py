"""Typed payloads carried by each DataStructureState variant."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FramePhase(str, Enum):
    """Lifecycle of a simulated call frame or recursion-tree node."""

    ACTIVE = "active"
    WAITING = "waiting"
    COMPLETED = "completed"


# ── Linked list ─────────────────────────────────────────────────────


@dataclass
class ListNode:
    id: str
    value: int
    next: str | None = None


@dataclass
class ReversingMeta:
    """Pointer positions during an in-place reversal."""

    prev: str | None = None
    current: str | None = None
    next: str | None = None


@dataclass
class LinkedListSnapshot:
    nodes: list[ListNode] = field(default_factory=list)
    head: str | None = None
    reversed_links: list[str] = field(default_factory=list)
    reversing_meta: ReversingMeta = field(default_factory=ReversingMeta)

    def node(self, node_id: str) -> ListNode:
        return next(n for n in self.nodes if n.id == node_id)


# ── Binary tree ─────────────────────────────────────────────────────


@dataclass
class TreeNode:
    id: str
    value: int
    left: str | None = None
    right: str | None = None


@dataclass
class TreeSnapshot:
    nodes: dict[str, TreeNode] = field(default_factory=dict)
    root: str | None = None


# ── Recursion tree and call stack ───────────────────────────────────


@dataclass
class RecursionTreeNode:
    id: str
    label: str
    parent_id: str | None = None
    children: list[str] = field(default_factory=list)
    status: FramePhase = FramePhase.ACTIVE
    return_value: Any = None


@dataclass
class RecursionTreeSnapshot:
    nodes: dict[str, RecursionTreeNode] = field(default_factory=dict)
    root: str | None = None


@dataclass
class CallFrame:
    """One simulated activation record.

    ``node`` is whatever the call operates on: an integer argument for
    factorial, a tree node id (or None for a null child) for traversals.
    """

    id: str
    node: Any
    phase: FramePhase = FramePhase.ACTIVE
    parent_id: str | None = None
    depth: int = 0
    return_value: Any = None


# ── Graph ───────────────────────────────────────────────────────────


@dataclass
class GraphNode:
    id: str
    label: str


@dataclass
class GraphEdge:
    id: str
    source: str
    target: str


@dataclass
class GraphSnapshot:
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    adjacency: dict[str, list[str]] = field(default_factory=dict)
    visited: list[str] = field(default_factory=list)
    current_path: list[str] = field(default_factory=list)
    current_node: str | None = None
    parent_map: dict[str, str | None] = field(default_factory=dict)
    cycle_edges: list[str] = field(default_factory=list)


# ── Heap ────────────────────────────────────────────────────────────


@dataclass
class HeapSnapshot:
    elements: list[int] = field(default_factory=list)
    size: int = 0
    capacity: int = 0
    input_array: list[int] = field(default_factory=list)
    current_input_index: int | None = None
    k_value: int = 0
    result: list[int] = field(default_factory=list)


# ── Stack and queue entries ─────────────────────────────────────────


@dataclass
class StackElement:
    value: str
    index: int


@dataclass
class QueueElement:
    node_id: str
    level: int


# ── Serialization ───────────────────────────────────────────────────


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def serialize_value(value: Any) -> Any:
    """Render snapshots as plain JSON-compatible data with camelCase keys.

    Non-finite floats (the DP table's unreachable amounts) become ``None``
    so the output stays strict JSON.
    """
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            _camel(f.name): serialize_value(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {str(k): serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
