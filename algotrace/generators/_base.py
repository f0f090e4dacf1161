"""Shared machinery for trace generators.

``TraceBuilder`` turns live working state into immutable steps: every
emitted snapshot is a deep copy, ids are assigned sequentially, and each
highlight style is checked against the generator's declared style set.
``RecursionTracker`` simulates call frames so recursive algorithms expose
their call stack and recursion tree explicitly.
"""

from __future__ import annotations

import copy
import functools
import logging
from typing import Any, Callable, Iterable

from algotrace.constants import DEFAULT_STEP_DURATION, MAX_ABS_VALUE
from algotrace.errors import InvalidInputError
from algotrace.snapshot_types import (
    CallFrame,
    FramePhase,
    RecursionTreeNode,
    RecursionTreeSnapshot,
    TreeNode,
    TreeSnapshot,
)
from algotrace.trace_types import (
    DataStructureKind,
    DataStructureState,
    HighlightInfo,
    HighlightKind,
    Step,
    StepContext,
    StepType,
    Timing,
)

logger = logging.getLogger(__name__)


# ── Highlight helpers ───────────────────────────────────────────────


def indices(style: str, values: Iterable[int], color: str | None = None) -> HighlightInfo:
    return HighlightInfo(kind=HighlightKind.INDICES, values=list(values), style=style, color=color)


def ids(style: str, values: Iterable[str], color: str | None = None) -> HighlightInfo:
    return HighlightInfo(kind=HighlightKind.IDS, values=list(values), style=style, color=color)


# ── Trace builder ───────────────────────────────────────────────────


class TraceBuilder:
    """Accumulates the steps of one generator run."""

    def __init__(
        self,
        algorithm_id: str,
        layout: dict[str, tuple[DataStructureKind, str]],
        styles: frozenset[str],
    ):
        self.algorithm_id = algorithm_id
        self._layout = layout
        self._styles = styles
        self.steps: list[Step] = []

    def emit(
        self,
        step_type: StepType,
        explanation: str,
        state: dict[str, Any],
        highlights: dict[str, list[HighlightInfo]] | None = None,
        context: StepContext | None = None,
        variables: dict[str, Any] | None = None,
        duration: int = DEFAULT_STEP_DURATION,
    ) -> Step:
        """Append a step whose snapshots are copies of *state*.

        *state* maps logical names (declared in the layout) to the live
        working objects; they are copied here so later mutation of the
        working state never reaches an emitted step.
        """
        structures = {
            name: DataStructureState(
                kind=self._layout[name][0],
                data=copy.deepcopy(data),
                label=self._layout[name][1],
            )
            for name, data in state.items()
        }
        step = Step(
            id=len(self.steps),
            step_type=step_type,
            data_structures=structures,
            highlights=self._check_highlights(highlights or {}),
            explanation=explanation,
            step_context=context,
            variables=copy.deepcopy(variables or {}),
            timing=Timing(duration=duration),
        )
        self.steps.append(step)
        return step

    def _check_highlights(
        self, highlights: dict[str, list[HighlightInfo]]
    ) -> dict[str, list[HighlightInfo]]:
        checked: dict[str, list[HighlightInfo]] = {}
        for name, infos in highlights.items():
            if name not in self._layout:
                raise ValueError(f"{self.algorithm_id}: highlight on undeclared structure {name!r}")
            for info in infos:
                if info.style not in self._styles:
                    raise ValueError(
                        f"{self.algorithm_id}: undeclared highlight style {info.style!r}"
                    )
            kept = [info for info in infos if info.values]
            if kept:
                checked[name] = kept
        return checked

    def finish(self) -> list[Step]:
        logger.debug("%s: generated %d steps", self.algorithm_id, len(self.steps))
        return self.steps


# ── Input validation ────────────────────────────────────────────────


def returns_empty_on_invalid_input(func: Callable[..., list[Step]]) -> Callable[..., list[Step]]:
    """Turn an ``InvalidInputError`` raised by *func* into an empty trace."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> list[Step]:
        try:
            return func(*args, **kwargs)
        except InvalidInputError as exc:
            logger.info("Rejected input for %s: %s", exc.algorithm_id, exc.reason)
            return []

    return wrapper


def require(condition: bool, algorithm_id: str, reason: str) -> None:
    if not condition:
        raise InvalidInputError(algorithm_id, reason)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_int(
    algorithm_id: str,
    name: str,
    value: Any,
    low: int = -MAX_ABS_VALUE,
    high: int = MAX_ABS_VALUE,
) -> int:
    require(_is_int(value), algorithm_id, f"{name} must be an integer")
    require(low <= value <= high, algorithm_id, f"{name} must lie in {low}..{high}")
    return value


def check_int_list(
    algorithm_id: str,
    values: Any,
    min_length: int,
    max_length: int,
    low: int = -MAX_ABS_VALUE,
    high: int = MAX_ABS_VALUE,
) -> list[int]:
    """Validate a list of bounded integers and return a fresh copy."""
    require(isinstance(values, (list, tuple)), algorithm_id, "values must be a list")
    require(
        min_length <= len(values) <= max_length,
        algorithm_id,
        f"length must lie in {min_length}..{max_length}, got {len(values)}",
    )
    for i, value in enumerate(values):
        check_int(algorithm_id, f"values[{i}]", value, low, high)
    return list(values)


def build_tree(
    algorithm_id: str, nodes: list[TreeNode], root: str | None, max_nodes: int
) -> TreeSnapshot:
    """Validate that *nodes* form one binary tree rooted at *root*."""
    require(isinstance(nodes, (list, tuple)), algorithm_id, "nodes must be a list")
    require(len(nodes) <= max_nodes, algorithm_id, f"tree must have at most {max_nodes} nodes")
    require(
        all(isinstance(n, TreeNode) for n in nodes), algorithm_id, "nodes must be TreeNode entries"
    )
    tree = TreeSnapshot(nodes={n.id: copy.deepcopy(n) for n in nodes}, root=root)
    require(len(tree.nodes) == len(nodes), algorithm_id, "node ids must be unique")
    if not nodes:
        require(root is None, algorithm_id, "an empty tree has no root")
        return tree
    require(root in tree.nodes, algorithm_id, f"root {root!r} is not a node")

    parents: dict[str, str] = {}
    for node in tree.nodes.values():
        check_int(algorithm_id, f"value of {node.id}", node.value)
        for child in (node.left, node.right):
            if child is None:
                continue
            require(child in tree.nodes, algorithm_id, f"{node.id} links to unknown node {child!r}")
            require(child not in parents, algorithm_id, f"{child} has more than one parent")
            parents[child] = node.id
    require(root not in parents, algorithm_id, "the root cannot be a child")
    reachable, frontier = set(), [root]
    while frontier:
        node = tree.nodes[frontier.pop()]
        reachable.add(node.id)
        frontier.extend(c for c in (node.left, node.right) if c is not None and c not in reachable)
    require(
        len(reachable) == len(nodes),
        algorithm_id,
        "every node must be reachable from the root",
    )
    return tree


# ── Simulated recursion ─────────────────────────────────────────────


class RecursionTracker:
    """Explicit call stack plus recursion-tree node map.

    The innermost frame is ACTIVE and every frame below it is WAITING on
    the call above it.
    """

    def __init__(self, prefix: str = "call"):
        self._prefix = prefix
        self._counter = 0
        self.call_stack: list[CallFrame] = []
        self.tree = RecursionTreeSnapshot()

    @property
    def top(self) -> CallFrame | None:
        return self.call_stack[-1] if self.call_stack else None

    @property
    def depth(self) -> int:
        return len(self.call_stack)

    def push(self, node: Any, label: str) -> CallFrame:
        parent = self.top
        frame = CallFrame(
            id=f"{self._prefix}-{self._counter}",
            node=node,
            parent_id=parent.id if parent else None,
            depth=len(self.call_stack),
        )
        self._counter += 1
        if parent is not None:
            parent.phase = FramePhase.WAITING
            self.tree.nodes[parent.id].status = FramePhase.WAITING
            self.tree.nodes[parent.id].children.append(frame.id)
        else:
            self.tree.root = self.tree.root or frame.id
        self.tree.nodes[frame.id] = RecursionTreeNode(
            id=frame.id, label=label, parent_id=frame.parent_id
        )
        self.call_stack.append(frame)
        return frame

    def pop(self, return_value: Any) -> CallFrame:
        frame = self.call_stack.pop()
        frame.phase = FramePhase.COMPLETED
        frame.return_value = return_value
        tree_node = self.tree.nodes[frame.id]
        tree_node.status = FramePhase.COMPLETED
        tree_node.return_value = return_value
        parent = self.top
        if parent is not None:
            parent.phase = FramePhase.ACTIVE
            self.tree.nodes[parent.id].status = FramePhase.ACTIVE
        return frame
