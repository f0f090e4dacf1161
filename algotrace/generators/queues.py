"""Breadth-first (level-order) traversal of a binary tree with a FIFO queue."""

from __future__ import annotations

from algotrace.constants import BFS_TRAVERSAL, EMPHASIS_STEP_DURATION, MAX_TREE_NODES
from algotrace.generators._base import (
    TraceBuilder,
    build_tree,
    ids,
    indices,
    returns_empty_on_invalid_input,
)
from algotrace.snapshot_types import QueueElement, TreeNode
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

TREE = "tree"
QUEUE = "queue"
RESULT = "result"

BFS_STYLES = frozenset({"current", "visited", "processing", "active", "match"})


@returns_empty_on_invalid_input
def generate_bfs_steps(nodes: list[TreeNode], root: str | None) -> list[Step]:
    """Visit the tree level by level; ``result`` groups values per level."""
    tree = build_tree(BFS_TRAVERSAL, nodes, root, MAX_TREE_NODES)

    trace = TraceBuilder(
        BFS_TRAVERSAL,
        {
            TREE: (DataStructureKind.TREE, "Binary Tree"),
            QUEUE: (DataStructureKind.QUEUE, "Queue"),
            RESULT: (DataStructureKind.ARRAY, "Levels"),
        },
        BFS_STYLES,
    )
    queue: list[QueueElement] = []
    levels: list[list[int]] = []
    visited: list[str] = []

    def state() -> dict:
        return {TREE: tree, QUEUE: queue, RESULT: levels}

    def tree_highlights(*extra) -> dict:
        return {
            TREE: [ids("visited", visited), ids("active", [e.node_id for e in queue]), *extra]
        }

    def enqueue(node_id: str, level: int, how: str) -> None:
        queue.append(QueueElement(node_id=node_id, level=level))
        trace.emit(
            StepType.QUEUE_ENQUEUE,
            f"Enqueue {how} {tree.nodes[node_id].value} (level {level})",
            state(),
            {
                **tree_highlights(ids("processing", [node_id])),
                QUEUE: [indices("processing", [len(queue) - 1])],
            },
            StepContext(operation=Operation.WRITE, data_structure="queue"),
            {"node": node_id, "level": level, "queueSize": len(queue)},
        )

    def level_complete(level: int, next_level: int | None) -> None:
        trace.emit(
            StepType.LEVEL_COMPLETE,
            f"Level {level} complete: {levels[level]}"
            + (f"; moving on to level {next_level}" if next_level is not None else ""),
            state(),
            tree_highlights(),
            StepContext(loop_type=LoopType.WHILE, iteration_number=level),
            {"level": level, "levelValues": list(levels[level])},
        )

    trace.emit(
        StepType.INITIALIZATION,
        f"Level-order traversal of {len(tree.nodes)} node(s) using a queue",
        state(),
        variables={"nodes": len(tree.nodes), "root": tree.root},
    )
    if tree.root is None:
        trace.emit(
            StepType.RETURN,
            "The tree is empty: the result is empty",
            state(),
            variables={"result": []},
        )
        return trace.finish()

    enqueue(tree.root, 0, "the root")
    current_level = 0
    while queue:
        front = queue[0]
        if front.level != current_level:
            level_complete(current_level, front.level)
            current_level = front.level
        trace.emit(
            StepType.QUEUE_PEEK,
            f"Front of the queue: {tree.nodes[front.node_id].value} (level {front.level})",
            state(),
            {**tree_highlights(ids("current", [front.node_id])), QUEUE: [indices("current", [0])]},
            StepContext(operation=Operation.READ, data_structure="queue"),
            {"front": front.node_id, "level": front.level, "queueSize": len(queue)},
        )
        queue.pop(0)
        trace.emit(
            StepType.QUEUE_DEQUEUE,
            f"Dequeue {tree.nodes[front.node_id].value}",
            state(),
            tree_highlights(ids("current", [front.node_id])),
            StepContext(operation=Operation.WRITE, data_structure="queue"),
            {"node": front.node_id, "queueSize": len(queue)},
        )
        node = tree.nodes[front.node_id]
        if len(levels) <= front.level:
            levels.append([])
        levels[front.level].append(node.value)
        visited.append(node.id)
        trace.emit(
            StepType.TREE_TRAVERSAL,
            f"Visit {node.value}: add it to level {front.level}",
            state(),
            tree_highlights(ids("current", [node.id])),
            StepContext(operation=Operation.WRITE, data_structure="tree"),
            {"node": node.id, "value": node.value, "level": front.level},
        )
        for side, child in (("left child", node.left), ("right child", node.right)):
            if child is not None:
                enqueue(child, front.level + 1, side)

    level_complete(current_level, None)
    flat = [value for level in levels for value in level]
    trace.emit(
        StepType.RETURN,
        f"Traversal complete: {flat}",
        state(),
        {TREE: [ids("match", visited)]},
        variables={"result": flat, "levels": levels},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
