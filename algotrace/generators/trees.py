"""Recursive in-order traversal of a binary tree.

Recursion is simulated: each frame records which stage it has reached
(entered, left subtree done, right subtree done), so the call stack and
the recursion tree are explicit at every step. Calls on null children
are traced as well, since that is where the base case fires.
"""

from __future__ import annotations

from algotrace.constants import EMPHASIS_STEP_DURATION, IN_ORDER_TRAVERSAL, MAX_TREE_NODES
from algotrace.generators._base import (
    RecursionTracker,
    TraceBuilder,
    build_tree,
    ids,
    indices,
    returns_empty_on_invalid_input,
)
from algotrace.snapshot_types import TreeNode
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

TREE = "tree"
CALL_STACK = "callStack"
RECURSION_TREE = "recursionTree"
RESULT = "result"

IN_ORDER_STYLES = frozenset({"current", "visited", "processing", "match"})

_ENTERED, _LEFT_DONE, _RIGHT_DONE = range(3)


@returns_empty_on_invalid_input
def generate_in_order_steps(nodes: list[TreeNode], root: str | None) -> list[Step]:
    """Visit left subtree, node, right subtree; collect values in visit order."""
    tree = build_tree(IN_ORDER_TRAVERSAL, nodes, root, MAX_TREE_NODES)

    trace = TraceBuilder(
        IN_ORDER_TRAVERSAL,
        {
            TREE: (DataStructureKind.TREE, "Binary Tree"),
            CALL_STACK: (DataStructureKind.CALL_STACK, "Call Stack"),
            RECURSION_TREE: (DataStructureKind.TREE, "Recursion Tree"),
            RESULT: (DataStructureKind.ARRAY, "In-order Result"),
        },
        IN_ORDER_STYLES,
    )
    frames = RecursionTracker(prefix="inorder")
    stages: list[int] = []
    result: list[int] = []
    visited: list[str] = []

    def state() -> dict:
        return {
            TREE: tree,
            CALL_STACK: frames.call_stack,
            RECURSION_TREE: frames.tree,
            RESULT: result,
        }

    def highlights(node_id: str | None, style: str = "current") -> dict:
        top = frames.top
        return {
            TREE: [ids("visited", visited), ids(style, [node_id] if node_id else [])],
            CALL_STACK: [ids(style, [top.id] if top else [])],
        }

    def label(node_id: str | None) -> str:
        return f"inorder({tree.nodes[node_id].value})" if node_id else "inorder(null)"

    def call(node_id: str | None, side: str) -> None:
        frames.push(node_id, label(node_id))
        stages.append(_ENTERED)
        trace.emit(
            StepType.RECURSIVE_CALL,
            f"Call {label(node_id)} on the {side}",
            state(),
            highlights(node_id, "processing"),
            StepContext(loop_type=LoopType.RECURSIVE),
            {"node": node_id, "depth": frames.depth - 1},
        )

    def ret(explanation: str) -> None:
        done = frames.pop(None)
        stages.pop()
        parent = frames.top.node if frames.top else None
        trace.emit(
            StepType.RECURSIVE_RETURN,
            explanation,
            state(),
            {**highlights(parent), RECURSION_TREE: [ids("match", [done.id])]},
            StepContext(loop_type=LoopType.RECURSIVE),
            {"returnedFrom": done.node, "depth": frames.depth},
        )

    trace.emit(
        StepType.INITIALIZATION,
        f"In-order traversal of {len(tree.nodes)} node(s): left, node, right",
        state(),
        variables={"nodes": len(tree.nodes), "root": tree.root},
    )

    call(tree.root, "root")
    while frames.call_stack:
        node_id = frames.top.node
        stage = stages[-1]
        if stage == _ENTERED:
            trace.emit(
                StepType.BASE_CASE_CHECK,
                "Is the node null?",
                state(),
                highlights(node_id),
                StepContext(operation=Operation.COMPARE),
                {"node": node_id, "isNull": node_id is None},
            )
            if node_id is None:
                trace.emit(
                    StepType.BASE_CASE_REACHED,
                    "Null node: nothing to visit, return",
                    state(),
                    highlights(None),
                    variables={"node": None},
                )
                ret("Return from inorder(null)")
                continue
            stages[-1] = _LEFT_DONE
            call(tree.nodes[node_id].left, f"left of {tree.nodes[node_id].value}")
        elif stage == _LEFT_DONE:
            node = tree.nodes[node_id]
            result.append(node.value)
            visited.append(node_id)
            trace.emit(
                StepType.TREE_TRAVERSAL,
                f"Left subtree of {node.value} done: visit {node.value}",
                state(),
                {**highlights(node_id, "current"), RESULT: [indices("match", [len(result) - 1])]},
                StepContext(operation=Operation.WRITE, data_structure="tree"),
                {"node": node_id, "value": node.value, "result": list(result)},
            )
            stages[-1] = _RIGHT_DONE
            call(node.right, f"right of {node.value}")
        else:
            ret(f"Both subtrees of {tree.nodes[node_id].value} done: return {label(node_id)}")

    trace.emit(
        StepType.RETURN,
        f"In-order result: {result}",
        state(),
        {TREE: [ids("match", visited)], RESULT: [indices("match", range(len(result)))]},
        variables={"result": result},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
