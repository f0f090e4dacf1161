"""Recursive factorial, simulated with an explicit call stack."""

from __future__ import annotations

from algotrace.constants import EMPHASIS_STEP_DURATION, FACTORIAL, MAX_FACTORIAL_N
from algotrace.generators._base import (
    RecursionTracker,
    TraceBuilder,
    check_int,
    ids,
    returns_empty_on_invalid_input,
)
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

CALL_STACK = "callStack"
RECURSION_TREE = "recursionTree"

FACTORIAL_STYLES = frozenset({"active", "processing", "match"})


@returns_empty_on_invalid_input
def generate_factorial_steps(n: int) -> list[Step]:
    """Compute ``n!`` the recursive way, one step per call event."""
    check_int(FACTORIAL, "n", n, 0, MAX_FACTORIAL_N)

    trace = TraceBuilder(
        FACTORIAL,
        {
            CALL_STACK: (DataStructureKind.CALL_STACK, "Call Stack"),
            RECURSION_TREE: (DataStructureKind.TREE, "Recursion Tree"),
        },
        FACTORIAL_STYLES,
    )
    frames = RecursionTracker(prefix="factorial")

    def state() -> dict:
        return {CALL_STACK: frames.call_stack, RECURSION_TREE: frames.tree}

    def focus(style: str) -> dict:
        top = frames.top
        return {CALL_STACK: [ids(style, [top.id])], RECURSION_TREE: [ids(style, [top.id])]}

    trace.emit(
        StepType.INITIALIZATION,
        f"Compute factorial({n}) recursively: n! = n * (n-1)!, with 0! = 1! = 1",
        state(),
        variables={"n": n},
    )

    # Descend: one frame per call until the base case.
    k = n
    while True:
        frames.push(k, f"factorial({k})")
        trace.emit(
            StepType.CALL_STACK_PUSH,
            f"Push a frame for factorial({k}) at depth {frames.depth - 1}",
            state(),
            focus("active"),
            StepContext(data_structure="call_stack"),
            {"n": k, "depth": frames.depth - 1},
        )
        trace.emit(
            StepType.BASE_CASE_CHECK,
            f"Is {k} <= 1?",
            state(),
            focus("active"),
            StepContext(operation=Operation.COMPARE),
            {"n": k, "isBaseCase": k <= 1},
        )
        if k <= 1:
            trace.emit(
                StepType.BASE_CASE_REACHED,
                f"Base case: factorial({k}) = 1",
                state(),
                focus("match"),
                variables={"n": k, "returnValue": 1},
            )
            break
        trace.emit(
            StepType.RECURSIVE_CALL,
            f"factorial({k}) needs factorial({k - 1}): call it",
            state(),
            focus("processing"),
            StepContext(loop_type=LoopType.RECURSIVE),
            {"n": k, "calling": k - 1},
        )
        k -= 1

    # Unwind: pop each frame and let the caller multiply.
    result = 1
    while True:
        done = frames.pop(result)
        trace.emit(
            StepType.CALL_STACK_POP,
            f"Pop factorial({done.node}), returning {result}",
            state(),
            {RECURSION_TREE: [ids("match", [done.id])]},
            StepContext(data_structure="call_stack"),
            {"n": done.node, "returnValue": result, "depth": frames.depth},
        )
        caller = frames.top
        if caller is None:
            break
        result *= caller.node
        trace.emit(
            StepType.RECURSIVE_RETURN,
            f"factorial({caller.node}) = {caller.node} * {result // caller.node} = {result}",
            state(),
            focus("processing"),
            StepContext(loop_type=LoopType.RECURSIVE),
            {"n": caller.node, "subResult": result // caller.node, "returnValue": result},
        )

    trace.emit(
        StepType.RETURN,
        f"factorial({n}) = {result}",
        state(),
        {RECURSION_TREE: [ids("match", list(frames.tree.nodes))]},
        variables={"n": n, "result": result},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
