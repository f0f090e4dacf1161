"""Minimum cost to reduce an array to one element.

An operation picks two elements, removes the larger and costs the
smaller. Pairing the global minimum with every other element is optimal,
so the answer is ``(n - 1) * min``.
"""

from __future__ import annotations

from algotrace.constants import (
    EMPHASIS_STEP_DURATION,
    MAX_ABS_VALUE,
    MAX_ARRAY_LENGTH,
    MIN_COST_ARRAY,
)
from algotrace.generators._base import (
    TraceBuilder,
    check_int_list,
    indices,
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

ARRAY = "array"

MIN_COST_STYLES = frozenset({"active", "compare", "processing", "invalid", "match"})


@returns_empty_on_invalid_input
def generate_min_cost_steps(values: list[int]) -> list[Step]:
    """Reduce positive *values* to one element at minimum total cost."""
    arr = check_int_list(MIN_COST_ARRAY, values, 1, MAX_ARRAY_LENGTH, 1, MAX_ABS_VALUE)
    n = len(arr)
    trace = TraceBuilder(
        MIN_COST_ARRAY, {ARRAY: (DataStructureKind.ARRAY, "Array")}, MIN_COST_STYLES
    )

    trace.emit(
        StepType.INITIALIZATION,
        "Reduce the array to one element: each operation removes the larger of "
        "two elements and costs the smaller",
        {ARRAY: arr},
        variables={"n": n, "totalCost": 0},
    )
    trace.emit(
        StepType.BASE_CASE_CHECK,
        f"Array size is {n}: "
        + ("already a single element, nothing to pay" if n == 1 else f"{n - 1} removal(s) needed"),
        {ARRAY: arr},
        {ARRAY: [indices("active", range(n))]},
        StepContext(operation=Operation.COMPARE),
        {"n": n, "operationsNeeded": n - 1},
    )
    if n == 1:
        trace.emit(
            StepType.RETURN,
            "Total cost: 0",
            {ARRAY: arr},
            {ARRAY: [indices("match", [0])]},
            variables={"totalCost": 0},
            duration=EMPHASIS_STEP_DURATION,
        )
        return trace.finish()

    trace.emit(
        StepType.GREEDY_INSIGHT,
        "Every removal costs the smaller element of its pair, so anchor every "
        "pair on the smallest element: find it first",
        {ARRAY: arr},
        {ARRAY: [indices("active", [0])]},
        variables={"candidateMin": arr[0], "candidateIndex": 0},
    )

    min_index = 0
    for i in range(1, n):
        trace.emit(
            StepType.PAIR_COMPARISON,
            f"Compare {arr[i]} with the smallest so far, {arr[min_index]}",
            {ARRAY: arr},
            {ARRAY: [indices("active", [min_index]), indices("compare", [i])]},
            StepContext(loop_type=LoopType.OUTER, operation=Operation.COMPARE, iteration_number=i),
            {"i": i, "minValue": arr[min_index], "minIndex": min_index},
        )
        if arr[i] < arr[min_index]:
            min_index = i
            trace.emit(
                StepType.GREEDY_SELECTION,
                f"{arr[i]} is the new smallest element",
                {ARRAY: arr},
                {ARRAY: [indices("active", [min_index])]},
                StepContext(operation=Operation.WRITE, iteration_number=i),
                {"minValue": arr[min_index], "minIndex": min_index},
            )

    anchor = arr[min_index]
    predicted = (n - 1) * anchor
    trace.emit(
        StepType.FORMULA_DERIVATION,
        f"{n - 1} removal(s), each costing {anchor}: total = {n - 1} x {anchor} = {predicted}",
        {ARRAY: arr},
        {ARRAY: [indices("active", [min_index])]},
        variables={"operationsNeeded": n - 1, "minValue": anchor, "predictedCost": predicted},
    )

    total = 0
    operation = 0
    while len(arr) > 1:
        operation += 1
        target = 0 if min_index != 0 else 1
        trace.emit(
            StepType.DECISION_TREE,
            f"Pair the anchor {anchor} with {arr[target]}: {arr[target]} is removed and "
            f"the cost is {anchor}, the cheapest possible",
            {ARRAY: arr},
            {ARRAY: [indices("active", [min_index]), indices("compare", [target])]},
            StepContext(operation=Operation.COMPARE, iteration_number=operation),
            {"pair": [anchor, arr[target]], "pairCost": anchor, "operation": operation},
        )
        total += anchor
        trace.emit(
            StepType.COST_CALCULATION,
            f"Pay {anchor}: running total {total}",
            {ARRAY: arr},
            {ARRAY: [indices("active", [min_index]), indices("invalid", [target])]},
            StepContext(operation=Operation.WRITE, iteration_number=operation),
            {"operationCost": anchor, "totalCost": total, "operation": operation},
        )
        removed = arr.pop(target)
        if target < min_index:
            min_index -= 1
        trace.emit(
            StepType.ELEMENT_REMOVAL,
            f"Removed {removed}; {len(arr)} element(s) left",
            {ARRAY: arr},
            {ARRAY: [indices("active" if len(arr) > 1 else "match", [min_index])]},
            StepContext(
                operation=Operation.WRITE, data_structure="array", iteration_number=operation
            ),
            {"removed": removed, "remaining": list(arr), "totalCost": total},
        )

    trace.emit(
        StepType.OPTIMALITY_PROOF,
        f"Any other pairing would charge an element larger than {anchor} at least once, "
        f"so {total} = {operation} x {anchor} is optimal",
        {ARRAY: arr},
        {ARRAY: [indices("match", [0])]},
        variables={"totalCost": total, "predictedCost": predicted, "operations": operation},
        duration=EMPHASIS_STEP_DURATION,
    )
    trace.emit(
        StepType.RETURN,
        f"Total cost: {total}",
        {ARRAY: arr},
        {ARRAY: [indices("match", [0])]},
        variables={"totalCost": total},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
