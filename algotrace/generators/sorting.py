"""Bubble sort trace generator."""

from __future__ import annotations

from algotrace.constants import BUBBLE_SORT, EMPHASIS_STEP_DURATION, MAX_ARRAY_LENGTH
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

ARRAY = "sortArray"

BUBBLE_SORT_STYLES = frozenset({"compare", "swap", "sorted", "match"})


@returns_empty_on_invalid_input
def generate_bubble_sort_steps(values: list[int]) -> list[Step]:
    """Bubble sort *values*, one step per comparison and per swap."""
    arr = check_int_list(BUBBLE_SORT, values, 1, MAX_ARRAY_LENGTH)
    n = len(arr)
    trace = TraceBuilder(
        BUBBLE_SORT, {ARRAY: (DataStructureKind.ARRAY, "Array")}, BUBBLE_SORT_STYLES
    )
    swaps = 0
    comparisons = 0

    def variables(i: int, j: int) -> dict:
        return {"i": i, "j": j, "n": n, "swaps": swaps, "comparisons": comparisons}

    trace.emit(
        StepType.INITIALIZATION,
        f"Starting bubble sort on {n} element(s)",
        {ARRAY: arr},
        variables=variables(0, 0),
    )

    for i in range(n - 1):
        settled = list(range(n - i, n))
        trace.emit(
            StepType.LOOP_START,
            f"Pass {i + 1}: bubble the largest unsorted element to index {n - i - 1}",
            {ARRAY: arr},
            {ARRAY: [indices("sorted", settled)]},
            StepContext(loop_type=LoopType.OUTER, pass_number=i + 1),
            variables(i, 0),
        )
        trace.emit(
            StepType.LOOP_START,
            f"Scan adjacent pairs from index 0 to {n - i - 2}",
            {ARRAY: arr},
            {ARRAY: [indices("sorted", settled)]},
            StepContext(loop_type=LoopType.INNER, pass_number=i + 1),
            variables(i, 0),
        )
        for j in range(n - i - 1):
            comparisons += 1
            trace.emit(
                StepType.COMPARISON,
                f"Comparing {arr[j]} and {arr[j + 1]}",
                {ARRAY: arr},
                {ARRAY: [indices("compare", [j, j + 1]), indices("sorted", settled)]},
                StepContext(
                    loop_type=LoopType.INNER,
                    operation=Operation.COMPARE,
                    pass_number=i + 1,
                    iteration_number=j,
                ),
                variables(i, j),
            )
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swaps += 1
                trace.emit(
                    StepType.SWAP,
                    f"Swapped {arr[j + 1]} and {arr[j]} because {arr[j + 1]} > {arr[j]}",
                    {ARRAY: arr},
                    {ARRAY: [indices("swap", [j, j + 1]), indices("sorted", settled)]},
                    StepContext(
                        loop_type=LoopType.INNER,
                        operation=Operation.WRITE,
                        pass_number=i + 1,
                        iteration_number=j,
                    ),
                    variables(i, j),
                )
            else:
                trace.emit(
                    StepType.NO_SWAP,
                    f"No swap needed: {arr[j]} <= {arr[j + 1]}",
                    {ARRAY: arr},
                    {ARRAY: [indices("compare", [j, j + 1]), indices("sorted", settled)]},
                    StepContext(
                        loop_type=LoopType.INNER, pass_number=i + 1, iteration_number=j
                    ),
                    variables(i, j),
                )
        trace.emit(
            StepType.PASS_COMPLETE,
            f"Pass {i + 1} complete: {arr[n - i - 1]} is in its final position",
            {ARRAY: arr},
            {ARRAY: [indices("sorted", range(n - i - 1, n))]},
            StepContext(pass_number=i + 1),
            variables(i, n - i - 1),
        )

    trace.emit(
        StepType.RETURN,
        f"Bubble sort complete after {swaps} swap(s): {arr}",
        {ARRAY: arr},
        {ARRAY: [indices("match", range(n))]},
        variables=variables(max(n - 1, 0), 0),
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
