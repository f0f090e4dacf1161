"""Binary and linear search trace generators."""

from __future__ import annotations

from algotrace.constants import (
    BINARY_SEARCH,
    EMPHASIS_STEP_DURATION,
    LINEAR_SEARCH,
    MAX_ARRAY_LENGTH,
)
from algotrace.generators._base import (
    TraceBuilder,
    check_int,
    check_int_list,
    indices,
    require,
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

ARRAY = "searchArray"

SEARCH_STYLES = frozenset({"active", "compare", "visited", "match", "invalid"})


def _search_builder(algorithm_id: str) -> TraceBuilder:
    return TraceBuilder(
        algorithm_id, {ARRAY: (DataStructureKind.ARRAY, "Search Array")}, SEARCH_STYLES
    )


@returns_empty_on_invalid_input
def generate_binary_search_steps(values: list[int], target: int) -> list[Step]:
    """Binary search for *target* in the non-decreasing list *values*."""
    arr = check_int_list(BINARY_SEARCH, values, 1, MAX_ARRAY_LENGTH)
    check_int(BINARY_SEARCH, "target", target)
    require(
        all(a <= b for a, b in zip(arr, arr[1:])),
        BINARY_SEARCH,
        "values must be sorted in non-decreasing order",
    )

    trace = _search_builder(BINARY_SEARCH)
    left, right = 0, len(arr) - 1
    eliminated: list[int] = []

    trace.emit(
        StepType.INITIALIZATION,
        f"Searching for {target}: left = 0, right = {right}",
        {ARRAY: arr},
        {ARRAY: [indices("active", range(left, right + 1))]},
        variables={"left": left, "right": right, "mid": None, "target": target},
    )

    iteration = 0
    while left <= right:
        iteration += 1
        trace.emit(
            StepType.LOOP_CONDITION,
            f"left ({left}) <= right ({right}): the window still has candidates",
            {ARRAY: arr},
            {ARRAY: [indices("active", range(left, right + 1)), indices("visited", eliminated)]},
            StepContext(loop_type=LoopType.WHILE, iteration_number=iteration),
            {"left": left, "right": right, "mid": None, "target": target},
        )
        mid = (left + right) // 2
        trace.emit(
            StepType.COMPARISON,
            f"mid = {mid}: comparing arr[{mid}] = {arr[mid]} with target {target}",
            {ARRAY: arr},
            {
                ARRAY: [
                    indices("active", range(left, right + 1)),
                    indices("compare", [mid]),
                    indices("visited", eliminated),
                ]
            },
            StepContext(operation=Operation.COMPARE, iteration_number=iteration),
            {"left": left, "right": right, "mid": mid, "target": target},
        )
        if arr[mid] == target:
            trace.emit(
                StepType.RETURN_FOUND,
                f"Found {target} at index {mid}",
                {ARRAY: arr},
                {ARRAY: [indices("match", [mid]), indices("visited", eliminated)]},
                variables={"left": left, "right": right, "mid": mid, "result": mid},
                duration=EMPHASIS_STEP_DURATION,
            )
            return trace.finish()
        if arr[mid] < target:
            eliminated.extend(range(left, mid + 1))
            left = mid + 1
            explanation = f"{arr[mid]} < {target}: discard the left half, left = {left}"
        else:
            eliminated.extend(range(mid, right + 1))
            right = mid - 1
            explanation = f"{arr[mid]} > {target}: discard the right half, right = {right}"
        trace.emit(
            StepType.ASSIGNMENT,
            explanation,
            {ARRAY: arr},
            {ARRAY: [indices("active", range(left, right + 1)), indices("visited", eliminated)]},
            StepContext(operation=Operation.WRITE, iteration_number=iteration),
            {"left": left, "right": right, "mid": mid, "target": target},
        )

    trace.emit(
        StepType.RETURN_NOT_FOUND,
        f"left ({left}) > right ({right}): {target} is not in the array",
        {ARRAY: arr},
        {ARRAY: [indices("invalid", range(len(arr)))]},
        variables={"left": left, "right": right, "result": -1},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()


@returns_empty_on_invalid_input
def generate_linear_search_steps(values: list[int], target: int) -> list[Step]:
    """Scan *values* left to right for *target*."""
    arr = check_int_list(LINEAR_SEARCH, values, 1, MAX_ARRAY_LENGTH)
    check_int(LINEAR_SEARCH, "target", target)

    trace = _search_builder(LINEAR_SEARCH)
    trace.emit(
        StepType.INITIALIZATION,
        f"Searching for {target} among {len(arr)} element(s)",
        {ARRAY: arr},
        variables={"i": 0, "target": target},
    )

    for i, value in enumerate(arr):
        visited = list(range(i))
        trace.emit(
            StepType.LOOP_START,
            f"Check index {i}",
            {ARRAY: arr},
            {ARRAY: [indices("active", [i]), indices("visited", visited)]},
            StepContext(loop_type=LoopType.OUTER, iteration_number=i),
            {"i": i, "target": target},
        )
        trace.emit(
            StepType.COMPARISON,
            f"Comparing arr[{i}] = {value} with target {target}",
            {ARRAY: arr},
            {ARRAY: [indices("compare", [i]), indices("visited", visited)]},
            StepContext(operation=Operation.COMPARE, iteration_number=i),
            {"i": i, "target": target, "current": value},
        )
        if value == target:
            trace.emit(
                StepType.RETURN_FOUND,
                f"Found {target} at index {i}",
                {ARRAY: arr},
                {ARRAY: [indices("match", [i]), indices("visited", visited)]},
                variables={"i": i, "target": target, "result": i},
                duration=EMPHASIS_STEP_DURATION,
            )
            return trace.finish()
        trace.emit(
            StepType.ASSIGNMENT,
            f"{value} != {target}, move on to index {i + 1}",
            {ARRAY: arr},
            {ARRAY: [indices("visited", range(i + 1))]},
            StepContext(operation=Operation.WRITE, iteration_number=i),
            {"i": i + 1, "target": target},
        )

    trace.emit(
        StepType.RETURN_NOT_FOUND,
        f"Reached the end: {target} is not in the array",
        {ARRAY: arr},
        {ARRAY: [indices("invalid", range(len(arr)))]},
        variables={"i": len(arr), "target": target, "result": -1},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
