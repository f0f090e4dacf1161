"""Two-sum on a sorted array with converging pointers."""

from __future__ import annotations

from algotrace.constants import (
    EMPHASIS_STEP_DURATION,
    MAX_ABS_VALUE,
    MAX_ARRAY_LENGTH,
    TWO_SUM,
)
from algotrace.generators._base import (
    TraceBuilder,
    check_int,
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

TWO_SUM_STYLES = frozenset({"active", "compare", "match", "invalid"})


@returns_empty_on_invalid_input
def generate_two_sum_steps(values: list[int], target: int) -> list[Step]:
    """Find two entries summing to *target*; the input is sorted first."""
    arr = sorted(check_int_list(TWO_SUM, values, 2, MAX_ARRAY_LENGTH))
    check_int(TWO_SUM, "target", target, -2 * MAX_ABS_VALUE, 2 * MAX_ABS_VALUE)

    trace = TraceBuilder(
        TWO_SUM, {ARRAY: (DataStructureKind.ARRAY, "Sorted Array")}, TWO_SUM_STYLES
    )
    left, right = 0, len(arr) - 1

    trace.emit(
        StepType.INITIALIZATION,
        f"Looking for two numbers that sum to {target} in the sorted array",
        {ARRAY: arr},
        variables={"target": target, "currentSum": None},
    )
    trace.emit(
        StepType.POINTER_INITIALIZATION,
        f"left = {left} (value {arr[left]}), right = {right} (value {arr[right]})",
        {ARRAY: arr},
        {ARRAY: [indices("active", [left, right])]},
        variables={"left": left, "right": right, "target": target},
    )

    iteration = 0
    while left < right:
        iteration += 1
        trace.emit(
            StepType.LOOP_CONDITION,
            f"left ({left}) < right ({right}): keep searching",
            {ARRAY: arr},
            {ARRAY: [indices("active", [left, right])]},
            StepContext(loop_type=LoopType.WHILE, iteration_number=iteration),
            {"left": left, "right": right, "target": target},
        )
        current = arr[left] + arr[right]
        trace.emit(
            StepType.COMPARISON,
            f"{arr[left]} + {arr[right]} = {current}, comparing with target {target}",
            {ARRAY: arr},
            {ARRAY: [indices("compare", [left, right])]},
            StepContext(operation=Operation.COMPARE, iteration_number=iteration),
            {"left": left, "right": right, "target": target, "currentSum": current},
        )
        if current == target:
            trace.emit(
                StepType.RETURN_FOUND,
                f"Found it: indices [{left}, {right}] with values [{arr[left]}, {arr[right]}]",
                {ARRAY: arr},
                {ARRAY: [indices("match", [left, right])]},
                variables={"left": left, "right": right, "result": [left, right]},
                duration=EMPHASIS_STEP_DURATION,
            )
            return trace.finish()
        if current < target:
            left += 1
            trace.emit(
                StepType.POINTER_MOVE_LEFT,
                f"{current} < {target}: move the left pointer right to index {left}",
                {ARRAY: arr},
                {ARRAY: [indices("active", [left, right])]},
                StepContext(operation=Operation.WRITE, iteration_number=iteration),
                {"left": left, "right": right, "target": target, "currentSum": current},
            )
        else:
            right -= 1
            trace.emit(
                StepType.POINTER_MOVE_RIGHT,
                f"{current} > {target}: move the right pointer left to index {right}",
                {ARRAY: arr},
                {ARRAY: [indices("active", [left, right])]},
                StepContext(operation=Operation.WRITE, iteration_number=iteration),
                {"left": left, "right": right, "target": target, "currentSum": current},
            )

    trace.emit(
        StepType.RETURN_NOT_FOUND,
        f"Pointers met at index {left}: no two numbers sum to {target}",
        {ARRAY: arr},
        {ARRAY: [indices("invalid", range(len(arr)))]},
        variables={"left": left, "right": right, "result": None},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
