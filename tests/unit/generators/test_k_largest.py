"""Tests for the k-largest-elements min-heap trace generator."""

import pytest

from algotrace.generators.heaps import HEAP, generate_k_largest_steps
from algotrace.line_maps import build_default_resolver
from algotrace.trace_types import Operation, StepType

from tests.unit.generators.conftest import of_type

VALUES = [3, 1, 5, 12, 2, 11, 7]


def _is_min_heap(elements: list[int]) -> bool:
    return all(
        elements[(i - 1) // 2] <= elements[i] for i in range(1, len(elements))
    )


class TestKLargest:
    def test_result_is_largest_first(self):
        steps = generate_k_largest_steps(VALUES, 3)
        assert steps[-1].step_type == StepType.RETURN
        assert steps[-1].variables["result"] == [12, 11, 7]

    def test_final_heap(self):
        found = of_type(generate_k_largest_steps(VALUES, 3), StepType.HEAP_RESULT_FOUND)[0]
        heap = found.data(HEAP)
        assert heap.elements == [7, 12, 11]
        assert heap.size == 3
        assert heap.capacity == 3
        assert _is_min_heap(heap.elements)

    def test_small_values_are_skipped(self):
        steps = generate_k_largest_steps(VALUES, 3)
        skipped = [s.variables["current"] for s in of_type(steps, StepType.HEAP_SKIP)]
        assert skipped == [2]

    def test_replacement_is_pop_then_push(self):
        steps = generate_k_largest_steps(VALUES, 3)
        pops = of_type(steps, StepType.HEAP_POP)
        replaces = [
            s
            for s in of_type(steps, StepType.HEAP_PUSH)
            if s.step_context.operation == Operation.REPLACE
        ]
        assert [s.variables["removed"] for s in pops] == [1, 3, 5]
        assert [s.variables["value"] for s in replaces] == [12, 11, 7]

    def test_heap_property_holds_between_operations(self):
        in_flight = {
            StepType.HEAP_PUSH,
            StepType.HEAP_POP,
            StepType.HEAP_SIFT_UP,
            StepType.HEAP_SIFT_DOWN,
        }
        for step in generate_k_largest_steps(VALUES, 3):
            if step.step_type not in in_flight:
                assert _is_min_heap(step.data(HEAP).elements), step.explanation

    def test_replace_push_resolves_to_its_own_lines(self):
        resolver = build_default_resolver()
        steps = generate_k_largest_steps(VALUES, 3)
        replace = next(
            s
            for s in of_type(steps, StepType.HEAP_PUSH)
            if s.step_context.operation == Operation.REPLACE
        )
        assert resolver.resolve_step("k-largest-elements", replace, "python").key == "heap_push_replace"

    def test_k_equal_to_length_keeps_everything(self):
        steps = generate_k_largest_steps([4, 1, 3], 3)
        assert steps[-1].variables["result"] == [4, 3, 1]
        assert of_type(steps, StepType.HEAP_COMPARE) == []

    @pytest.mark.parametrize("values,k", [(VALUES, 0), (VALUES, 8), ([], 1), (VALUES, -1)])
    def test_out_of_domain_returns_empty(self, values, k):
        assert generate_k_largest_steps(values, k) == []
