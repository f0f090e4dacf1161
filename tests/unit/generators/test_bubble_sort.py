"""Tests for the bubble sort trace generator."""

import pytest

from algotrace.generators.sorting import ARRAY, generate_bubble_sort_steps
from algotrace.trace_types import LoopType, StepType

from tests.unit.generators.conftest import assert_sequential_ids, of_type, types_of


class TestBubbleSortScenario:
    def test_first_step_holds_input(self):
        steps = generate_bubble_sort_steps([64, 34, 25])
        assert steps[0].step_type == StepType.INITIALIZATION
        assert steps[0].data(ARRAY) == [64, 34, 25]

    def test_swap_step_shows_post_swap_order(self):
        steps = generate_bubble_sort_steps([64, 34, 25])
        swaps = of_type(steps, StepType.SWAP)
        assert any(step.data(ARRAY) == [34, 64, 25] for step in swaps)

    def test_final_step_is_sorted_and_fully_matched(self):
        steps = generate_bubble_sort_steps([64, 34, 25])
        final = steps[-1]
        assert final.step_type == StepType.RETURN
        assert final.data(ARRAY) == [25, 34, 64]
        assert final.highlighted(ARRAY, "match") == [0, 1, 2]

    def test_ids_are_sequential(self):
        assert_sequential_ids(generate_bubble_sort_steps([64, 34, 25]))


class TestBubbleSortBehaviour:
    def test_final_snapshot_is_sorted_permutation(self):
        values = [5, -3, 9, 0, 5, 2]
        final = generate_bubble_sort_steps(values)[-1]
        assert final.data(ARRAY) == sorted(values)

    def test_already_sorted_input_never_swaps(self):
        steps = generate_bubble_sort_steps([1, 2, 3])
        assert of_type(steps, StepType.SWAP) == []
        assert len(of_type(steps, StepType.NO_SWAP)) == 3

    def test_comparison_count_is_quadratic(self):
        steps = generate_bubble_sort_steps([4, 3, 2, 1])
        assert len(of_type(steps, StepType.COMPARISON)) == 6
        assert len(of_type(steps, StepType.SWAP)) == 6

    def test_loop_starts_carry_loop_type(self):
        steps = generate_bubble_sort_steps([2, 1])
        loop_types = [s.step_context.loop_type for s in of_type(steps, StepType.LOOP_START)]
        assert loop_types == [LoopType.OUTER, LoopType.INNER]

    def test_single_element_is_initialization_then_return(self):
        steps = generate_bubble_sort_steps([7])
        assert types_of(steps) == [StepType.INITIALIZATION, StepType.RETURN]

    def test_pass_complete_marks_settled_suffix(self):
        steps = generate_bubble_sort_steps([3, 2, 1])
        first_pass = of_type(steps, StepType.PASS_COMPLETE)[0]
        assert first_pass.highlighted(ARRAY, "sorted") == [2]

    def test_input_list_is_not_mutated(self):
        values = [3, 1, 2]
        generate_bubble_sort_steps(values)
        assert values == [3, 1, 2]


class TestBubbleSortInvalidInput:
    @pytest.mark.parametrize(
        "values",
        [[], list(range(16)), [1000], [-1000], [True, 1], "abc", [1.5]],
    )
    def test_out_of_domain_returns_empty(self, values):
        assert generate_bubble_sort_steps(values) == []
