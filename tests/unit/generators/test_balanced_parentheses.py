"""Tests for the balanced brackets stack trace generator."""

import pytest

from algotrace.generators.stacks import INPUT, STACK, generate_balanced_parentheses_steps
from algotrace.trace_types import StepType

from tests.unit.generators.conftest import of_type, types_of


class TestBalanced:
    def test_nested_mixed_brackets(self):
        steps = generate_balanced_parentheses_steps("{[()()]}")
        final = steps[-1]
        assert final.step_type == StepType.VALIDATION_SUCCESS
        assert final.variables["isValid"] is True
        assert final.data(STACK) == []

    def test_stack_depth_peaks_at_nesting_level(self):
        steps = generate_balanced_parentheses_steps("{[()()]}")
        assert max(len(s.data(STACK)) for s in steps) == 3

    def test_pop_highlights_matched_pair(self):
        steps = generate_balanced_parentheses_steps("()")
        pop = of_type(steps, StepType.STACK_POP)[0]
        assert pop.highlighted(INPUT, "match") == [0, 1]

    def test_empty_string_is_balanced(self):
        steps = generate_balanced_parentheses_steps("")
        assert types_of(steps) == [StepType.INITIALIZATION, StepType.VALIDATION_SUCCESS]

    def test_step_context_tracks_character_index(self):
        steps = generate_balanced_parentheses_steps("()")
        accesses = of_type(steps, StepType.CHARACTER_ACCESS)
        assert [s.step_context.character_index for s in accesses] == [0, 1]


class TestUnbalanced:
    def test_mismatched_pair_fails_after_peek(self):
        steps = generate_balanced_parentheses_steps("(]")
        assert types_of(steps)[-2:] == [StepType.STACK_PEEK, StepType.VALIDATION_FAILURE]
        assert steps[-1].highlighted(INPUT, "invalid") == [1]

    def test_unclosed_bracket(self):
        steps = generate_balanced_parentheses_steps("(()")
        final = steps[-1]
        assert final.step_type == StepType.VALIDATION_FAILURE
        assert len(final.data(STACK)) == 1
        assert final.highlighted(INPUT, "invalid") == [0]

    def test_closing_without_opener(self):
        steps = generate_balanced_parentheses_steps(")")
        assert of_type(steps, StepType.STACK_PEEK) == []
        assert steps[-1].step_type == StepType.VALIDATION_FAILURE
        assert steps[-1].variables["isValid"] is False


class TestBalancedInvalidInput:
    @pytest.mark.parametrize("text", ["a()", "(" * 21, None, 42])
    def test_out_of_domain_returns_empty(self, text):
        assert generate_balanced_parentheses_steps(text) == []
