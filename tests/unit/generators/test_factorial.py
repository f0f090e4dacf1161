"""Tests for the simulated-recursion factorial trace generator."""

import pytest

from algotrace.generators.recursion import CALL_STACK, RECURSION_TREE, generate_factorial_steps
from algotrace.snapshot_types import FramePhase
from algotrace.trace_types import StepType

from tests.unit.generators.conftest import of_type, types_of


class TestFactorial:
    def test_result(self):
        final = generate_factorial_steps(5)[-1]
        assert final.step_type == StepType.RETURN
        assert final.variables["result"] == 120

    def test_base_case_reached_once_at_full_depth(self):
        steps = generate_factorial_steps(5)
        reached = of_type(steps, StepType.BASE_CASE_REACHED)
        assert len(reached) == 1
        assert [f.node for f in reached[0].data(CALL_STACK)] == [5, 4, 3, 2, 1]

    def test_only_innermost_frame_is_active(self):
        reached = of_type(generate_factorial_steps(3), StepType.BASE_CASE_REACHED)[0]
        phases = [f.phase for f in reached.data(CALL_STACK)]
        assert phases == [FramePhase.WAITING, FramePhase.WAITING, FramePhase.ACTIVE]

    def test_push_and_pop_balance(self):
        steps = generate_factorial_steps(4)
        assert len(of_type(steps, StepType.CALL_STACK_PUSH)) == 4
        assert len(of_type(steps, StepType.CALL_STACK_POP)) == 4
        assert steps[-1].data(CALL_STACK) == []

    def test_recursion_tree_records_return_values(self):
        tree = generate_factorial_steps(4)[-1].data(RECURSION_TREE)
        assert tree.root == "factorial-0"
        returns = {node.label: node.return_value for node in tree.nodes.values()}
        assert returns == {
            "factorial(4)": 24,
            "factorial(3)": 6,
            "factorial(2)": 2,
            "factorial(1)": 1,
        }
        assert all(node.status == FramePhase.COMPLETED for node in tree.nodes.values())

    def test_recursion_tree_is_a_chain(self):
        tree = generate_factorial_steps(3)[-1].data(RECURSION_TREE)
        assert tree.nodes["factorial-0"].children == ["factorial-1"]
        assert tree.nodes["factorial-2"].parent_id == "factorial-1"

    def test_zero(self):
        steps = generate_factorial_steps(0)
        assert types_of(steps) == [
            StepType.INITIALIZATION,
            StepType.CALL_STACK_PUSH,
            StepType.BASE_CASE_CHECK,
            StepType.BASE_CASE_REACHED,
            StepType.CALL_STACK_POP,
            StepType.RETURN,
        ]
        assert steps[-1].variables["result"] == 1

    def test_earlier_snapshots_keep_their_phase(self):
        steps = generate_factorial_steps(2)
        first_push = of_type(steps, StepType.CALL_STACK_PUSH)[0]
        assert first_push.data(CALL_STACK)[0].phase == FramePhase.ACTIVE

    @pytest.mark.parametrize("n", [-1, 9, True, 2.0, "3"])
    def test_out_of_domain_returns_empty(self, n):
        assert generate_factorial_steps(n) == []
