"""Tests for the coin change DP trace generator."""

import math

import pytest

from algotrace.generators.dp import COINS, DP_TABLE, RESULT, generate_coin_change_steps
from algotrace.trace_types import StepType

from tests.unit.generators.conftest import of_type, types_of


class TestCoinChangeSolvable:
    def test_fewest_coins(self):
        final = generate_coin_change_steps([1, 3, 4], 6)[-1]
        assert final.step_type == StepType.RETURN
        assert final.variables["result"] == 2

    def test_final_table(self):
        final = generate_coin_change_steps([1, 3, 4], 6)[-1]
        assert final.data(DP_TABLE) == [0, 1, 2, 1, 1, 2, 2]

    def test_reconstructs_coins_used(self):
        steps = generate_coin_change_steps([1, 3, 4], 6)
        assert len(of_type(steps, StepType.DP_PATH_RECONSTRUCTION)) == 2
        assert steps[-1].data(RESULT) == [3, 3]

    def test_initialization_precedes_table_setup(self):
        steps = generate_coin_change_steps([1, 3, 4], 6)
        assert types_of(steps)[:2] == [
            StepType.INITIALIZATION,
            StepType.DP_TABLE_INITIALIZATION,
        ]
        assert steps[1].data(DP_TABLE)[0] == 0
        assert all(math.isinf(v) for v in steps[1].data(DP_TABLE)[1:])

    def test_table_update_snapshots_are_independent(self):
        steps = generate_coin_change_steps([1, 3, 4], 6)
        assert math.isinf(steps[1].data(DP_TABLE)[6])
        assert steps[-1].data(DP_TABLE)[6] == 2

    def test_denominations_are_deduplicated_and_sorted(self):
        steps = generate_coin_change_steps([3, 1, 3], 2)
        assert steps[0].data(COINS) == [1, 3]

    def test_zero_amount_needs_no_coins(self):
        steps = generate_coin_change_steps([2, 5], 0)
        assert of_type(steps, StepType.DP_PATH_RECONSTRUCTION) == []
        assert steps[-1].variables["result"] == 0


class TestCoinChangeUnreachable:
    def test_reports_no_solution(self):
        steps = generate_coin_change_steps([2], 3)
        assert types_of(steps)[-2:] == [StepType.DP_NO_SOLUTION, StepType.RETURN]
        assert steps[-1].variables["result"] == -1
        assert math.isinf(steps[-1].data(DP_TABLE)[3])

    def test_oversized_coins_are_skipped(self):
        steps = generate_coin_change_steps([5], 3)
        assert of_type(steps, StepType.DP_SUBPROBLEM_LOOKUP) == []
        assert steps[-1].variables["result"] == -1


class TestCoinChangeInvalidInput:
    @pytest.mark.parametrize(
        "coins,amount",
        [([], 5), ([0], 5), ([101], 5), ([1], 101), ([1], -1), ([1] * 7, 5)],
    )
    def test_out_of_domain_returns_empty(self, coins, amount):
        assert generate_coin_change_steps(coins, amount) == []
