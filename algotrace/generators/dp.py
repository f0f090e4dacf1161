"""Coin change (minimum number of coins) with a bottom-up DP table."""

from __future__ import annotations

import math

from algotrace.constants import (
    COIN_CHANGE,
    EMPHASIS_STEP_DURATION,
    MAX_COIN_AMOUNT,
    MAX_COIN_DENOMINATIONS,
    MAX_COIN_VALUE,
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

DP_TABLE = "dpTable"
COINS = "coins"
RESULT = "result"

COIN_CHANGE_STYLES = frozenset({"current", "compare", "processing", "match", "invalid"})


def _fmt(value: float) -> str:
    return "inf" if math.isinf(value) else str(int(value))


@returns_empty_on_invalid_input
def generate_coin_change_steps(coins: list[int], amount: int) -> list[Step]:
    """Fewest coins summing to *amount*, with the chosen coins reconstructed.

    ``dpTable[a]`` holds the fewest coins for amount ``a``; ``math.inf``
    marks an amount not reachable with the given denominations.
    """
    denominations = sorted(
        set(check_int_list(COIN_CHANGE, coins, 1, MAX_COIN_DENOMINATIONS, 1, MAX_COIN_VALUE))
    )
    check_int(COIN_CHANGE, "amount", amount, 0, MAX_COIN_AMOUNT)

    trace = TraceBuilder(
        COIN_CHANGE,
        {
            DP_TABLE: (DataStructureKind.ARRAY, "DP Table (min coins per amount)"),
            COINS: (DataStructureKind.ARRAY, "Coins"),
            RESULT: (DataStructureKind.ARRAY, "Coins Used"),
        },
        COIN_CHANGE_STYLES,
    )

    trace.emit(
        StepType.INITIALIZATION,
        f"Find the fewest coins from {denominations} that sum to {amount}",
        {COINS: denominations},
        variables={"amount": amount, "coins": denominations},
    )

    dp: list[float] = [0] + [math.inf] * amount
    last_coin: list[int | None] = [None] * (amount + 1)
    trace.emit(
        StepType.DP_TABLE_INITIALIZATION,
        f"dp[0] = 0; amounts 1..{amount} start unreachable (inf)",
        {DP_TABLE: dp, COINS: denominations},
        {DP_TABLE: [indices("match", [0])]},
        StepContext(operation=Operation.WRITE, data_structure="dp_table"),
        {"amount": amount, "tableSize": amount + 1},
    )

    for a in range(1, amount + 1):
        trace.emit(
            StepType.DP_AMOUNT_PROCESSING,
            f"Computing the fewest coins for amount {a}",
            {DP_TABLE: dp, COINS: denominations},
            {DP_TABLE: [indices("current", [a])]},
            StepContext(loop_type=LoopType.OUTER, iteration_number=a),
            {"currentAmount": a, "dp[a]": _fmt(dp[a])},
        )
        for ci, coin in enumerate(denominations):
            fits = coin <= a
            trace.emit(
                StepType.DP_COIN_CONSIDERATION,
                (
                    f"Consider coin {coin} for amount {a}"
                    if fits
                    else f"Coin {coin} is larger than {a}, skip it"
                ),
                {DP_TABLE: dp, COINS: denominations},
                {
                    DP_TABLE: [indices("current", [a])],
                    COINS: [indices("current" if fits else "invalid", [ci])],
                },
                StepContext(loop_type=LoopType.INNER, iteration_number=ci),
                {"currentAmount": a, "coin": coin},
            )
            if not fits:
                continue

            sub = dp[a - coin]
            trace.emit(
                StepType.DP_SUBPROBLEM_LOOKUP,
                f"dp[{a} - {coin}] = dp[{a - coin}] = {_fmt(sub)}",
                {DP_TABLE: dp, COINS: denominations},
                {
                    DP_TABLE: [indices("current", [a]), indices("compare", [a - coin])],
                    COINS: [indices("current", [ci])],
                },
                StepContext(operation=Operation.READ, data_structure="dp_table"),
                {"currentAmount": a, "coin": coin, "subproblem": _fmt(sub)},
            )

            candidate = sub + 1
            better = candidate < dp[a]
            trace.emit(
                StepType.DP_COMPARISON,
                f"Using coin {coin} gives {_fmt(candidate)} vs current best {_fmt(dp[a])}"
                + (": improvement" if better else ": no improvement"),
                {DP_TABLE: dp, COINS: denominations},
                {DP_TABLE: [indices("compare", [a - coin, a])], COINS: [indices("current", [ci])]},
                StepContext(operation=Operation.COMPARE),
                {
                    "currentAmount": a,
                    "coin": coin,
                    "candidate": _fmt(candidate),
                    "best": _fmt(dp[a]),
                },
            )
            if better:
                dp[a] = candidate
                last_coin[a] = coin
                trace.emit(
                    StepType.DP_TABLE_UPDATE,
                    f"dp[{a}] = {_fmt(candidate)} (last coin {coin})",
                    {DP_TABLE: dp, COINS: denominations},
                    {DP_TABLE: [indices("processing", [a])], COINS: [indices("current", [ci])]},
                    StepContext(operation=Operation.WRITE, data_structure="dp_table"),
                    {"currentAmount": a, "coin": coin, "dp[a]": _fmt(dp[a])},
                )

    if math.isinf(dp[amount]):
        trace.emit(
            StepType.DP_NO_SOLUTION,
            f"dp[{amount}] is still inf: {amount} cannot be formed from {denominations}",
            {DP_TABLE: dp, COINS: denominations, RESULT: []},
            {DP_TABLE: [indices("invalid", [amount])]},
            variables={"amount": amount, "minCoins": -1},
            duration=EMPHASIS_STEP_DURATION,
        )
        trace.emit(
            StepType.RETURN,
            "Returning -1",
            {DP_TABLE: dp, COINS: denominations, RESULT: []},
            {DP_TABLE: [indices("invalid", [amount])]},
            variables={"amount": amount, "result": -1},
        )
        return trace.finish()

    best = int(dp[amount])
    trace.emit(
        StepType.DP_OPTIMAL_SOLUTION_FOUND,
        f"dp[{amount}] = {best}: {amount} needs {best} coin(s)",
        {DP_TABLE: dp, COINS: denominations, RESULT: []},
        {DP_TABLE: [indices("match", [amount])]},
        variables={"amount": amount, "minCoins": best},
        duration=EMPHASIS_STEP_DURATION,
    )

    used: list[int] = []
    remaining = amount
    while remaining > 0:
        coin = last_coin[remaining]
        used.append(coin)
        trace.emit(
            StepType.DP_PATH_RECONSTRUCTION,
            f"Amount {remaining} was reached with coin {coin}; {remaining - coin} remains",
            {DP_TABLE: dp, COINS: denominations, RESULT: used},
            {
                DP_TABLE: [indices("current", [remaining]), indices("compare", [remaining - coin])],
                COINS: [indices("match", [denominations.index(coin)])],
            },
            StepContext(operation=Operation.READ, data_structure="dp_table"),
            {"remaining": remaining - coin, "coinsUsed": list(used)},
        )
        remaining -= coin

    trace.emit(
        StepType.RETURN,
        f"Returning {best}: coins used {used}",
        {DP_TABLE: dp, COINS: denominations, RESULT: used},
        {DP_TABLE: [indices("match", [amount])], RESULT: [indices("match", range(len(used)))]},
        variables={"amount": amount, "result": best, "coinsUsed": used},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
