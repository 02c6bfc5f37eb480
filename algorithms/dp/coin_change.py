"""
coin_change.py — Coin Change (minimum coins)
============================================
Unbounded coin supply.  dp[a] is the fewest coins summing to a; amounts
that cannot be formed stay at infinity internally, show as None in the
table snapshots, and give -1 as the result.

Each amount is written once: every improving coin is reported as a
`candidate` first, then the minimum is written by a single `fill`.
"""

import math
from typing import Generator, List

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def coin_change(coins, amount):",                # 0
    "    dp[0] ← 0; dp[a] ← ∞ for a > 0",             # 1
    "    for a in 1 .. amount:",                      # 2
    "        for c in coins:",                        # 3
    "            if c <= a and dp[a-c] + 1 < best:",  # 4
    "                best ← dp[a-c] + 1",             # 5
    "        dp[a] ← best",                           # 6
    "    return dp[amount] if finite else -1",        # 7
]


def coin_change(coins: List[int], amount: int) -> Generator[Step, None, None]:
    table: List[float] = [0] + [math.inf] * amount
    sb = DPStepBuilder(table)
    # last coin used to reach each amount, for the coin list
    last_coin: List[int] = [0] * (amount + 1)

    yield sb.build(
        "start",
        f"Finding minimum coins needed for amount {amount} using coins {list(coins)}",
        line=1,
    )

    for a in range(1, amount + 1):
        best = math.inf
        for coin in coins:
            if coin <= a and table[a - coin] + 1 < best:
                best = table[a - coin] + 1
                last_coin[a] = coin
                yield sb.build(
                    "candidate",
                    f"Amount {a}: using coin {coin}, count = {best} ({table[a - coin]} + 1)",
                    line=5,
                    current_cell=(0, a),
                    highlighted_cells=[(0, a - coin)],
                    candidate=best,
                )

        table[a] = best
        if math.isinf(best):
            yield sb.build(
                "impossible",
                f"Amount {a} cannot be made with given coins",
                line=6,
                current_cell=(0, a),
            )
        else:
            yield sb.build(
                "fill",
                f"dp[{a}] = {best}",
                line=6,
                current_cell=(0, a),
            )

    if math.isinf(table[amount]):
        yield sb.complete(
            f"Amount {amount} cannot be made with given coins",
            result=-1,
            line=7,
        )
        return

    used: List[int] = []
    a = amount
    while a > 0:
        used.append(last_coin[a])
        a -= last_coin[a]
    yield sb.complete(
        f"Minimum coins needed: {table[amount]}",
        result=int(table[amount]),
        line=7,
        current_cell=(0, amount),
        sequence=used,
    )
