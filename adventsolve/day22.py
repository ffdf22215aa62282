"""Monkey Market: pseudorandom secrets and the best selling sequence."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable

PRUNE = (1 << 24) - 1
ROUNDS = 2000


def next_secret(n: int) -> int:
    """The secret number that follows ``n``."""
    n = ((n << 6) ^ n) & PRUNE
    n = ((n >> 5) ^ n) & PRUNE
    return ((n << 11) ^ n) & PRUNE


def nth_secret(seed: int, n: int = ROUNDS) -> int:
    """The secret after ``n`` steps from ``seed``."""
    for _ in range(n):
        seed = next_secret(seed)
    return seed


def _prices_by_sequence(seed: int) -> dict[tuple[int, ...], int]:
    """Price at the first appearance of each run of four price changes."""
    prices: dict[tuple[int, ...], int] = {}
    changes: deque[int] = deque(maxlen=4)
    prev_price = seed % 10
    secret = next_secret(seed)
    for _ in range(ROUNDS):
        price = secret % 10
        changes.append(price - prev_price)
        if len(changes) == 4:
            prices.setdefault(tuple(changes), price)
        prev_price = price
        secret = next_secret(secret)
    return prices


def best_banana_total(seeds: Iterable[int]) -> int:
    """Most bananas one sequence of four changes earns across all buyers."""
    totals: Counter[tuple[int, ...]] = Counter()
    for seed in seeds:
        totals.update(_prices_by_sequence(seed))
    if not totals:
        raise ValueError("no buyers")
    return max(totals.values())


def solve(text: str) -> tuple[int, int]:
    seeds = [int(line) for line in text.split()]
    return sum(nth_secret(seed) for seed in seeds), best_banana_total(seeds)