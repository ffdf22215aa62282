import pytest

from adventsolve.day22 import PRUNE, best_banana_total, next_secret, nth_secret, solve


def test_next_secret_example():
    assert next_secret(123) == 15887950


def test_nth_secret_zero_steps():
    assert nth_secret(123, 0) == 123


def test_nth_secret_composes():
    assert nth_secret(123, 1) == next_secret(123)
    assert nth_secret(42, 3) == next_secret(next_secret(next_secret(42)))
    assert nth_secret(nth_secret(7, 5), 5) == nth_secret(7, 10)


def test_secrets_stay_within_24_bits():
    secret = 1
    for _ in range(100):
        secret = next_secret(secret)
        assert 0 <= secret <= PRUNE


def test_solve_part_one_example():
    p1, _ = solve("1\n10\n100\n2024\n")
    assert p1 == 37327623


def test_best_banana_total_example():
    assert best_banana_total([1, 2, 3, 2024]) == 23


def test_best_total_bounded_by_buyers():
    seeds = [1, 2, 3, 2024]
    assert 0 <= best_banana_total(seeds) <= 9 * len(seeds)
    assert best_banana_total(seeds) >= best_banana_total(seeds[:1])


def test_no_buyers_raises():
    with pytest.raises(ValueError):
        best_banana_total([])