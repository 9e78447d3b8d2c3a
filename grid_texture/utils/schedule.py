"""Per-round noise and exchange budgets."""

from typing import List


def noise_step(initial_noise: float, final_noise: float, rounds: int) -> float:
    """Geometric ratio between consecutive rounds' noise.

    A single round has nothing to interpolate, so the ratio is 1.0 and that
    round runs at ``initial_noise``.
    """
    if rounds <= 1:
        return 1.0
    return (final_noise / initial_noise) ** (1.0 / (rounds - 1))


def noise_schedule(initial_noise: float, final_noise: float, rounds: int) -> List[float]:
    """Noise stddev per round, from ``initial_noise`` down to ``final_noise``."""
    step = noise_step(initial_noise, final_noise, rounds)
    return [initial_noise * step**i for i in range(rounds)]


def exchange_schedule(exchange_rate: int, rounds: int) -> List[int]:
    """Exchange trials per pixel for each round.

    Coarse rounds get more trials per pixel: the rate doubles for every round
    still remaining after the current one.
    """
    return [exchange_rate * 2 ** (rounds - 1 - i) for i in range(rounds)]
