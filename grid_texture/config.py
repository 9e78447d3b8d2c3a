"""Run parameters.

:class:`SynthesisConfig` bundles every input of a synthesis run. All fields
are required; the pipeline is fully determined by them, so the output
filename is derived from the config alone.
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import List

from grid_texture.utils.schedule import exchange_schedule, noise_schedule

MAX_SEED = 2**64


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_real(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_finite(value: object) -> bool:
    return _is_real(value) and math.isfinite(value)  # type: ignore[arg-type]


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``, without a trailing ``.0``."""
    if _is_int(value):
        return str(value)
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text



def parse_seed(text: str) -> int:
    """Parse a seed typed by a user, checking it fits the 64-bit range."""
    seed = int(text.strip())
    if not 0 <= seed < MAX_SEED:
        raise ValueError(f"seed must be an integer in [0, 2**64), got {seed}")
    return seed

@dataclass(frozen=True)
class SynthesisConfig:
    """Validated synthesis parameters.

    Attributes:
        initial_noise: Noise stddev of the first round (> 0).
        final_noise: Noise stddev of the last round (0 < final <= initial).
        rounds: Number of subdivide+exchange rounds; output side is 2**rounds.
        outerp: Exponent applied to squared neighbor distances (>= 0).
        exchange_rate: Exchange trials per pixel in the last round (>= 0).
        seed: Seed for the single random stream, in ``[0, 2**64)``.

    Raises:
        ValueError: On construction if any field is out of range. In
            particular ``final_noise > initial_noise`` is rejected since the
            schedule would increase noise.
    """

    initial_noise: float
    final_noise: float
    rounds: int
    outerp: float
    exchange_rate: int
    seed: int

    def __post_init__(self) -> None:
        if not _is_finite(self.initial_noise) or not self.initial_noise > 0:
            raise ValueError(f"initial_noise must be finite and > 0, got {self.initial_noise!r}")
        if not _is_finite(self.final_noise) or not self.final_noise > 0:
            raise ValueError(f"final_noise must be finite and > 0, got {self.final_noise!r}")
        if self.final_noise > self.initial_noise:
            raise ValueError(
                f"final_noise ({self.final_noise}) must not exceed "
                f"initial_noise ({self.initial_noise})"
            )
        if not _is_int(self.rounds) or self.rounds < 1:
            raise ValueError(f"rounds must be an integer >= 1, got {self.rounds!r}")
        if not _is_finite(self.outerp) or not self.outerp >= 0:
            raise ValueError(f"outerp must be finite and >= 0, got {self.outerp!r}")
        if not _is_int(self.exchange_rate) or self.exchange_rate < 0:
            raise ValueError(
                f"exchange_rate must be an integer >= 0, got {self.exchange_rate!r}"
            )
        if not _is_int(self.seed) or not 0 <= self.seed < MAX_SEED:
            raise ValueError(f"seed must be an integer in [0, 2**64), got {self.seed!r}")

    @property
    def size(self) -> int:
        """Side length of the output texture."""
        return 2**self.rounds

    def filename(self) -> str:
        """Output filename encoding every parameter."""
        return (
            f"img-{format_number(self.initial_noise)}-{format_number(self.final_noise)}"
            f"-{self.rounds}-{format_number(self.outerp)}-{self.exchange_rate}-{self.seed}.png"
        )

    def noise_schedule(self) -> List[float]:
        return noise_schedule(self.initial_noise, self.final_noise, self.rounds)

    def exchange_schedule(self) -> List[int]:
        return exchange_schedule(self.exchange_rate, self.rounds)
