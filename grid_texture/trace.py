"""Immutable run reports.

A :class:`SynthesisTrace` collects one :class:`RoundStats` per round in a
persistent vector; appending returns a new trace, so partial traces can be
kept around (e.g. by a UI) without copying. :class:`SynthesisResult` pairs the
quantized pixels with the config and trace that produced them.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

import numpy as np
import numpy.typing as npt
from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_texture.config import SynthesisConfig

UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class RoundStats:
    """Statistics for one subdivide+exchange round.

    Attributes:
        index: 0-based round number.
        size: Grid side length after subdivision.
        noise: Noise stddev used for the subdivision.
        exchanges_per_pixel: Exchange trials per pixel for this round.
        trials: Total exchange trials (``exchanges_per_pixel * size**2``).
        accepted: Trials whose swap was accepted.
        energy: Total grid energy after the round's exchanges.
    """

    index: int
    size: int
    noise: float
    exchanges_per_pixel: int
    trials: int
    accepted: int
    energy: float


@dataclass(frozen=True)
class SynthesisTrace:
    rounds: PVector[RoundStats] = pvector()

    def append(self, stats: RoundStats) -> "SynthesisTrace":
        return SynthesisTrace(rounds=self.rounds.append(stats))

    @property
    def total_trials(self) -> int:
        return sum(stats.trials for stats in self.rounds)

    @property
    def total_accepted(self) -> int:
        return sum(stats.accepted for stats in self.rounds)

    def as_records(self) -> List[Dict[str, Any]]:
        """One plain dict per round, for tabular display."""
        return [asdict(stats) for stats in self.rounds]


@dataclass(frozen=True, eq=False)
class SynthesisResult:
    """Output of a full run.

    Attributes:
        config: Parameters of the run.
        pixels: ``uint8`` array of shape ``(size, size, 3)``; axis 0 is the
            row (image y).
        trace: Per-round statistics.
    """

    config: SynthesisConfig
    pixels: UInt8Array
    trace: SynthesisTrace

    @property
    def size(self) -> int:
        return int(self.pixels.shape[0])
