"""Frame time measured in seconds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """Duration of a frame, convertible to float seconds."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    @property
    def seconds(self) -> float:
        return float(self.time)

    @property
    def milliseconds(self) -> float:
        return float(self.time) * 1000.0

    def __mul__(self, other: float) -> float:
        return float(self.time) * float(other)

    __rmul__ = __mul__