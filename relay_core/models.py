"""Domain models for relay protection computations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CurveType(Enum):
    """IDMT curve families; ``NONE`` is the "nothing selected" placeholder."""

    SI = "SI"
    VI = "VI"
    EI = "EI"
    LTI = "LTI"
    NONE = "CT"


class FaultType(Enum):
    PHASE = "PHASE"
    EARTH = "EARTH"


class Phase(Enum):
    R = "R"
    Y = "Y"
    B = "B"


class PhaseSelection(Enum):
    R = "R"
    Y = "Y"
    B = "B"
    ALL = "ALL"

    def phases(self) -> Tuple[Phase, ...]:
        if self is PhaseSelection.ALL:
            return (Phase.R, Phase.Y, Phase.B)
        return (Phase(self.value),)


@dataclass(frozen=True)
class CurveParameters:
    """Constants of one IDMT curve: ``t = beta * TMS / (ratio**alpha - 1)``."""

    beta: float
    alpha: float
    name: str


@dataclass(frozen=True)
class TripInputs:
    tms: float  # Time multiplier setting
    fault_current: float
    set_current: float

    @property
    def ratio(self) -> float:
        return self.fault_current / self.set_current


@dataclass(frozen=True)
class TripResult:
    trip_time_seconds: float
    ratio: float


@dataclass(frozen=True)
class CurvePoint:
    ratio: float
    time_seconds: float


@dataclass(frozen=True)
class CurveSample:
    """Sampled curve in ascending ratio order plus the highlighted point, if any."""

    points: Tuple[CurvePoint, ...]
    highlight_index: Optional[int] = None

    @property
    def ratios(self) -> Tuple[float, ...]:
        return tuple(p.ratio for p in self.points)

    @property
    def times(self) -> Tuple[float, ...]:
        return tuple(p.time_seconds for p in self.points)

    @property
    def highlight(self) -> Optional[CurvePoint]:
        if self.highlight_index is None:
            return None
        return self.points[self.highlight_index]


@dataclass(frozen=True)
class FaultTypeConstants:
    """Base angles in degrees for the R, Y and B phases."""

    r: float
    y: float
    b: float

    def for_phase(self, phase: Phase) -> float:
        if phase is Phase.R:
            return self.r
        if phase is Phase.Y:
            return self.y
        return self.b


@dataclass(frozen=True)
class PhaseAngleRegion:
    """Raw (un-normalised) boundaries of one phase's operating region."""

    phase: Phase
    base: float
    positive: float
    negative: float


@dataclass(frozen=True)
class TextDisplay:
    positive: float
    negative: float


@dataclass(frozen=True)
class GraphDisplay:
    positive: float
    negative: float
    shade_end: float  # negative boundary expressed counter-clockwise (0-360)


@dataclass(frozen=True)
class PlotVector:
    """Vector from the origin to ``end``; ``kind`` is "positive" or "negative"."""

    phase: Phase
    kind: str
    angle: float
    end: Tuple[float, float]
    label: str
