"""IDMT tripping-time formulas and curve sampling."""

from __future__ import annotations

import math
from typing import Dict, Optional

import numpy as np

from .conversions import parse_curve_type, parse_number
from .errors import FaultCurrentTooLow, MissingOrInvalidInput, NoCurveSelected
from .models import CurveParameters, CurvePoint, CurveSample, CurveType, TripInputs, TripResult

CURVES: Dict[CurveType, CurveParameters] = {
    CurveType.SI: CurveParameters(beta=0.14, alpha=0.02, name="Standard Inverse"),
    CurveType.VI: CurveParameters(beta=13.5, alpha=1.0, name="Very Inverse"),
    CurveType.EI: CurveParameters(beta=80.0, alpha=2.0, name="Extremely Inverse"),
    CurveType.LTI: CurveParameters(beta=120.0, alpha=1.0, name="Long Time Inverse"),
}

RATIO_START = 1.1
RATIO_STOP = 20.0
RATIO_STEP = 0.2
MAX_PLOT_TIME = 1000.0

# Distance on the ratio axis within which a sampled point stands for the result.
HIGHLIGHT_TOLERANCE = 0.2


def select_curve(curve_type: object) -> CurveParameters:
    """Return the constants for ``curve_type``; raise if nothing is selected.

    Raw identifiers such as ``"SI"`` are accepted; unknown ones raise
    :class:`UnknownSelection`.
    """

    curve_type = parse_curve_type(curve_type)
    try:
        return CURVES[curve_type]
    except KeyError:
        raise NoCurveSelected() from None


def read_trip_inputs(tms: object, fault_current: object, set_current: object) -> TripInputs:
    """Parse the three numeric fields, raising :class:`MissingOrInvalidInput`."""

    values = [parse_number(v) for v in (tms, fault_current, set_current)]
    if any(v is None for v in values):
        raise MissingOrInvalidInput()
    inputs = TripInputs(tms=values[0], fault_current=values[1], set_current=values[2])
    _check_inputs(inputs)
    return inputs


def compute_trip_time(params: Optional[CurveParameters], inputs: TripInputs) -> TripResult:
    """Evaluate ``t = beta * TMS / (ratio**alpha - 1)``.

    Checks run in a fixed order and the first failure is raised: missing
    curve, invalid numbers, then a fault current not above the set current.
    """

    if params is None:
        raise NoCurveSelected()
    _check_inputs(inputs)
    if not inputs.fault_current > inputs.set_current:
        raise FaultCurrentTooLow()

    ratio = inputs.ratio
    trip_time = _trip_time(params, inputs.tms, ratio)
    return TripResult(trip_time_seconds=trip_time, ratio=ratio)


def sample_curve(
    params: CurveParameters,
    tms: float,
    set_current: float,
    fault_current: float,
    tolerance: float = HIGHLIGHT_TOLERANCE,
) -> CurveSample:
    """Tabulate the curve over ratios 1.1 to 20.0 in 0.2 steps.

    Points whose time falls outside ``(0, 1000)`` seconds are dropped. The
    retained point nearest to ``fault_current / set_current`` is highlighted
    when it lies strictly within ``tolerance`` of it.
    """

    count = int(math.floor((RATIO_STOP - RATIO_START) / RATIO_STEP + 1e-9)) + 1
    ratios = np.round(RATIO_START + RATIO_STEP * np.arange(count), 1)
    times = (params.beta * tms) / (np.power(ratios, params.alpha) - 1.0)
    keep = (times > 0) & (times < MAX_PLOT_TIME)

    points = tuple(
        CurvePoint(ratio=float(r), time_seconds=float(t))
        for r, t in zip(ratios[keep], times[keep])
    )

    highlight_index = None
    if points and set_current:
        actual = fault_current / set_current
        distances = np.abs(np.array([p.ratio for p in points]) - actual)
        nearest = int(np.argmin(distances))
        if distances[nearest] < tolerance:
            highlight_index = nearest

    return CurveSample(points=points, highlight_index=highlight_index)


def _trip_time(params: CurveParameters, tms: float, ratio: float) -> float:
    return (params.beta * tms) / (ratio ** params.alpha - 1.0)


def _check_inputs(inputs: TripInputs) -> None:
    for value in (inputs.tms, inputs.fault_current, inputs.set_current):
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise MissingOrInvalidInput()
    if inputs.tms <= 0 or inputs.set_current <= 0:
        raise MissingOrInvalidInput()
