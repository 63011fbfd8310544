"""One-shot calculations for the GUI.

Each ``run_*`` function parses the raw widget values, runs the calculator and
returns an outcome holding either the full result or the validation error,
never both. A caller that gets an error must not draw any chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .conversions import parse_curve_type, parse_fault_type, parse_number, parse_phase_selection
from .directional import compute_region
from .errors import InvalidRCA, ValidationError
from .idmt import HIGHLIGHT_TOLERANCE, compute_trip_time, read_trip_inputs, sample_curve, select_curve
from .models import (
    CurveParameters,
    CurveSample,
    FaultType,
    Phase,
    PhaseAngleRegion,
    PhaseSelection,
    TripInputs,
    TripResult,
)


@dataclass(frozen=True)
class TrippingCalculation:
    curve: Optional[CurveParameters] = None
    inputs: Optional[TripInputs] = None
    result: Optional[TripResult] = None
    sample: Optional[CurveSample] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DirectionalCalculation:
    fault_type: Optional[FaultType] = None
    phase_selection: Optional[PhaseSelection] = None
    rca: Optional[float] = None
    regions: Optional[Dict[Phase, PhaseAngleRegion]] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_tripping_calculation(
    curve_id: object,
    tms: object,
    fault_current: object,
    set_current: object,
    tolerance: float = HIGHLIGHT_TOLERANCE,
) -> TrippingCalculation:
    try:
        curve = select_curve(parse_curve_type(curve_id))
        inputs = read_trip_inputs(tms, fault_current, set_current)
        result = compute_trip_time(curve, inputs)
    except ValidationError as exc:
        return TrippingCalculation(error=exc)

    sample = sample_curve(curve, inputs.tms, inputs.set_current, inputs.fault_current, tolerance)
    return TrippingCalculation(curve=curve, inputs=inputs, result=result, sample=sample)


def run_directional_calculation(
    rca: object,
    fault_type: object,
    phase_selection: object,
) -> DirectionalCalculation:
    try:
        angle = parse_number(rca)
        if angle is None:
            raise InvalidRCA()
        fault = parse_fault_type(fault_type)
        selection = parse_phase_selection(phase_selection)
        regions = compute_region(angle, fault, selection)
    except ValidationError as exc:
        return DirectionalCalculation(error=exc)

    return DirectionalCalculation(
        fault_type=fault,
        phase_selection=selection,
        rca=angle,
        regions=regions,
    )
