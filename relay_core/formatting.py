"""Text shown next to the charts: result lines, cards, legends and tooltips."""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from .directional import constants_for, text_display
from .models import CurveParameters, FaultType, Phase, PhaseAngleRegion, TripResult

FAULT_LABELS: Dict[FaultType, str] = {
    FaultType.PHASE: "Over Current",
    FaultType.EARTH: "Earth Fault",
}


def phase_name(phase: Phase) -> str:
    return f"{phase.value}-Phase"


def format_trip_time(result: TripResult) -> str:
    return f"Tripping Time: {result.trip_time_seconds:.4f} seconds"


def fault_label(fault_type: FaultType) -> str:
    return FAULT_LABELS[fault_type]


def phase_info_labels(fault_type: FaultType) -> List[str]:
    constants = constants_for(fault_type)
    return [f"{phase_name(p)}: {constants.for_phase(p):g}°" for p in Phase]


def region_card(region: PhaseAngleRegion) -> Tuple[str, str, str]:
    """``(title, positive tag, negative tag)`` for one phase's result card."""

    shown = text_display(region)
    return (
        f"{phase_name(region.phase)} (Base: {region.base:g}°)",
        f"+ve: +{shown.positive:.1f}°",
        f"-ve: {shown.negative:.1f}°",
    )


def curve_legend(curve: CurveParameters, tms: float) -> str:
    return f"{curve.name} (TMS={tms:g})"


def result_legend(result: TripResult) -> str:
    return f"Result: {result.trip_time_seconds:.2f}s"


def vector_legend(phase: Phase, kind: str, angle: float) -> str:
    if kind == "positive":
        return f"{phase_name(phase)} +ve (+{angle:.0f}°)"
    return f"{phase_name(phase)} -ve ({angle:.0f}°)"


def tooltip_angle(x: float, y: float, negative: bool) -> str:
    """Recover the displayed angle of a vector from its end point."""

    if x == 0 and y == 0:
        return "Origin (0°)"
    angle = math.degrees(math.atan2(y, x))
    if negative:
        if y < 0:
            return f"-{math.degrees(math.atan2(-y, x)):.1f}°"
        if angle >= 180:
            angle -= 360.0
    elif angle < 0:
        angle += 360.0
    sign = "+" if angle >= 0 else ""
    return f"{sign}{angle:.1f}°"
