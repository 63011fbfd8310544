"""Directional relay regions.

Each phase has a positive boundary (``+90`` reach) and a negative boundary
(``-90`` reach), both rotated by the RCA and the phase's base angle. Two
display policies turn the raw boundaries into angles: :func:`text_display`
for the result cards and :func:`graph_display` for the vector diagram. They
agree for ordinary inputs but not at every edge (a negative boundary above
zero keeps its sign in text and is flipped clockwise on the graph), so they
are kept as separate functions.
"""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Tuple

from .conversions import parse_fault_type, parse_number, parse_phase_selection
from .errors import InvalidRCA
from .models import (
    FaultType,
    FaultTypeConstants,
    GraphDisplay,
    Phase,
    PhaseAngleRegion,
    PlotVector,
    TextDisplay,
)

POSITIVE_REACH = 90.0
NEGATIVE_REACH = -90.0

FAULT_CONSTANTS: Dict[FaultType, FaultTypeConstants] = {
    FaultType.PHASE: FaultTypeConstants(r=-90.0, y=150.0, b=30.0),
    FaultType.EARTH: FaultTypeConstants(r=0.0, y=-120.0, b=120.0),
}


def constants_for(fault_type: object) -> FaultTypeConstants:
    return FAULT_CONSTANTS[parse_fault_type(fault_type)]


def compute_region(
    rca: object,
    fault_type: object,
    phase_selection: object,
) -> Dict[Phase, PhaseAngleRegion]:
    """Return the raw boundaries for the selected phase(s), in R, Y, B order."""

    angle = parse_number(rca)
    if angle is None:
        raise InvalidRCA()

    constants = constants_for(fault_type)
    phase_selection = parse_phase_selection(phase_selection)
    regions: Dict[Phase, PhaseAngleRegion] = {}
    for phase in phase_selection.phases():
        base = constants.for_phase(phase)
        regions[phase] = PhaseAngleRegion(
            phase=phase,
            base=base,
            positive=POSITIVE_REACH + angle + base,
            negative=NEGATIVE_REACH + angle + base,
        )
    return regions


def _positive_display(positive: float) -> float:
    return positive + 360.0 if positive < 0 else positive


def text_display(region: PhaseAngleRegion) -> TextDisplay:
    """Angles shown on the result card.

    Positive is counter-clockwise; negative stays in roughly ``(-360, 180]``.
    """

    negative = region.negative
    if negative > 180:
        negative -= 360.0
    if negative < -360:
        negative += 360.0
    return TextDisplay(positive=_positive_display(region.positive), negative=negative)


def graph_display(region: PhaseAngleRegion) -> GraphDisplay:
    """Angles drawn on the vector diagram.

    The negative boundary is always expressed clockwise (non-positive), and
    ``shade_end`` is the same boundary measured counter-clockwise.
    """

    negative = region.negative
    if negative > 180:
        negative -= 360.0
    if negative > 0:
        negative = -negative
    if negative < -360:
        negative += 360.0

    shade_end = negative + 360.0 if negative < 0 else negative
    return GraphDisplay(
        positive=_positive_display(region.positive),
        negative=negative,
        shade_end=shade_end,
    )


def build_vectors(
    regions: Mapping[Phase, PhaseAngleRegion],
    outer_radius: float,
    inner_radius: float,
) -> List[PlotVector]:
    """Two vectors per phase: positive on the outer circle, negative on the inner."""

    vectors: List[PlotVector] = []
    for phase, region in regions.items():
        shown = graph_display(region)

        pos_rad = math.radians(shown.positive)
        vectors.append(
            PlotVector(
                phase=phase,
                kind="positive",
                angle=shown.positive,
                end=(math.cos(pos_rad) * outer_radius, math.sin(pos_rad) * outer_radius),
                label=f"+{shown.positive:.0f}°",
            )
        )

        # clockwise: measure |angle| and mirror about the x axis
        neg_rad = math.radians(abs(shown.negative))
        vectors.append(
            PlotVector(
                phase=phase,
                kind="negative",
                angle=shown.negative,
                end=(math.cos(neg_rad) * inner_radius, -math.sin(neg_rad) * inner_radius),
                label=f"{shown.negative:.0f}°",
            )
        )
    return vectors


def shaded_regions(regions: Mapping[Phase, PhaseAngleRegion]) -> List[Tuple[Phase, float, float]]:
    """``(phase, start, end)`` spans of the operating region.

    The region runs clockwise from the positive boundary ``start`` to the
    negative boundary ``end`` (``shade_end``), so it contains RCA + base.
    """

    spans = []
    for phase, region in regions.items():
        shown = graph_display(region)
        spans.append((phase, shown.positive, shown.shade_end))
    return spans


def reference_circle(radius: float, step: int = 5) -> List[Tuple[float, float]]:
    points = []
    for angle in range(0, 361, step):
        rad = math.radians(angle)
        points.append((math.cos(rad) * radius, math.sin(rad) * radius))
    return points
