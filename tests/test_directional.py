import math

import pytest

from relay_core.directional import (
    build_vectors,
    compute_region,
    constants_for,
    graph_display,
    reference_circle,
    shaded_regions,
    text_display,
)
from relay_core.errors import InvalidRCA, UnknownSelection
from relay_core.models import FaultType, FaultTypeConstants, Phase, PhaseSelection


def test_constants_for_each_fault_type() -> None:
    assert constants_for(FaultType.PHASE) == FaultTypeConstants(r=-90.0, y=150.0, b=30.0)
    assert constants_for(FaultType.EARTH) == FaultTypeConstants(r=0.0, y=-120.0, b=120.0)


def test_phase_fault_r_phase_boundaries() -> None:
    region = compute_region(45, FaultType.PHASE, PhaseSelection.R)[Phase.R]

    assert region.base == -90.0
    assert region.positive == 45.0
    assert region.negative == -135.0

    shown = text_display(region)
    assert shown.positive == 45.0
    assert shown.negative == -135.0


def test_earth_fault_y_phase_wraps_positive_boundary() -> None:
    region = compute_region(0, FaultType.EARTH, PhaseSelection.Y)[Phase.Y]

    assert region.positive == -30.0
    assert region.negative == -210.0

    shown = text_display(region)
    assert shown.positive == 330.0
    assert shown.negative == -210.0


def test_all_selection_returns_every_phase_in_order() -> None:
    regions = compute_region("30", FaultType.PHASE, PhaseSelection.ALL)

    assert list(regions) == [Phase.R, Phase.Y, Phase.B]
    assert [r.positive for r in regions.values()] == [30.0, 270.0, 150.0]
    assert [r.negative for r in regions.values()] == [-150.0, 90.0, -30.0]


def test_single_selection_returns_only_that_phase() -> None:
    regions = compute_region(10, FaultType.EARTH, PhaseSelection.B)

    assert list(regions) == [Phase.B]


def test_compute_region_is_repeatable() -> None:
    first = compute_region(72.5, FaultType.EARTH, PhaseSelection.ALL)
    second = compute_region(72.5, FaultType.EARTH, PhaseSelection.ALL)

    assert first == second


@pytest.mark.parametrize("rca", [float("nan"), "abc", "", None, float("inf"), "  "])
@pytest.mark.parametrize("fault_type", list(FaultType))
@pytest.mark.parametrize("selection", list(PhaseSelection))
def test_invalid_rca_is_rejected(rca, fault_type: FaultType, selection: PhaseSelection) -> None:
    with pytest.raises(InvalidRCA):
        compute_region(rca, fault_type, selection)


def test_graph_display_matches_text_for_ordinary_angles() -> None:
    region = compute_region(45, FaultType.PHASE, PhaseSelection.R)[Phase.R]

    shown = graph_display(region)
    assert shown.positive == 45.0
    assert shown.negative == -135.0
    assert shown.shade_end == 225.0


def test_graph_display_flips_positive_negative_boundary_clockwise() -> None:
    # PHASE B, RCA 100: negative boundary = -90 + 100 + 30 = 40
    region = compute_region(100, FaultType.PHASE, PhaseSelection.B)[Phase.B]

    assert text_display(region).negative == 40.0
    shown = graph_display(region)
    assert shown.negative == -40.0
    assert shown.shade_end == 320.0


def test_policies_diverge_above_180() -> None:
    # EARTH B, RCA 600: negative boundary = 630, positive = 810
    region = compute_region(600, FaultType.EARTH, PhaseSelection.B)[Phase.B]

    text = text_display(region)
    graph = graph_display(region)
    assert text.negative == 270.0
    assert graph.negative == -270.0
    assert graph.shade_end == 90.0
    assert text.positive == graph.positive == 810.0


def test_both_policies_lift_values_below_minus_360() -> None:
    # PHASE R, RCA -300: positive = -300, negative = -480
    region = compute_region(-300, FaultType.PHASE, PhaseSelection.R)[Phase.R]

    assert text_display(region).positive == 60.0
    assert text_display(region).negative == -120.0
    assert graph_display(region).negative == -120.0
    assert graph_display(region).shade_end == 240.0


def test_build_vectors_places_positive_outer_and_negative_inner() -> None:
    regions = compute_region(45, FaultType.PHASE, PhaseSelection.R)

    positive, negative = build_vectors(regions, outer_radius=110, inner_radius=70)

    assert positive.kind == "positive"
    assert positive.angle == 45.0
    assert positive.end == pytest.approx((110 * math.cos(math.radians(45)), 110 * math.sin(math.radians(45))))
    assert positive.label == "+45°"

    assert negative.kind == "negative"
    assert negative.angle == -135.0
    assert negative.end == pytest.approx((70 * math.cos(math.radians(135)), -70 * math.sin(math.radians(135))))
    assert negative.label == "-135°"


def test_build_vectors_has_two_vectors_per_phase() -> None:
    regions = compute_region(0, FaultType.EARTH, PhaseSelection.ALL)

    vectors = build_vectors(regions, 110, 70)

    assert len(vectors) == 6
    assert [v.phase for v in vectors] == [Phase.R, Phase.R, Phase.Y, Phase.Y, Phase.B, Phase.B]
    for v in vectors:
        radius = 110 if v.kind == "positive" else 70
        assert math.hypot(*v.end) == pytest.approx(radius)


def _clockwise_contains(start: float, end: float, angle: float) -> bool:
    return (start - angle) % 360 <= (start - end) % 360


def test_shaded_regions_run_clockwise_from_positive_to_shade_end() -> None:
    regions = compute_region(0, FaultType.EARTH, PhaseSelection.Y)

    assert shaded_regions(regions) == [(Phase.Y, 330.0, 150.0)]


@pytest.mark.parametrize(
    "rca, fault_type, selection",
    [(45, FaultType.PHASE, PhaseSelection.R), (0, FaultType.EARTH, PhaseSelection.Y), (30, FaultType.EARTH, PhaseSelection.R), (-75, FaultType.PHASE, PhaseSelection.ALL)],
)
def test_shaded_regions_contain_maximum_torque_angle(rca: float, fault_type: FaultType, selection: PhaseSelection) -> None:
    regions = compute_region(rca, fault_type, selection)

    for phase, start, end in shaded_regions(regions):
        assert _clockwise_contains(start, end, rca + regions[phase].base)
        assert not _clockwise_contains(start, end, rca + regions[phase].base + 180)


def test_compute_region_accepts_raw_tags() -> None:
    assert compute_region(0, "EARTH", "Y") == compute_region(0, FaultType.EARTH, PhaseSelection.Y)
    assert constants_for("phase") == constants_for(FaultType.PHASE)


@pytest.mark.parametrize("fault_type, selection", [("GROUND", "R"), ("EARTH", "N"), (None, "ALL")])
def test_compute_region_rejects_unknown_tags(fault_type, selection) -> None:
    with pytest.raises(UnknownSelection):
        compute_region(10, fault_type, selection)


def test_reference_circle_is_closed() -> None:
    points = reference_circle(70)

    assert len(points) == 73
    assert points[0] == pytest.approx((70.0, 0.0))
    assert points[-1] == pytest.approx((70.0, 0.0), abs=1e-9)
