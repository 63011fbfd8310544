import pytest

from relay_core.directional import compute_region
from relay_core.formatting import (
    curve_legend,
    fault_label,
    format_trip_time,
    phase_info_labels,
    region_card,
    result_legend,
    tooltip_angle,
    vector_legend,
)
from relay_core.idmt import CURVES
from relay_core.models import CurveType, FaultType, Phase, PhaseSelection, TripResult


def test_trip_time_has_four_decimals() -> None:
    assert format_trip_time(TripResult(trip_time_seconds=0.29732, ratio=10.0)) == "Tripping Time: 0.2973 seconds"


def test_fault_labels() -> None:
    assert fault_label(FaultType.PHASE) == "Over Current"
    assert fault_label(FaultType.EARTH) == "Earth Fault"


def test_phase_info_labels_follow_fault_type() -> None:
    assert phase_info_labels(FaultType.PHASE) == ["R-Phase: -90°", "Y-Phase: 150°", "B-Phase: 30°"]
    assert phase_info_labels(FaultType.EARTH) == ["R-Phase: 0°", "Y-Phase: -120°", "B-Phase: 120°"]


def test_region_card_uses_text_policy() -> None:
    region = compute_region(0, FaultType.EARTH, PhaseSelection.Y)[Phase.Y]

    assert region_card(region) == ("Y-Phase (Base: -120°)", "+ve: +330.0°", "-ve: -210.0°")


def test_region_card_keeps_unflipped_negative_boundary() -> None:
    region = compute_region(100, FaultType.PHASE, PhaseSelection.B)[Phase.B]

    assert region_card(region)[2] == "-ve: 40.0°"


def test_chart_legends() -> None:
    assert curve_legend(CURVES[CurveType.SI], 0.1) == "Standard Inverse (TMS=0.1)"
    assert result_legend(TripResult(trip_time_seconds=3.375, ratio=5.0)) == "Result: 3.38s"
    assert vector_legend(Phase.R, "positive", 45.0) == "R-Phase +ve (+45°)"
    assert vector_legend(Phase.R, "negative", -135.0) == "R-Phase -ve (-135°)"


@pytest.mark.parametrize(
    "x, y, negative, expected",
    [
        (0.0, 0.0, False, "Origin (0°)"),
        (0.0, 10.0, False, "+90.0°"),
        (0.0, -10.0, False, "+270.0°"),
        (-10.0, -10.0, True, "-135.0°"),
        (10.0, 10.0, True, "+45.0°"),
        (-10.0, 0.0, True, "-180.0°"),
    ],
)
def test_tooltip_angle(x: float, y: float, negative: bool, expected: str) -> None:
    assert tooltip_angle(x, y, negative) == expected
