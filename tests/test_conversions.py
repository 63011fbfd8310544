import math

import pytest

from relay_core.conversions import parse_curve_type, parse_fault_type, parse_number, parse_phase_selection
from relay_core.errors import UnknownSelection
from relay_core.models import CurveType, FaultType, PhaseSelection


@pytest.mark.parametrize(
    "raw, expected",
    [("12.5", 12.5), (" -3 ", -3.0), (7, 7.0), (0.25, 0.25), ("1e3", 1000.0)],
)
def test_parse_number_accepts_finite_values(raw, expected) -> None:
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12abc", float("nan"), "inf", math.inf, True, [1]])
def test_parse_number_rejects_everything_else(raw) -> None:
    assert parse_number(raw) is None


@pytest.mark.parametrize(
    "raw, expected",
    [("SI", CurveType.SI), ("vi", CurveType.VI), (" EI ", CurveType.EI), ("LTI", CurveType.LTI), (CurveType.VI, CurveType.VI)],
)
def test_parse_curve_type_known_tags(raw, expected: CurveType) -> None:
    assert parse_curve_type(raw) is expected


@pytest.mark.parametrize("raw", ["CT", "", "none", None])
def test_parse_curve_type_placeholders_mean_none(raw) -> None:
    assert parse_curve_type(raw) is CurveType.NONE


@pytest.mark.parametrize("raw", ["XI", "Standard Inverse", 3])
def test_parse_curve_type_rejects_unknown_tags(raw) -> None:
    with pytest.raises(UnknownSelection):
        parse_curve_type(raw)


def test_parse_fault_type() -> None:
    assert parse_fault_type("PHASE") is FaultType.PHASE
    assert parse_fault_type("earth") is FaultType.EARTH
    with pytest.raises(UnknownSelection):
        parse_fault_type("GROUND")
    with pytest.raises(UnknownSelection):
        parse_fault_type(None)


def test_parse_phase_selection() -> None:
    assert parse_phase_selection("ALL") is PhaseSelection.ALL
    assert parse_phase_selection("y") is PhaseSelection.Y
    with pytest.raises(UnknownSelection):
        parse_phase_selection("N")
