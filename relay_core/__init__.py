"""Core math package for relay protection calculations."""

from .models import (
    CurveParameters,
    CurvePoint,
    CurveSample,
    CurveType,
    FaultType,
    FaultTypeConstants,
    GraphDisplay,
    Phase,
    PhaseAngleRegion,
    PhaseSelection,
    PlotVector,
    TextDisplay,
    TripInputs,
    TripResult,
)
from .errors import (
    FaultCurrentTooLow,
    InvalidRCA,
    MissingOrInvalidInput,
    NoCurveSelected,
    UnknownSelection,
    ValidationError,
)
from .idmt import CURVES, HIGHLIGHT_TOLERANCE, compute_trip_time, sample_curve, select_curve
from .directional import (
    build_vectors,
    compute_region,
    constants_for,
    graph_display,
    text_display,
)
from .engine import (
    DirectionalCalculation,
    TrippingCalculation,
    run_directional_calculation,
    run_tripping_calculation,
)
from .settings import DisplaySettings, SettingsError, load_settings

__all__ = [
    "CurveParameters",
    "CurvePoint",
    "CurveSample",
    "CurveType",
    "FaultType",
    "FaultTypeConstants",
    "GraphDisplay",
    "Phase",
    "PhaseAngleRegion",
    "PhaseSelection",
    "PlotVector",
    "TextDisplay",
    "TripInputs",
    "TripResult",
    "ValidationError",
    "NoCurveSelected",
    "MissingOrInvalidInput",
    "FaultCurrentTooLow",
    "InvalidRCA",
    "UnknownSelection",
    "CURVES",
    "HIGHLIGHT_TOLERANCE",
    "select_curve",
    "compute_trip_time",
    "sample_curve",
    "constants_for",
    "compute_region",
    "text_display",
    "graph_display",
    "build_vectors",
    "TrippingCalculation",
    "DirectionalCalculation",
    "run_tripping_calculation",
    "run_directional_calculation",
    "DisplaySettings",
    "SettingsError",
    "load_settings",
]
