import pytest

from relay_core.idmt import CURVES
from relay_core.models import CurveParameters, CurveType
from relay_core.settings import DisplaySettings


@pytest.fixture
def standard_inverse() -> CurveParameters:
    """Standard Inverse constants used across unit tests."""
    return CURVES[CurveType.SI]


@pytest.fixture
def default_display() -> DisplaySettings:
    return DisplaySettings()
