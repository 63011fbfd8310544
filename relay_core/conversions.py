"""Helpers that turn raw widget values into numbers and enumerations."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Type, TypeVar

from .errors import UnknownSelection
from .models import CurveType, FaultType, PhaseSelection

E = TypeVar("E", bound=Enum)

_NONE_CURVE_TAGS = ("", "CT", "NONE")


def parse_number(value: object) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it is not one.

    Parameters
    ----------
    value:
        A number or the text of an input field. Surrounding whitespace is
        ignored; empty text, ``NaN`` and infinities are rejected. Booleans are
        not treated as numbers.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_curve_type(value: object) -> CurveType:
    """Map a curve identifier to :class:`CurveType`.

    The empty string, ``"CT"`` and ``"none"`` all mean no curve was picked.
    """

    if isinstance(value, CurveType):
        return value
    tag = _tag(value, "curve type")
    if tag in _NONE_CURVE_TAGS:
        return CurveType.NONE
    return _lookup(CurveType, tag, "curve type")


def parse_fault_type(value: object) -> FaultType:
    if isinstance(value, FaultType):
        return value
    return _lookup(FaultType, _tag(value, "fault type"), "fault type")


def parse_phase_selection(value: object) -> PhaseSelection:
    if isinstance(value, PhaseSelection):
        return value
    return _lookup(PhaseSelection, _tag(value, "phase selection"), "phase selection")


def _tag(value: object, label: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise UnknownSelection(f"Unsupported {label}: {value!r}")
    return value.strip().upper()


def _lookup(enum_cls: Type[E], tag: str, label: str) -> E:
    for member in enum_cls:
        if tag in (member.name, member.value):
            return member
    raise UnknownSelection(f"Unsupported {label}: {tag or '(empty)'}")
