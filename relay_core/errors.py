"""Validation errors raised by the calculators.

Every error carries a ``message`` meant for the user and a stable ``code``.
"""

from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """Base class for input problems that abort a calculation."""

    code = "ValidationError"
    message = "Invalid input"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NoCurveSelected(ValidationError):
    code = "NoCurveSelected"
    message = "Please select a curve type"


class MissingOrInvalidInput(ValidationError):
    code = "MissingOrInvalidInput"
    message = "Please fill all input fields"


class FaultCurrentTooLow(ValidationError):
    code = "FaultCurrentTooLow"
    message = "Fault current must be greater than set current"


class InvalidRCA(ValidationError):
    code = "InvalidRCA"
    message = "Please enter an RCA value"


class UnknownSelection(ValidationError):
    """Raised when a curve, fault or phase tag is not one of the known values."""

    code = "UnknownSelection"
    message = "Unknown selection"
