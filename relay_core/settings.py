"""Display configuration loaded from ``config.yaml``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional

import yaml

from .idmt import HIGHLIGHT_TOLERANCE
from .models import Phase


class SettingsError(ValueError):
    """Raised when the configuration file cannot be used."""


def _default_phase_colors() -> Dict[Phase, str]:
    return {Phase.R: "#dc2626", Phase.Y: "#ca8a04", Phase.B: "#2563eb"}


@dataclass(frozen=True)
class DisplaySettings:
    highlight_tolerance: float = HIGHLIGHT_TOLERANCE
    outer_radius: float = 110.0  # positive (anti-clockwise) circle
    inner_radius: float = 70.0  # negative (clockwise) circle
    curve_color: str = "#6366f1"
    result_color: str = "#ef4444"
    phase_colors: Dict[Phase, str] = field(default_factory=_default_phase_colors)


def load_settings(path: Optional[str] = "config.yaml") -> DisplaySettings:
    """Read ``path`` and return the display settings.

    A missing file gives the defaults. Recognised sections are ``idmt``
    (``highlight_tolerance``), ``directional`` (``outer_radius``,
    ``inner_radius``) and ``colors`` (``curve``, ``result``, ``R``/``Y``/``B``).
    """

    if path is None or not os.path.exists(path):
        return DisplaySettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Could not load '{path}': {e}") from e
    if not isinstance(data, Mapping):
        raise SettingsError(f"'{path}': top level must be a mapping.")
    return settings_from_mapping(data, context=path)


def settings_from_mapping(data: Mapping[str, object], context: str = "config") -> DisplaySettings:
    settings = DisplaySettings()
    idmt = _section(data, "idmt", context)
    directional = _section(data, "directional", context)
    colors = _section(data, "colors", context)

    updates: Dict[str, object] = {}
    if "highlight_tolerance" in idmt:
        updates["highlight_tolerance"] = _positive(idmt, "highlight_tolerance", context)
    for key in ("outer_radius", "inner_radius"):
        if key in directional:
            updates[key] = _positive(directional, key, context)
    if "curve" in colors:
        updates["curve_color"] = str(colors["curve"])
    if "result" in colors:
        updates["result_color"] = str(colors["result"])

    phase_colors = dict(settings.phase_colors)
    for phase in Phase:
        if phase.value in colors:
            phase_colors[phase] = str(colors[phase.value])
    updates["phase_colors"] = phase_colors

    return replace(settings, **updates)


def _section(data: Mapping[str, object], key: str, context: str) -> Mapping[str, object]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"{context}: section '{key}' must be a mapping.")
    return value


def _positive(section: Mapping[str, object], key: str, context: str) -> float:
    value = section.get(key)
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise SettingsError(f"{context}: invalid numeric value for '{key}'.")
    if not number > 0:
        raise SettingsError(f"{context}: '{key}' must be greater than zero.")
    return number
