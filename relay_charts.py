"""matplotlib figures for the IDMT curve and the directional vector diagram.

The window keeps one figure per chart slot. Each ``render_*`` call takes the
previous figure (or ``None``), releases it, and returns the replacement, so
no figure outlives the next draw.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from matplotlib.figure import Figure
from matplotlib.patches import Wedge

from relay_core import DirectionalCalculation, DisplaySettings, PlotVector, TrippingCalculation
from relay_core.directional import build_vectors, reference_circle, shaded_regions
from relay_core.formatting import (
    curve_legend,
    fault_label,
    result_legend,
    tooltip_angle,
    vector_legend,
)

AXIS_LIMIT = 140
MIN_PLOT_TIME = 0.01
HOVER_DISTANCE = 12.0


def release_chart(figure: Optional[Figure]) -> None:
    if figure is None:
        return
    # the Qt canvas holding it is deleted by the window's chart slot
    figure.clear()


def render_idmt_chart(
    previous: Optional[Figure],
    calculation: TrippingCalculation,
    settings: DisplaySettings,
) -> Figure:
    if not calculation.ok:
        raise ValueError(f"Cannot draw a failed calculation: {calculation.error}")
    release_chart(previous)

    curve = calculation.curve
    sample = calculation.sample
    result = calculation.result

    fig = Figure(figsize=(7, 4.5), tight_layout=True)
    ax = fig.add_subplot(111)
    ax.plot(
        sample.ratios,
        sample.times,
        color=settings.curve_color,
        linewidth=2,
        label=curve_legend(curve, calculation.inputs.tms),
    )
    if sample.points:
        ax.fill_between(sample.ratios, sample.times, MIN_PLOT_TIME, color=settings.curve_color, alpha=0.1)

    highlight = sample.highlight
    if highlight is not None:
        ax.plot(
            [highlight.ratio],
            [result.trip_time_seconds],
            linestyle="none",
            marker="o",
            markersize=8,
            color=settings.result_color,
            label=result_legend(result),
        )

    ax.set_yscale("log")
    ax.set_ylim(bottom=MIN_PLOT_TIME)
    ax.set_xlabel("I/Is")
    ax.set_ylabel("Time (s)")
    ax.grid(True, which="both", linestyle="--", linewidth=0.4, alpha=0.5)
    ax.legend(loc="upper right")
    return fig


def render_region_chart(
    previous: Optional[Figure],
    calculation: DirectionalCalculation,
    settings: DisplaySettings,
) -> Figure:
    if not calculation.ok:
        raise ValueError(f"Cannot draw a failed calculation: {calculation.error}")
    release_chart(previous)

    regions = calculation.regions
    outer = settings.outer_radius
    inner = settings.inner_radius

    fig = Figure(figsize=(6, 6), tight_layout=True)
    ax = fig.add_subplot(111)

    for radius, color, style, label in (
        (outer, (0.13, 0.77, 0.37, 0.4), "-", "Outer (+ve Anti-CW)"),
        (inner, (0.94, 0.27, 0.27, 0.4), "--", "Inner (-ve CW)"),
    ):
        xs, ys = zip(*reference_circle(radius))
        ax.plot(xs, ys, color=color, linestyle=style, linewidth=2, label=label, zorder=1)

    # operating region runs clockwise from the positive boundary to shade_end
    for phase, start, end in shaded_regions(regions):
        ax.add_patch(
            Wedge((0, 0), outer, end, start, facecolor=settings.phase_colors[phase], alpha=0.12, zorder=0)
        )

    for vector in build_vectors(regions, outer, inner):
        color = settings.phase_colors[vector.phase]
        x, y = vector.end
        negative = vector.kind == "negative"
        ax.plot(
            [0, x],
            [0, y],
            color=color,
            linewidth=2 if negative else 3,
            linestyle="--" if negative else "-",
            marker="^" if negative else "o",
            markevery=[1],
            markersize=9 if negative else 12,
            markerfacecolor="none" if negative else color,
            label=vector_legend(vector.phase, vector.kind, vector.angle),
            zorder=2,
        )
        ax.annotate(
            vector.label,
            (x, y),
            xytext=(6, 6),
            textcoords="offset points",
            color=color,
            fontsize=9,
            fontweight="bold",
        )

    ax.plot([0], [0], marker="o", markersize=8, color="#374151", zorder=3)

    ax.set_xlim(-AXIS_LIMIT, AXIS_LIMIT)
    ax.set_ylim(-AXIS_LIMIT, AXIS_LIMIT)
    ax.set_aspect("equal")
    ax.axhline(0, color="#374151", linewidth=1)
    ax.axvline(0, color="#374151", linewidth=1)
    ax.set_xticks([-AXIS_LIMIT, AXIS_LIMIT])
    ax.set_xticklabels(["+180° / -180°", "0°"])
    ax.set_yticks([-AXIS_LIMIT, AXIS_LIMIT])
    ax.set_yticklabels(["+270° / -90°", "+90° / -270°"])
    ax.set_title(f"{fault_label(calculation.fault_type)} - RCA = {calculation.rca:g}°")
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.08), ncol=2, fontsize=8)
    return fig


def vector_tooltip(
    vectors: Sequence[PlotVector],
    x: Optional[float],
    y: Optional[float],
    max_distance: float = HOVER_DISTANCE,
) -> Optional[str]:
    """Tooltip for the vector end (or origin) nearest to ``(x, y)``, if close enough."""

    if x is None or y is None:
        return None
    candidates = [((0.0, 0.0), False)] + [(v.end, v.kind == "negative") for v in vectors]
    (px, py), negative = min(candidates, key=lambda c: math.hypot(c[0][0] - x, c[0][1] - y))
    if math.hypot(px - x, py - y) > max_distance:
        return None
    return tooltip_angle(px, py, negative)
