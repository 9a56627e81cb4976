"""
circal.geometry.arcs
--------------------
Path commands for ring wedges, annular wedges and the moon glyph.

The builders return ``ArcPathSpec`` command tuples; turning them into
markup is left to the caller (``ArcPathSpec.to_svg`` covers the SVG case).
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.types import ArcFlagMode, ArcPathSpec, ArcTo, ClosePath, LineTo, MoveTo
from .angles import polar_to_cartesian

# A degrees value compared against a span in radians: with
# arc_flag_mode="literal" every wedge up to a full turn takes the short way round.
LITERAL_LARGE_ARC_THRESHOLD = 180

MOON_EPSILON = 1e-6


def large_arc_flag(start_angle: float, end_angle: float, mode: ArcFlagMode = "literal") -> int:
    """
    0 for the short way round, 1 for the long way.

    mode="literal" compares the radian span against 180 (bug-compatible);
    mode="radians" compares it against pi.
    """
    span = end_angle - start_angle
    if mode == "literal":
        return 0 if span <= LITERAL_LARGE_ARC_THRESHOLD else 1
    if mode == "radians":
        return 0 if span <= math.pi else 1
    raise ValueError(f"arc_flag_mode must be 'literal' or 'radians', got {mode!r}")

def build_arc_path(
    center_x: float,
    center_y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    outer_radius_ratio: float = 1.0,
    inner_radius: float = 0.0,
    *,
    arc_flag_mode: ArcFlagMode = "literal",
) -> ArcPathSpec:
    """
    Wedge from the centre (inner_radius == 0) or annular wedge (inner_radius > 0).

    The outer arc runs from the point at end_angle back to the point at
    start_angle with sweep 0; the inner arc of an annular wedge returns
    with sweep 1.
    """
    outer = radius * outer_radius_ratio
    x0, y0 = polar_to_cartesian(center_x, center_y, outer, end_angle)
    x1, y1 = polar_to_cartesian(center_x, center_y, outer, start_angle)
    flag = large_arc_flag(start_angle, end_angle, arc_flag_mode)

    if inner_radius > 0:
        ix1, iy1 = polar_to_cartesian(center_x, center_y, inner_radius, start_angle)
        ix0, iy0 = polar_to_cartesian(center_x, center_y, inner_radius, end_angle)
        return ArcPathSpec((
            MoveTo(x0, y0),
            ArcTo(outer, outer, 0, flag, 0, x1, y1),
            LineTo(ix1, iy1),
            ArcTo(inner_radius, inner_radius, 0, flag, 1, ix0, iy0),
            ClosePath(),
        ))

    return ArcPathSpec((
        MoveTo(center_x, center_y),
        LineTo(x0, y0),
        ArcTo(outer, outer, 0, flag, 0, x1, y1),
        ClosePath(),
    ))

def build_circle_path(center_x: float, center_y: float, radius: float) -> ArcPathSpec:
    """Full circle as two half arcs, top -> bottom -> top."""
    top = center_y - radius
    bottom = center_y + radius
    return ArcPathSpec((
        MoveTo(center_x, top),
        ArcTo(radius, radius, 0, 1, 1, center_x, bottom),
        ArcTo(radius, radius, 0, 1, 1, center_x, top),
        ClosePath(),
    ))

def normalise_phase(phase: float) -> float:
    """Wrap to [0, 1); non-finite input is treated as new moon."""
    try:
        value = float(phase)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value % 1.0

def build_moon_illuminated_path(center_x: float, center_y: float, radius: float, phase: float) -> Optional[ArcPathSpec]:
    """
    Outline of the lit part of the moon disc.

    phase: 0 new, 0.25 first quarter, 0.5 full, 0.75 last quarter.
    Returns None at (near) new moon or for a non-positive radius.
    """
    try:
        r = float(radius)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(r) or r <= 0:
        return None

    p = normalise_phase(phase)
    angle = p * 2 * math.pi
    illuminated = (1 - math.cos(angle)) / 2

    if illuminated <= MOON_EPSILON:
        return None
    if illuminated >= 1 - MOON_EPSILON:
        return build_circle_path(center_x, center_y, r)

    top = center_y - r
    bottom = center_y + r

    # The terminator projects as an ellipse; at the quarters rx is ~0.
    terminator_rx = abs(math.cos(angle)) * r

    waxing = p < 0.5
    limb_sweep = 1 if waxing else 0
    # Crescents trace the terminator on the lit side, gibbous phases on the far side.
    gibbous = illuminated > 0.5
    terminator_sweep = (0 if limb_sweep else 1) if gibbous else limb_sweep

    return ArcPathSpec((
        MoveTo(center_x, top),
        ArcTo(r, r, 0, 0, limb_sweep, center_x, bottom),
        ArcTo(terminator_rx, r, 0, 0, terminator_sweep, center_x, top),
        ClosePath(),
    ))
