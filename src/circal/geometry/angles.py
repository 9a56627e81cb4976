from __future__ import annotations

import math
from typing import Sequence, Tuple

TAU = 2 * math.pi

# ------------------------------------------------------------
# Units
# ------------------------------------------------------------

def degrees_to_radians(degrees: float) -> float:
    return (degrees * math.pi) / 180

def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi

def normalize_angle(angle: float) -> float:
    """Wrap radians to [0, 2*pi)."""
    y = math.fmod(angle, TAU)
    if y < 0:
        y += TAU
    # fmod of a tiny negative can land exactly on TAU after the shift
    return 0.0 if y >= TAU else y

# ------------------------------------------------------------
# Accumulation & projection
# ------------------------------------------------------------

def cumulative_size(sizes: Sequence[float], i: int) -> float:
    """Sum of sizes[0..i-1]; the angular offset where segment i begins."""
    total = 0
    for j in range(i):
        total += sizes[j]
    return total

def polar_to_cartesian(center_x: float, center_y: float, radius: float, angle: float) -> Tuple[float, float]:
    return (
        center_x + radius * math.cos(angle),
        center_y + radius * math.sin(angle),
    )

def angle_to_point(center_x: float, center_y: float, x: float, y: float) -> float:
    """Angle of (x, y) seen from the centre, in [0, 2*pi)."""
    return normalize_angle(math.atan2(y - center_y, x - center_x))
