"""Sun and moon markers around the ring, and the angle <-> day-of-month mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Tuple

from ..core.time import days_in_month, start_of_day
from ..core.types import RingConfig
from ..design import ring_constants as rc
from ..reference.moon import moon_phase_angle
from .angles import cumulative_size, degrees_to_radians, normalize_angle, polar_to_cartesian

_SIZES = (rc.SEGMENT_DEGREES,) * rc.SEGMENTS


@dataclass(frozen=True)
class CelestialMarkers:
    sun: Tuple[float, float]
    moon: Tuple[float, float]
    sun_angle: float
    moon_angle: float


def month_start_angle(month_index: int, config: RingConfig = RingConfig()) -> float:
    return -degrees_to_radians(cumulative_size(_SIZES, month_index)) + degrees_to_radians(config.anchor_degrees)

def angle_for_date(d: date, config: RingConfig = RingConfig()) -> float:
    """Angle of day ``d`` inside its month segment, in [0, 2*pi)."""
    d = start_of_day(d)
    month_index = d.month - 1
    span = degrees_to_radians(rc.SEGMENT_DEGREES)
    position = (d.day - 1) / days_in_month(month_index, d.year)
    return normalize_angle(month_start_angle(month_index, config) + position * span)

def day_at_angle(angle: float, month_index: int, year: int, config: RingConfig = RingConfig()) -> int:
    """
    Day of month under ``angle`` within the given month's segment.

    Angles outside the segment are clamped to its edges.
    """
    span = degrees_to_radians(rc.SEGMENT_DEGREES)
    offset = normalize_angle(angle) - normalize_angle(month_start_angle(month_index, config))
    if offset < 0:
        offset += 2 * math.pi
    offset = max(0.0, min(offset, span))
    n = days_in_month(month_index, year)
    return max(1, min(n, math.floor(offset / span * n) + 1))

def sun_and_moon_positions(d: date, config: RingConfig = RingConfig()) -> CelestialMarkers:
    """
    Sun sits outside the ring at the day's angle; the moon trails it by the
    phase angle (same side at new moon, opposite at full).
    """
    sun_angle = angle_for_date(d, config)
    moon_angle = sun_angle - moon_phase_angle(start_of_day(d))
    sun = polar_to_cartesian(config.center_x, config.center_y, config.radius + config.sun_distance, sun_angle)
    moon = polar_to_cartesian(config.center_x, config.center_y, config.radius + config.moon_distance, moon_angle)
    return CelestialMarkers(sun=sun, moon=moon, sun_angle=sun_angle, moon_angle=moon_angle)
