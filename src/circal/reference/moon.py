# reference/moon.py

from __future__ import annotations

import math
from datetime import date, datetime, timezone

from ..core.errors import InvalidDateError

# Known new moon: 2024-01-11 11:57 UTC
REFERENCE_NEW_MOON = datetime(2024, 1, 11, 11, 57, tzinfo=timezone.utc)
SYNODIC_MONTH_DAYS = 29.53058867

# (upper bound of phase, name); anything at or above the last bound wraps to new moon
PHASE_NAMES = (
    (0.03, "New Moon"),
    (0.22, "Waxing Crescent"),
    (0.28, "First Quarter"),
    (0.47, "Waxing Gibbous"),
    (0.53, "Full Moon"),
    (0.72, "Waning Gibbous"),
    (0.78, "Last Quarter"),
    (0.97, "Waning Crescent"),
)


def _as_utc(d: date) -> datetime:
    """Naive datetimes and plain dates are read as UTC."""
    if isinstance(d, datetime):
        if d.tzinfo is None:
            return d.replace(tzinfo=timezone.utc)
        return d.astimezone(timezone.utc)
    if isinstance(d, date):
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    raise InvalidDateError(f"Expected a date, got {type(d).__name__}: {d!r}")

def moon_phase(d: date) -> float:
    """Mean lunar phase in [0, 1): 0 new, 0.5 full."""
    days = (_as_utc(d) - REFERENCE_NEW_MOON).total_seconds() / 86400.0
    return (days % SYNODIC_MONTH_DAYS) / SYNODIC_MONTH_DAYS

def moon_phase_angle(d: date) -> float:
    """Sun-moon separation in radians: 0 at new moon, pi at full."""
    return moon_phase(d) * 2 * math.pi

def moon_phase_name(d: date) -> str:
    phase = moon_phase(d)
    if phase > PHASE_NAMES[-1][0]:
        return PHASE_NAMES[0][1]
    for bound, name in PHASE_NAMES:
        if phase < bound:
            return name
    return PHASE_NAMES[-1][1]
