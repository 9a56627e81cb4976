from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple

from .core.registry import Palette, PaletteRegistry
from .core.types import MonthViewModel, RingConfig, SegmentLayout
from .design import ring_constants as rc
from .geometry.celestial import CelestialMarkers, day_at_angle, sun_and_moon_positions
from .geometry.layout import layout_ring
from .grid.month_view import build_month_view_model
from .i18n.locale import DEFAULT_LOCALE, month_names, resolve_locale

_registry: Optional[PaletteRegistry] = None

def set_registry(reg: PaletteRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> PaletteRegistry:
    if _registry is None:
        raise RuntimeError("Palette registry not initialized")
    return _registry

def list_palettes() -> List[str]:
    return _reg().list()

def get_palette(name: str) -> Palette:
    return _reg().get(name)

def register_palette(palette: Palette, *, overwrite: bool = False) -> None:
    _reg().register(palette, overwrite=overwrite)

# ============================================================
# Ring
# ============================================================

def ring(
    year: int,
    *,
    palette: str = "light",
    config: Optional[RingConfig] = None,
    labels: Optional[Sequence[str]] = None,
    locale: Optional[str] = None,
) -> Tuple[SegmentLayout, ...]:
    """
    Laid-out month segments for ``year``.

    Labels default to the fixed three-letter set; pass ``locale`` to use the
    locale's short month names (upper-cased) instead. A locale that resolves
    to DEFAULT_LOCALE keeps the fixed set.
    """
    if labels is None:
        labels = rc.MONTH_LABELS
        if locale and resolve_locale(locale).identifier != DEFAULT_LOCALE:
            labels = tuple(n.upper() for n in month_names(locale))
    return layout_ring(year, config or RingConfig(), get_palette(palette), labels=labels)

def markers(d: date, *, config: Optional[RingConfig] = None) -> CelestialMarkers:
    return sun_and_moon_positions(d, config or RingConfig())

def hover_day(angle: float, month_index: int, year: int, *, config: Optional[RingConfig] = None) -> date:
    """Date under a pointer at ``angle`` inside the given month's segment."""
    day = day_at_angle(angle, month_index, year, config or RingConfig())
    return date(year, month_index + 1, day)

# ============================================================
# Month grid
# ============================================================

def month_view(
    selected: date,
    *,
    week_starts_on: int = 1,
    today: Optional[date] = None,
    locale: str = DEFAULT_LOCALE,
) -> MonthViewModel:
    return build_month_view_model(selected, week_starts_on=week_starts_on, today=today, locale=locale)
