from __future__ import annotations
from circal.core.registry import Palette, PaletteRegistry
from circal.design import ring_constants as rc

STANDARD_PALETTES = (
    Palette("light", rc.MONTH_COLOURS, rc.MONTH_COLOURS_HOVER),
    Palette("dark", rc.MONTH_COLOURS_DARK, rc.MONTH_COLOURS_HOVER_DARK),
)

def build_registry() -> PaletteRegistry:
    return PaletteRegistry({p.name: p for p in STANDARD_PALETTES})
