from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .errors import UnknownPaletteError
from .types import RGB
from ..design import ring_constants as rc

@dataclass(frozen=True)
class Palette:
    """Per-month base and hover colours, January first."""
    name: str
    colours: Tuple[RGB, ...]
    hover_colours: Tuple[RGB, ...]

    def __post_init__(self) -> None:
        if len(self.colours) != rc.SEGMENTS:
            raise ValueError(f"Palette '{self.name}': need {rc.SEGMENTS} colours, got {len(self.colours)}")
        if len(self.colours) != len(self.hover_colours):
            raise ValueError(
                f"Palette '{self.name}': {len(self.colours)} colours but {len(self.hover_colours)} hover colours"
            )

@dataclass
class PaletteRegistry:
    _palettes: Dict[str, Palette]

    def get(self, name: str) -> Palette:
        if name not in self._palettes:
            raise UnknownPaletteError(f"Unknown palette '{name}'. Available: {sorted(self._palettes)}")
        return self._palettes[name]

    def list(self) -> List[str]:
        return sorted(self._palettes.keys())

    def register(self, palette: Palette, *, overwrite: bool = False) -> None:
        if (not overwrite) and (palette.name in self._palettes):
            raise KeyError(f"Palette '{palette.name}' already exists. Use overwrite=True to replace.")
        self._palettes[palette.name] = palette
