"""circal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    ring,
    month_view,
    markers,
    hover_day,
    list_palettes,
    get_palette,
    register_palette,
)
from .core.errors import (
    CircalError,
    InvalidDateError,
    InvalidMonthIndexError,
    InvalidWeekdayIndexError,
    UnknownPaletteError,
)
from .core.registry import Palette
from .core.types import (
    ArcPathSpec,
    DayCell,
    MonthViewModel,
    RingConfig,
    Segment,
    SegmentLayout,
)
from .geometry.angles import cumulative_size, degrees_to_radians, polar_to_cartesian
from .geometry.arcs import build_arc_path
from .geometry.layout import layout_segments
from .grid.month_view import build_month_view_model

__all__ = [
    "ring",
    "month_view",
    "markers",
    "hover_day",
    "list_palettes",
    "get_palette",
    "register_palette",
    "CircalError",
    "InvalidDateError",
    "InvalidMonthIndexError",
    "InvalidWeekdayIndexError",
    "UnknownPaletteError",
    "Palette",
    "ArcPathSpec",
    "DayCell",
    "MonthViewModel",
    "RingConfig",
    "Segment",
    "SegmentLayout",
    "cumulative_size",
    "degrees_to_radians",
    "polar_to_cartesian",
    "build_arc_path",
    "layout_segments",
    "build_month_view_model",
]
