from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Literal, Optional, Tuple, Union

from ..design import ring_constants as rc

RGB = Tuple[int, int, int]
NotchPolicy = Literal["two_tier", "graduated"]
ArcFlagMode = Literal["literal", "radians"]


def _fmt(value: float) -> str:
    """Stable number formatting for path strings: 3 decimals, tiny values are 0."""
    if isinstance(value, int):
        return str(value)
    if abs(value) < 1e-10:
        return "0"
    r = round(value, 3)
    if r.is_integer():
        return str(int(r))
    return repr(r)

# ------------------------------------------------------------
# Path commands
# ------------------------------------------------------------

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float
    op = "M"

    def args(self) -> Tuple[float, ...]:
        return (self.x, self.y)

@dataclass(frozen=True)
class LineTo:
    x: float
    y: float
    op = "L"

    def args(self) -> Tuple[float, ...]:
        return (self.x, self.y)

@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc, same parameter order as the SVG ``A`` command."""
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc: int
    sweep: int
    x: float
    y: float
    op = "A"

    def args(self) -> Tuple[float, ...]:
        return (self.rx, self.ry, self.x_axis_rotation, self.large_arc, self.sweep, self.x, self.y)

@dataclass(frozen=True)
class ClosePath:
    op = "Z"

    def args(self) -> Tuple[float, ...]:
        return ()

PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]

@dataclass(frozen=True)
class ArcPathSpec:
    """Backend-neutral drawing instructions for one wedge or annular wedge."""
    commands: Tuple[PathCommand, ...]

    def __iter__(self):
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def ops(self) -> str:
        return "".join(c.op for c in self.commands)

    def to_svg(self) -> str:
        parts = []
        for c in self.commands:
            parts.append(c.op)
            parts.extend(_fmt(a) for a in c.args())
        return " ".join(parts)

# ------------------------------------------------------------
# Ring
# ------------------------------------------------------------

@dataclass(frozen=True)
class RingConfig:
    """Everything the ring layout needs; passed explicitly into every call."""
    center_x: float = rc.SVG_SIZE / 2
    center_y: float = rc.SVG_SIZE / 2
    radius: float = rc.SVG_SIZE / 2 - rc.SUN_DISTANCE - rc.PADDING
    anchor_degrees: float = rc.ANCHOR_DEGREES
    full_radius: float = rc.FULL_RADIUS
    notched_radius: float = rc.NOTCHED_RADIUS
    notch_policy: NotchPolicy = "two_tier"
    full_threshold: int = rc.FULL_DAY_COUNT
    # "graduated" tiers
    notched_radius_30: float = rc.NOTCHED_RADIUS_30
    notched_radius_feb: float = rc.NOTCHED_RADIUS_FEB
    notched_radius_feb_leap: float = rc.NOTCHED_RADIUS_FEB_LEAP
    label_inset: float = rc.LABEL_INSET
    inner_radius: float = 0.0
    arc_flag_mode: ArcFlagMode = "literal"
    sun_distance: float = rc.SUN_DISTANCE
    moon_distance: float = rc.MOON_DISTANCE

    @staticmethod
    def for_canvas(size: float, *, sun_distance: float = rc.SUN_DISTANCE, padding: float = rc.PADDING) -> "RingConfig":
        # leave room for the sun marker outside the ring
        return RingConfig(
            center_x=size / 2,
            center_y=size / 2,
            radius=size / 2 - sun_distance - padding,
            sun_distance=sun_distance,
        )

    def tweak(self, **kwargs) -> "RingConfig":
        return replace(self, **kwargs)

@dataclass(frozen=True)
class Segment:
    index: int
    label: str
    colour: RGB
    size_degrees: float
    outer_radius_ratio: Optional[float] = None  # None: resolved from unit_count
    unit_count: Optional[int] = None  # e.g. days in the month
    hover_colour: Optional[RGB] = None

@dataclass(frozen=True)
class LabelPlacement:
    angle: float
    radius: float
    x: float
    y: float
    rotation_degrees: float

@dataclass(frozen=True)
class SegmentLayout:
    segment: Segment
    start_angle: float
    end_angle: float
    outer_radius_ratio: float
    path: ArcPathSpec
    label: LabelPlacement

    @property
    def index(self) -> int:
        return self.segment.index

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

# ------------------------------------------------------------
# Month grid
# ------------------------------------------------------------

@dataclass(frozen=True)
class DayCell:
    date: date
    iso_date: str
    day_number: int
    in_month: bool
    is_today: bool
    is_selected: bool

@dataclass(frozen=True)
class MonthViewModel:
    month_label: str
    weekday_labels: Tuple[str, ...]
    weeks: Tuple[Tuple[DayCell, ...], ...]
    year: int
    month: int  # 1..12
    locale: str

    @property
    def cells(self) -> Tuple[DayCell, ...]:
        return tuple(c for wk in self.weeks for c in wk)

    @property
    def selected_cell(self) -> DayCell:
        return next(c for c in self.cells if c.is_selected)

    @property
    def today_cell(self) -> Optional[DayCell]:
        return next((c for c in self.cells if c.is_today), None)

    def in_month_cells(self) -> Tuple[DayCell, ...]:
        return tuple(c for c in self.cells if c.in_month)
