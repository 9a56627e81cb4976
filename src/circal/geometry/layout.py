"""
circal.geometry.layout
----------------------
Partition the ring into contiguous, optionally notched segments and place
a tangential label on each one.

Angles are in radians, measured the usual screen way (0 at 3 o'clock,
increasing clockwise because y grows downward). Segment i starts at
``-rad(sum(sizes[:i])) + rad(anchor)``, so successive segments step
backwards from the anchor.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from ..core.registry import Palette
from ..core.time import days_in_month
from ..core.types import LabelPlacement, RingConfig, Segment, SegmentLayout
from ..design import ring_constants as rc
from .angles import cumulative_size, degrees_to_radians, polar_to_cartesian
from .arcs import build_arc_path

log = logging.getLogger(__name__)


def outer_radius_ratio_for(unit_count: Optional[int], config: RingConfig = RingConfig()) -> float:
    """
    Outer radius ratio for a segment covering ``unit_count`` days.

    "two_tier": full radius at the threshold, notched radius otherwise.
    "graduated": 31 full, 30 and 29 lightly notched, 28 deeply notched.
    """
    if unit_count is None:
        return config.full_radius
    if config.notch_policy == "two_tier":
        return config.full_radius if unit_count == config.full_threshold else config.notched_radius
    if config.notch_policy == "graduated":
        if unit_count == config.full_threshold:
            return config.full_radius
        if unit_count == 28:
            return config.notched_radius_feb
        if unit_count == 29:
            return config.notched_radius_feb_leap
        return config.notched_radius_30
    raise ValueError(f"Unknown notch policy {config.notch_policy!r}")

def segment_angles(sizes: Sequence[float], i: int, anchor_degrees: float = rc.ANCHOR_DEGREES) -> Tuple[float, float]:
    """(start, end) of segment i in radians."""
    start = -degrees_to_radians(cumulative_size(sizes, i)) + degrees_to_radians(anchor_degrees)
    return start, start + degrees_to_radians(sizes[i])

def label_rotation(label_angle: float) -> float:
    """Tangential text rotation in degrees, flipped on the left half so text stays upright."""
    rotation = (label_angle * 180 / math.pi) + 90
    if math.pi / 2 < label_angle < 3 * math.pi / 2:
        rotation += 180
    return rotation

def place_label(start_angle: float, end_angle: float, outer_radius_ratio: float, config: RingConfig = RingConfig()) -> LabelPlacement:
    angle = start_angle + (end_angle - start_angle) / 2
    radius = config.radius * outer_radius_ratio * config.label_inset
    x, y = polar_to_cartesian(config.center_x, config.center_y, radius, angle)
    return LabelPlacement(angle=angle, radius=radius, x=x, y=y, rotation_degrees=label_rotation(angle))

def layout_segments(segments: Sequence[Segment], config: RingConfig = RingConfig()) -> Tuple[SegmentLayout, ...]:
    """
    Lay out segments in index order.

    Sizes are expected to sum to 360 for a closed ring; this is not checked.
    Returns a new tuple on every call.
    """
    sizes = [s.size_degrees for s in segments]
    total = sum(sizes)
    if segments and not math.isclose(total, 360.0):
        log.debug("segment sizes sum to %s degrees; ring will not close", total)

    out = []
    for i, seg in enumerate(segments):
        start, end = segment_angles(sizes, i, config.anchor_degrees)
        ratio = seg.outer_radius_ratio
        if ratio is None:
            ratio = outer_radius_ratio_for(seg.unit_count, config)
        path = build_arc_path(
            config.center_x,
            config.center_y,
            config.radius,
            start,
            end,
            ratio,
            config.inner_radius,
            arc_flag_mode=config.arc_flag_mode,
        )
        out.append(SegmentLayout(
            segment=replace(seg, outer_radius_ratio=ratio),
            start_angle=start,
            end_angle=end,
            outer_radius_ratio=ratio,
            path=path,
            label=place_label(start, end, ratio, config),
        ))
    return tuple(out)

def ring_segments(
    year: int,
    palette: Optional[Palette] = None,
    *,
    labels: Sequence[str] = rc.MONTH_LABELS,
) -> Tuple[Segment, ...]:
    """The twelve month segments for ``year`` (February follows the leap rule)."""
    if len(labels) != rc.SEGMENTS:
        raise ValueError(f"Need {rc.SEGMENTS} month labels, got {len(labels)}")
    colours = palette.colours if palette is not None else rc.MONTH_COLOURS
    hover = palette.hover_colours if palette is not None else rc.MONTH_COLOURS_HOVER
    return tuple(
        Segment(
            index=i,
            label=labels[i],
            colour=tuple(colours[i]),
            size_degrees=rc.SEGMENT_DEGREES,
            unit_count=days_in_month(i, year),
            hover_colour=tuple(hover[i]),
        )
        for i in range(rc.SEGMENTS)
    )

def layout_ring(
    year: int,
    config: RingConfig = RingConfig(),
    palette: Optional[Palette] = None,
    *,
    labels: Sequence[str] = rc.MONTH_LABELS,
) -> Tuple[SegmentLayout, ...]:
    log.debug("layout_ring year=%d policy=%s", year, config.notch_policy)
    return layout_segments(ring_segments(year, palette, labels=labels), config)
