# tests/test_layout.py

import math

import pytest

from circal.core.types import RingConfig, Segment
from circal.design import ring_constants as rc
from circal.geometry.angles import degrees_to_radians, polar_to_cartesian
from circal.geometry.layout import (
    label_rotation,
    layout_ring,
    layout_segments,
    outer_radius_ratio_for,
    place_label,
    ring_segments,
    segment_angles,
)


def _segments(sizes, unit_counts=None):
    unit_counts = unit_counts or [None] * len(sizes)
    return [
        Segment(index=i, label=f"S{i}", colour=(0, 0, 0), size_degrees=s, unit_count=u)
        for i, (s, u) in enumerate(zip(sizes, unit_counts))
    ]

def test_first_segment_starts_at_anchor():
    start, end = segment_angles([30] * 12, 0)
    assert start == pytest.approx(degrees_to_radians(45))
    assert end == pytest.approx(degrees_to_radians(75))

def test_segments_step_backwards_from_anchor():
    starts = [segment_angles([90, 180, 90], i)[0] for i in range(3)]
    assert starts == pytest.approx([degrees_to_radians(a) for a in (45, -45, -225)])

@pytest.mark.parametrize("n", [1, 3, 7, 12])
def test_equal_division_ring_is_contiguous_and_closes(n):
    layouts = layout_segments(_segments([360 / n] * n))
    assert len(layouts) == n
    for a, b in zip(layouts, layouts[1:]):
        assert b.end_angle == pytest.approx(a.start_angle)
    assert sum(s.span for s in layouts) == pytest.approx(2 * math.pi)
    assert layouts[0].end_angle - layouts[-1].start_angle == pytest.approx(2 * math.pi)

def test_empty_segment_list():
    assert layout_segments([]) == ()

def test_two_tier_notch():
    cfg = RingConfig()
    assert outer_radius_ratio_for(31, cfg) == 1.0
    assert outer_radius_ratio_for(30, cfg) == 0.96
    assert outer_radius_ratio_for(28, cfg) == 0.96
    assert outer_radius_ratio_for(29, cfg) == 0.96
    assert outer_radius_ratio_for(None, cfg) == 1.0

def test_graduated_notch_reads_config():
    cfg = RingConfig(notch_policy="graduated", notched_radius_30=0.5, notched_radius_feb=0.4, notched_radius_feb_leap=0.45)
    assert outer_radius_ratio_for(30, cfg) == 0.5
    assert outer_radius_ratio_for(28, cfg) == 0.4
    assert outer_radius_ratio_for(29, cfg) == 0.45
    assert outer_radius_ratio_for(31, cfg) == 1.0

def test_ring_config_defaults_follow_constants():
    cfg = RingConfig()
    assert (cfg.center_x, cfg.center_y) == (rc.SVG_SIZE / 2, rc.SVG_SIZE / 2)
    assert cfg.radius == rc.SVG_SIZE / 2 - rc.SUN_DISTANCE - rc.PADDING
    assert cfg.notched_radius == rc.NOTCHED_RADIUS
    assert cfg.label_inset == rc.LABEL_INSET
    assert (cfg.sun_distance, cfg.moon_distance) == (rc.SUN_DISTANCE, rc.MOON_DISTANCE)
    assert cfg == RingConfig.for_canvas(rc.SVG_SIZE)

def test_graduated_notch():
    cfg = RingConfig(notch_policy="graduated")
    assert outer_radius_ratio_for(31, cfg) == rc.FULL_RADIUS
    assert outer_radius_ratio_for(30, cfg) == rc.NOTCHED_RADIUS_30
    assert outer_radius_ratio_for(28, cfg) == rc.NOTCHED_RADIUS_FEB
    assert outer_radius_ratio_for(29, cfg) == rc.NOTCHED_RADIUS_FEB_LEAP

def test_unknown_notch_policy():
    with pytest.raises(ValueError):
        outer_radius_ratio_for(30, RingConfig(notch_policy="stepped"))

def test_ring_notches_follow_month_lengths():
    layouts = layout_ring(2023)
    ratios = {s.segment.label: s.outer_radius_ratio for s in layouts}
    assert ratios["JAN"] == 1.0
    assert ratios["APR"] == 0.96
    assert ratios["FEB"] == 0.96

    feb_2023 = layout_ring(2023, RingConfig(notch_policy="graduated"))[1]
    feb_2024 = layout_ring(2024, RingConfig(notch_policy="graduated"))[1]
    assert feb_2023.segment.unit_count == 28
    assert feb_2024.segment.unit_count == 29
    assert feb_2023.outer_radius_ratio == 0.92
    assert feb_2024.outer_radius_ratio == 0.96

def test_explicit_ratio_wins_over_unit_count():
    seg = Segment(index=0, label="X", colour=(1, 2, 3), size_degrees=360, outer_radius_ratio=0.5, unit_count=31)
    (out,) = layout_segments([seg])
    assert out.outer_radius_ratio == 0.5
    assert out.segment.outer_radius_ratio == 0.5

def test_resolved_ratio_is_recorded_on_segment():
    layouts = layout_segments(_segments([180, 180], [31, 30]))
    assert [s.segment.outer_radius_ratio for s in layouts] == [1.0, 0.96]

def test_label_rotation_flips_on_left_half():
    right = label_rotation(degrees_to_radians(20))
    left = label_rotation(degrees_to_radians(200))
    assert right == pytest.approx(110)
    assert left == pytest.approx(200 + 90 + 180)

    # boundaries are exclusive
    assert label_rotation(math.pi / 2) == pytest.approx(180)
    assert label_rotation(3 * math.pi / 2) == pytest.approx(360)

def test_label_rotation_uses_raw_angle():
    # -160 degrees points left but is not inside (pi/2, 3pi/2) until normalised
    assert label_rotation(degrees_to_radians(-160)) == pytest.approx(-70)

def test_label_sits_at_mid_angle_inside_outer_edge():
    cfg = RingConfig()
    lbl = place_label(0.2, 0.6, 0.96, cfg)
    assert lbl.angle == pytest.approx(0.4)
    assert lbl.radius == pytest.approx(140 * 0.96 * 0.95)
    assert (lbl.x, lbl.y) == pytest.approx(polar_to_cartesian(200, 200, lbl.radius, 0.4))

def test_unequal_sizes_do_not_close_but_still_lay_out():
    layouts = layout_segments(_segments([100, 100]))
    assert len(layouts) == 2
    assert sum(s.span for s in layouts) == pytest.approx(degrees_to_radians(200))

def test_inner_radius_gives_annular_paths():
    layouts = layout_ring(2024, RingConfig(inner_radius=40))
    assert all(s.path.ops() == "MALAZ" for s in layouts)
    assert all(layout_ring(2024)[i].path.ops() == "MLAZ" for i in range(12))

def test_layout_returns_fresh_result_each_call():
    a = layout_ring(2024)
    b = layout_ring(2024)
    assert a == b
    assert a is not b

def test_ring_segments_needs_twelve_labels():
    with pytest.raises(ValueError):
        ring_segments(2024, labels=("A", "B"))

def test_ring_segments_use_default_palette():
    segs = ring_segments(2024)
    assert [s.label for s in segs] == list(rc.MONTH_LABELS)
    assert segs[0].colour == rc.MONTH_COLOURS[0]
    assert segs[11].hover_colour == rc.MONTH_COLOURS_HOVER[11]
    assert [s.unit_count for s in segs] == [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

def test_for_canvas_leaves_room_for_sun():
    cfg = RingConfig.for_canvas(400)
    assert (cfg.center_x, cfg.center_y) == (200, 200)
    assert cfg.radius == 140
    assert cfg.tweak(radius=10).radius == 10
    assert cfg.radius == 140
