from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from xml.sax.saxutils import escape
from typing import Optional, Sequence

import circal
from circal.core.types import RingConfig, SegmentLayout
from circal.design import ring_constants as rc
from circal.design.colour import contrast_colour, rgb_to_hex
from circal.geometry.arcs import build_moon_illuminated_path
from circal.geometry.celestial import CelestialMarkers
from circal.reference.moon import moon_phase


def _num(v: float) -> str:
    return f"{v:.3f}".rstrip("0").rstrip(".")


def ring_svg(
    layouts: Sequence[SegmentLayout],
    config: RingConfig,
    *,
    size: float = rc.SVG_SIZE,
    markers: Optional[CelestialMarkers] = None,
    phase: Optional[float] = None,
) -> str:
    """Standalone SVG preview: segments, labels, centre disc and optional sun/moon."""
    font = size / 35
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(size)}" height="{_num(size)}" viewBox="0 0 {_num(size)} {_num(size)}">']
    out.append('<g class="segments-group">')
    for s in layouts:
        seg = s.segment
        out.append(
            f'<path class="calendar-segment" data-segment-index="{seg.index}" d="{s.path.to_svg()}" '
            f'fill="{rgb_to_hex(seg.colour)}" stroke="#fff" stroke-width="1"/>'
        )
        lx, ly = _num(s.label.x), _num(s.label.y)
        out.append(
            f'<text class="segment-label" x="{lx}" y="{ly}" text-anchor="middle" dominant-baseline="middle" '
            f'transform="rotate({_num(s.label.rotation_degrees)} {lx} {ly})" '
            f'style="font: bold {_num(font)}px Helvetica, Arial, sans-serif; fill: {contrast_colour(seg.colour)}">{escape(seg.label)}</text>'
        )
    out.append("</g>")
    out.append(
        f'<circle class="center-circle" cx="{_num(config.center_x)}" cy="{_num(config.center_y)}" '
        f'r="{_num(config.radius * rc.CENTRE_CIRCLE_RATIO)}" fill="#ffffff"/>'
    )
    if markers is not None:
        sx, sy = markers.sun
        mx, my = markers.moon
        out.append(f'<circle class="sun-icon" cx="{_num(sx)}" cy="{_num(sy)}" r="8" fill="#ffd700" stroke="#ffaa00"/>')
        out.append(f'<circle class="moon-icon" cx="{_num(mx)}" cy="{_num(my)}" r="6" fill="#333" stroke="#999"/>')
        if phase is not None:
            lit = build_moon_illuminated_path(mx, my, 6, phase)
            if lit is not None:
                out.append(f'<path class="moon-lit" d="{lit.to_svg()}" fill="#e0e0e0"/>')
    out.append("</svg>")
    return "\n".join(out)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="circal svg", description="Write an SVG preview of the ring.")
    p.add_argument("--year", type=int, default=None, help="default: year of --date")
    p.add_argument("--date", default=None, help="YYYY-MM-DD to mark with sun and moon (default: today)")
    p.add_argument("--palette", default="light")
    p.add_argument("--size", type=float, default=rc.SVG_SIZE)
    p.add_argument("--inner-radius", type=float, default=0.0)
    p.add_argument("-o", "--output", default=None, help="output file (default: stdout)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date) if args.date else date.today()
    year = args.year if args.year is not None else d.year
    config = RingConfig.for_canvas(args.size, sun_distance=rc.SUN_DISTANCE, padding=rc.PADDING).tweak(inner_radius=args.inner_radius)

    layouts = circal.ring(year, palette=args.palette, config=config)
    mk = circal.markers(d, config=config) if d.year == year else None
    svg = ring_svg(layouts, config, size=args.size, markers=mk, phase=moon_phase(d))

    if args.output:
        Path(args.output).write_text(svg + "\n", encoding="utf-8")
        print(f"wrote {args.output}")
    else:
        print(svg)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
