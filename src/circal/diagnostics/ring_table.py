from __future__ import annotations

import argparse
import math
from datetime import date
from typing import Sequence

import circal
from circal.core.types import RingConfig, SegmentLayout
from circal.design.colour import contrast_colour, rgb_to_hex


def render(layouts: Sequence[SegmentLayout]) -> str:
    header = f"{'#':>2}  {'label':<6} {'days':>4} {'start':>8} {'end':>8} {'ratio':>5} {'label x':>8} {'label y':>8} {'rot':>7}  colour   text"
    lines = [header, "-" * len(header)]
    for s in layouts:
        seg = s.segment
        lines.append(
            f"{seg.index:2d}  {seg.label:<6} {seg.unit_count or 0:4d} "
            f"{math.degrees(s.start_angle):8.2f} {math.degrees(s.end_angle):8.2f} "
            f"{s.outer_radius_ratio:5.2f} {s.label.x:8.2f} {s.label.y:8.2f} {s.label.rotation_degrees:7.2f}  "
            f"{rgb_to_hex(seg.colour)}  {contrast_colour(seg.colour)}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="circal ring", description="Tabulate ring segment geometry for a year.")
    p.add_argument("--year", type=int, default=date.today().year)
    p.add_argument("--palette", default="light", help="registered palette name (default: light)")
    p.add_argument("--notch-policy", choices=["two_tier", "graduated"], default="two_tier")
    p.add_argument("--arc-flag-mode", choices=["literal", "radians"], default="literal")
    p.add_argument("--locale", default=None, help="use this locale's month names as labels")
    p.add_argument("--paths", action="store_true", help="also print each segment's SVG path")
    args = p.parse_args(argv)

    config = RingConfig().tweak(notch_policy=args.notch_policy, arc_flag_mode=args.arc_flag_mode)
    layouts = circal.ring(args.year, palette=args.palette, config=config, locale=args.locale)

    print(f"Ring {args.year}  palette={args.palette}  policy={args.notch_policy}  arc-flag={args.arc_flag_mode}")
    print(render(layouts))
    if args.paths:
        print()
        for s in layouts:
            print(f"{s.segment.label}: {s.path.to_svg()}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
