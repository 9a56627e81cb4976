#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import date
from typing import List, Tuple

import circal
from circal.core.types import ArcPathSpec, ArcTo, ClosePath, LineTo, MoveTo, RingConfig
from circal.design.colour import contrast_colour, rgb_to_hex


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "circal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "circal[diagnostics]"') from e


def arc_points(np, x0: float, y0: float, cmd: ArcTo, steps: int = 32):
    """
    Sample an axis-aligned elliptical arc (SVG endpoint parameterisation).

    Returns an (steps, 2) array ending at the arc's end point; the start
    point is not repeated.
    """
    x1, y1 = cmd.x, cmd.y
    rx, ry = abs(cmd.rx), abs(cmd.ry)
    if rx == 0 or ry == 0 or (x0 == x1 and y0 == y1):
        return np.array([[x1, y1]], dtype=float)

    hx, hy = (x0 - x1) / 2, (y0 - y1) / 2
    lam = (hx * hx) / (rx * rx) + (hy * hy) / (ry * ry)
    if lam > 1:
        rx, ry = rx * math.sqrt(lam), ry * math.sqrt(lam)

    num = rx * rx * ry * ry - rx * rx * hy * hy - ry * ry * hx * hx
    den = rx * rx * hy * hy + ry * ry * hx * hx
    coef = math.sqrt(max(0.0, num / den))
    if cmd.large_arc == cmd.sweep:
        coef = -coef
    cxp = coef * rx * hy / ry
    cyp = -coef * ry * hx / rx
    cx, cy = cxp + (x0 + x1) / 2, cyp + (y0 + y1) / 2

    ux, uy = (hx - cxp) / rx, (hy - cyp) / ry
    vx, vy = (-hx - cxp) / rx, (-hy - cyp) / ry
    theta1 = math.atan2(uy, ux)
    dtheta = math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)
    if cmd.sweep == 0 and dtheta > 0:
        dtheta -= 2 * math.pi
    elif cmd.sweep == 1 and dtheta < 0:
        dtheta += 2 * math.pi

    t = theta1 + dtheta * np.linspace(0.0, 1.0, steps + 1)[1:]
    return np.column_stack((cx + rx * np.cos(t), cy + ry * np.sin(t)))


def path_vertices(np, spec: ArcPathSpec, steps: int = 32) -> List["np.ndarray"]:
    """Polylines (one per subpath) approximating the path."""
    polys: List[list] = []
    current: list = []
    x, y = 0.0, 0.0
    start: Tuple[float, float] = (0.0, 0.0)
    for c in spec:
        if isinstance(c, MoveTo):
            if current:
                polys.append(current)
            x, y = c.x, c.y
            start = (x, y)
            current = [(x, y)]
        elif isinstance(c, LineTo):
            x, y = c.x, c.y
            current.append((x, y))
        elif isinstance(c, ArcTo):
            current.extend(map(tuple, arc_points(np, x, y, c, steps)))
            x, y = c.x, c.y
        elif isinstance(c, ClosePath):
            current.append(start)
            x, y = start
    if current:
        polys.append(current)
    return [np.asarray(p, dtype=float) for p in polys]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="circal plot-ring", description="Plot the ring with matplotlib.")
    p.add_argument("--year", type=int, default=date.today().year)
    p.add_argument("--palette", default="light")
    p.add_argument("--notch-policy", choices=["two_tier", "graduated"], default="two_tier")
    p.add_argument("--inner-radius", type=float, default=0.0)
    p.add_argument("--steps", type=int, default=48, help="samples per arc")
    p.add_argument("--save", default=None, help="write the figure to this file instead of showing it")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    config = RingConfig().tweak(notch_policy=args.notch_policy, inner_radius=args.inner_radius)
    layouts = circal.ring(args.year, palette=args.palette, config=config)

    fig, ax = plt.subplots(figsize=(6, 6))
    for s in layouts:
        for poly in path_vertices(np, s.path, args.steps):
            ax.fill(poly[:, 0], poly[:, 1], color=rgb_to_hex(s.segment.colour), ec="white", lw=1)
        ax.text(
            s.label.x, s.label.y, s.segment.label,
            rotation=-s.label.rotation_degrees,  # y axis is flipped below
            rotation_mode="anchor", ha="center", va="center",
            fontsize=8, fontweight="bold", color=contrast_colour(s.segment.colour),
        )

    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.set_axis_off()
    ax.set_title(f"{args.year} ({args.palette}, {args.notch_policy})")

    if args.save:
        fig.savefig(args.save, dpi=150, bbox_inches="tight")
        print(f"wrote {args.save}")
    else:
        plt.show()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
