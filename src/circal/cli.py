from __future__ import annotations

import argparse
from datetime import date
import logging
import math
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_VERBOSE_FLAGS = ("-v", "--verbose")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_moon(argv: list[str]) -> int:
    import circal
    from circal.reference import moon

    p = argparse.ArgumentParser(prog="circal moon", description="Moon phase and ring marker positions for a date.")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    phase = moon.moon_phase(d)
    mk = circal.markers(d)

    print(f"Date: {d.isoformat()}")
    print(f"  phase       = {phase:.6f}")
    print(f"  phase angle = {math.degrees(moon.moon_phase_angle(d)):.3f} deg")
    print(f"  name        = {moon.moon_phase_name(d)}")
    print()
    print("Ring markers (default canvas):")
    print(f"  sun  angle = {math.degrees(mk.sun_angle):8.3f} deg  at ({mk.sun[0]:.2f}, {mk.sun[1]:.2f})")
    print(f"  moon angle = {math.degrees(mk.moon_angle):8.3f} deg  at ({mk.moon[0]:.2f}, {mk.moon[1]:.2f})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `circal YYYY-MM-DD ...` prints that month
    if argv and _DATE_RE.match(argv[0]):
        return _run_module_main("circal.diagnostics.pretty_month", argv)

    p = argparse.ArgumentParser(prog="circal", description="Circular calendar geometry toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("ring", help="Tabulate segment angles, notches and label placement")
    sub.add_parser("month", help="Print the 6x7 month grid for a date")
    sub.add_parser("svg", help="Write an SVG preview of the ring")
    sub.add_parser("plot-ring", help="Plot the ring with matplotlib (diagnostics extras)")
    sub.add_parser("moon", help="Moon phase and sun/moon marker positions for a date")

    args, rest = p.parse_known_args(argv)
    # -v may also follow the subcommand
    if any(a in _VERBOSE_FLAGS for a in rest):
        args.verbose = True
        rest = [a for a in rest if a not in _VERBOSE_FLAGS]

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.cmd == "ring":
        return _run_module_main("circal.diagnostics.ring_table", rest)

    if args.cmd == "month":
        return _run_module_main("circal.diagnostics.pretty_month", rest)

    if args.cmd == "svg":
        return _run_module_main("circal.diagnostics.ring_svg", rest)

    if args.cmd == "plot-ring":
        return _run_module_main("circal.diagnostics.plot_ring", rest)

    if args.cmd == "moon":
        return cmd_moon(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
