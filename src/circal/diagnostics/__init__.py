"""Diagnostics package.

- pretty_month, ring_table, ring_svg: always available (text / SVG output)
- plot_ring: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "ring_table", "ring_svg", "plot_ring"]
