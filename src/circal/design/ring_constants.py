from __future__ import annotations

# ============================================================
# RING LAYOUT
# ============================================================

SEGMENTS = 12
SEGMENT_DEGREES = 360 / SEGMENTS

MONTH_LABELS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Ring start is rotated so that January sits in the lower-right quadrant
ANCHOR_DEGREES = 45.0

# Notch: shorter months get a reduced outer radius
FULL_DAY_COUNT = 31
FULL_RADIUS = 1.0
NOTCHED_RADIUS = 0.96
NOTCHED_RADIUS_30 = 0.96       # 30-day months
NOTCHED_RADIUS_FEB = 0.92      # February, 28 days
NOTCHED_RADIUS_FEB_LEAP = 0.96  # February, 29 days

LABEL_INSET = 0.95

# ============================================================
# CANVAS
# ============================================================

SVG_SIZE = 400
SUN_DISTANCE = 50   # sun marker sits this far outside the ring
MOON_DISTANCE = 20
PADDING = 10

# centre circle radius as a fraction of ring radius
CENTRE_CIRCLE_RATIO = 1 / 3

# ============================================================
# PALETTES (seasonal gradient, JAN..DEC)
# ============================================================

MONTH_COLOURS = (
    (72, 88, 154),    # JAN #48589a
    (39, 93, 164),    # FEB #275da4
    (61, 138, 174),   # MAR #3d8aae
    (101, 154, 139),  # APR #659a8b
    (155, 177, 70),   # MAY #9bb146
    (182, 199, 65),   # JUN #b6c741
    (218, 205, 72),   # JUL #dacd48
    (236, 211, 68),   # AUG #ecd344
    (251, 184, 65),   # SEP #fbb841
    (248, 132, 40),   # OCT #f88428
    (229, 94, 52),    # NOV #e55e34
    (153, 32, 122),   # DEC #99207a
)

MONTH_COLOURS_HOVER = (
    (117, 132, 196),
    (91, 154, 238),
    (109, 183, 217),
    (123, 182, 165),
    (170, 193, 80),
    (182, 199, 65),
    (218, 205, 72),
    (236, 211, 68),
    (251, 184, 65),
    (252, 153, 75),
    (255, 158, 128),
    (226, 115, 198),
)

# Lighter and more saturated so they stand out on a dark background
MONTH_COLOURS_DARK = (
    (107, 123, 184),
    (71, 134, 214),
    (91, 168, 214),
    (131, 184, 169),
    (175, 197, 90),
    (202, 219, 85),
    (238, 225, 92),
    (246, 221, 88),
    (251, 204, 85),
    (250, 152, 60),
    (235, 114, 72),
    (183, 62, 152),
)

MONTH_COLOURS_HOVER_DARK = (
    (127, 143, 204),
    (91, 154, 234),
    (111, 188, 234),
    (151, 204, 189),
    (195, 217, 110),
    (222, 239, 105),
    (248, 235, 112),
    (246, 231, 108),
    (251, 214, 105),
    (250, 172, 80),
    (245, 134, 92),
    (203, 82, 172),
)
