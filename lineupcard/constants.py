"""Shared layout and typography constants for lineup card rendering.

Every geometric value is a fraction of the rendered canvas width (``_W``) or
height (``_H``) so the same card lays out identically at any 4:5 size.
"""

# Fixed export resolution (4:5 portrait)
EXPORT_WIDTH: int = 1080
EXPORT_HEIGHT: int = 1350

# Reference size used to turn absolute point values from the export design
# into canvas fractions (e.g. a 1px divider is 1 / 1350 of the height)
DESIGN_WIDTH: float = 1080.0
DESIGN_HEIGHT: float = 1350.0

# Text widths are measured at this size and scaled linearly
FONT_REFERENCE_SIZE: int = 200
LINE_HEIGHT_RATIO: float = 1.2

# Background
GRADIENT_MID_OPACITY: float = 0.80
GRADIENT_ACCENT_OPACITY: float = 0.15
BLUR_RADIUS_H: float = 22.0 / DESIGN_HEIGHT
BLUR_OVERLAY_OPACITY: float = 0.62

# Left photo panel
PHOTO_PANEL_OVERSIZE: float = 1.18
PHOTO_SOLID_FRACTION: float = 0.52
# Stops of the fade segment, relative to the fade itself
PHOTO_FADE_STOPS = ((0.0, 1.0), (0.45, 0.6), (1.0, 0.0))

# Text panel
TEXT_PANEL_OFFSET_RATIO: float = 0.72   # of left panel width
TEXT_PANEL_LEFT_MARGIN_W: float = 0.06
TEXT_PANEL_RIGHT_MARGIN_W: float = 0.05
TEXT_PANEL_TOP_H: float = 0.07

# Title block
TITLE_WORD_SIZE_H: float = 0.026
TITLE_WORD_TRACKING_H: float = 0.003
NUMERAL_SIZE_H: float = 0.092
NUMERAL_MIN_SCALE: float = 0.5
SPONSOR_SIZE_H: float = 0.015
SPONSOR_TRACKING_H: float = 1.5 / DESIGN_HEIGHT
SPONSOR_OPACITY: float = 0.45
MANAGER_SIZE_H: float = 0.017
MANAGER_OPACITY: float = 0.6
MANAGER_PREFIX: str = "MGR: "
TITLE_LINE_GAP_H: float = 0.004

# Divider
DIVIDER_PADDING_H: float = 0.014
DIVIDER_THICKNESS_H: float = 1.0 / DESIGN_HEIGHT
DIVIDER_OPACITY: float = 0.45

# Row packing
ROWS_AVAILABLE_H: float = 0.52
ROW_CAP_H: float = 0.068
MIN_PACKED_ROWS: int = 8
STARTER_FONT_RATIO: float = 0.52
BENCH_FONT_RATIO: float = 0.40
BENCH_ROW_RATIO: float = 0.75
TWO_COLUMN_BENCH_MIN: int = 5
STARTER_SPACING_RATIO: float = 0.08     # of row height
BENCH_SPACING_RATIO: float = 0.06       # of row height

# Bench header
SUBS_LABEL: str = "SUBS"
SUBS_TOP_PADDING_RATIO: float = 0.3     # of row height
SUBS_BAR_WIDTH_W: float = 3.0 / DESIGN_WIDTH
SUBS_BAR_HEIGHT_RATIO: float = 1.1      # of bench font size
SUBS_GAP_W: float = 4.0 / DESIGN_WIDTH
SUBS_LABEL_RATIO: float = 0.9           # of bench font size
SUBS_TRACKING_H: float = 2.5 / DESIGN_HEIGHT
BENCH_COLUMN_GAP_RATIO: float = 0.04    # of text panel width

# Player rows (ratios of the row font size)
NUMBER_SIZE_RATIO: float = 0.72
NUMBER_GUTTER_RATIO: float = 1.6
LEFT_ROW_GAP_RATIO: float = 0.45
RIGHT_ROW_GAP_RATIO: float = 0.3
DECIMAL_SIZE_RATIO: float = 0.68
SURNAME_MIN_SCALE: float = 0.65
CAPTAIN_BADGE_RATIO: float = 0.9
CAPTAIN_LETTER_RATIO: float = 0.55
CAPTAIN_LETTER: str = "C"

# Bottom strip
STRIP_TOP_H: float = 0.89
STRIP_HEIGHT_H: float = 0.11
STRIP_OPACITY: float = 0.08
STRIP_PADDING_W: float = 0.055
MATCH_LABEL_SIZE_H: float = 0.019
MATCH_LABEL_TRACKING_H: float = 1.0 / DESIGN_HEIGHT
MATCH_LABEL_OPACITY: float = 0.65
MATCH_LABEL_MIN_SCALE: float = 0.6
BADGE_HEIGHT_RATIO: float = 0.62        # of strip height
BADGE_SPACING_W: float = 0.025
