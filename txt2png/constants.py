# this_file: txt2png/constants.py
"""
Rendering constants shared across the txt2png components.
"""

# Default command-line values
DEFAULT_DPI = 72.0
DEFAULT_FONT_FILE = "./LiberationMono-Regular.ttf"
DEFAULT_HINTING = "none"
DEFAULT_FONT_SIZE = 125.0
DEFAULT_TEXT = "TEST"
DEFAULT_OUTPUT = "out.png"

# Default canvas geometry (pixels)
SLOT_WIDTH = 120
RENDER_HEIGHT = 120

# FreeType reports metrics in 26.6 fixed point: 64 units per pixel
SUBPIXEL_SCALE = 64

# Points are defined at 72 per inch
POINTS_PER_INCH = 72.0

# Baseline positioning ratio (relative to canvas height)
# Baseline Y = height * BASELINE_NUMERATOR // BASELINE_DENOMINATOR
BASELINE_NUMERATOR = 2
BASELINE_DENOMINATOR = 3

# RGBA colors
BLACK = (0x00, 0x00, 0x00, 0xFF)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
LIGHT_GUIDELINE = (0xDD, 0xDD, 0xDD, 0xFF)
DARK_GUIDELINE = (0x44, 0x44, 0x44, 0xFF)
