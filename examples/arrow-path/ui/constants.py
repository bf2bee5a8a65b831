"""Layout constants and color definitions."""

# Timing
FPS = 60
DURATION = 5.0  # seconds per lap

# Layout dimensions (16:9 stage with padding around the curve)
SCREEN_W = 640
SCREEN_H = 360
PADDING = 20
STATUS_H = 24
ARROW_SIZE = 30

# Glyph spread at the end of each lap in on-path mode
SPREAD_END = 0.4

# Colors
BG_COLOR = (20, 20, 30)
CURVE_COLOR = (128, 128, 128)
ARROW_COLOR = (230, 230, 240)
TRAIL_COLOR = (0, 220, 220)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
