DEFAULT_DIMENSION = 4
DEFAULT_THRESHOLD = 2048

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 560
WINDOW_TITLE = "2048"

# Board footprint before it is scaled to the window.
BOARD_WIDTH = 230.0
# Boards larger than 5x5 use the thin padding so tiles stay readable.
THIN_PADDING = 3.0
THICK_PADDING = 6.0
VIEW_PADDING = 10.0
SCORE_BAR_HEIGHT = 40.0
CORNER_RADIUS = 6.0
# Board may not exceed this share of the window in either axis.
BOARD_MAX_WIDTH_PCT = 0.9
BOARD_MAX_HEIGHT_PCT = 0.75

# Animation timings (seconds)
SLIDE_DURATION = 0.08
MERGE_DURATION = 0.12
SPAWN_DURATION = 0.15

# Key repeat guard for move input
MIN_KEY_INTERVAL = 0.05

BOARD_BACKGROUND = (0, 0, 0)
EMPTY_TILE_COLOR = (64, 64, 64)
# Tile palette by value; anything larger falls back to TILE_COLOR_HIGH.
TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
TILE_COLOR_HIGH = (60, 58, 50)
DARK_TEXT = (119, 110, 101)
LIGHT_TEXT = (249, 246, 242)
