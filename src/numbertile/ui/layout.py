from numbertile.constants import (
    BOARD_WIDTH, THIN_PADDING, THICK_PADDING, VIEW_PADDING, SCORE_BAR_HEIGHT,
    BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT,
)


def tile_metrics(dimension: int, board_width: float = BOARD_WIDTH):
    """Return (tile_width, padding) for a board of the given nominal width.

    Padding surrounds every tile, so the board holds dimension + 1 gaps.
    """
    padding = THIN_PADDING if dimension > 5 else THICK_PADDING
    usable = board_width - padding * (dimension + 1)
    tile_width = int(usable) / dimension
    return tile_width, padding


def compute_board_geometry(window_width: int, window_height: int, dimension: int):
    """Return (tile_width, padding, board_left, board_bottom, board_size) for the window.

    The nominal board is scaled up to the largest square that fits the
    configured share of the window, leaving room for the score bar above it.
    """
    max_w = window_width * BOARD_MAX_WIDTH_PCT
    max_h = (window_height - SCORE_BAR_HEIGHT - VIEW_PADDING) * BOARD_MAX_HEIGHT_PCT
    scale = max(min(max_w, max_h) / BOARD_WIDTH, 0.5)
    board_size = BOARD_WIDTH * scale
    tile_width, padding = tile_metrics(dimension, board_size)
    total_height = board_size + VIEW_PADDING + SCORE_BAR_HEIGHT
    board_left = max((window_width - board_size) / 2, 0)
    board_bottom = max((window_height - total_height) / 2, 0)
    return tile_width, padding, board_left, board_bottom, board_size
