from __future__ import annotations

from numbertile.constants import (
    BOARD_BACKGROUND, EMPTY_TILE_COLOR, TILE_COLORS, TILE_COLOR_HIGH, DARK_TEXT, LIGHT_TEXT,
)
from numbertile.rendering.context import RenderContext


def tile_color(value: int):
    return TILE_COLORS.get(value, TILE_COLOR_HIGH)


def text_color(value: int):
    return DARK_TEXT if value <= 4 else LIGHT_TEXT


def font_size_for(value: int, tile_width: float) -> int:
    digits = len(str(value))
    return max(8, int(tile_width * (0.45 if digits <= 2 else 0.36 if digits == 3 else 0.28)))


class BoardRenderer:
    """Draws the board background, empty slots and tiles for one frame."""

    def draw(self, ctx: RenderContext) -> None:
        import arcade
        arcade.draw_lrbt_rectangle_filled(
            ctx.board_left, ctx.board_left + ctx.board_size, ctx.board_bottom, ctx.board_top, BOARD_BACKGROUND,
        )
        half = ctx.tile_width / 2
        for row in range(ctx.dimension):
            for col in range(ctx.dimension):
                cx, cy = ctx.cell_center(row, col)
                arcade.draw_lrbt_rectangle_filled(cx - half, cx + half, cy - half, cy + half, EMPTY_TILE_COLOR)
        for sprite in ctx.tiles:
            size = half * sprite.scale
            if size <= 0:
                continue
            arcade.draw_lrbt_rectangle_filled(
                sprite.cx - size, sprite.cx + size, sprite.cy - size, sprite.cy + size, tile_color(sprite.value),
            )
            arcade.draw_text(
                str(sprite.value),
                sprite.cx,
                sprite.cy,
                text_color(sprite.value),
                font_size_for(sprite.value, ctx.tile_width * sprite.scale),
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
