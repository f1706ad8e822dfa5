from __future__ import annotations

from numbertile.components.game_state import GameMode
from numbertile.constants import SCORE_BAR_HEIGHT, VIEW_PADDING, LIGHT_TEXT
from numbertile.rendering.context import RenderContext

BANNERS = {
    GameMode.TITLE: ("2048", (238, 228, 218), "Press Enter to start"),
    GameMode.WON: ("You won!", (237, 194, 46), "Press N for a new game"),
    GameMode.LOST: ("You lost!", (246, 94, 59), "Press N for a new game"),
}


class ScoreRenderer:
    """Score bar above the board plus the title, win and loss banners."""

    def draw(self, ctx: RenderContext, score: int, mode: GameMode) -> None:
        import arcade
        bottom = ctx.board_top + VIEW_PADDING
        arcade.draw_lrbt_rectangle_filled(
            ctx.board_left, ctx.board_left + ctx.board_size, bottom, bottom + SCORE_BAR_HEIGHT, (0, 0, 0),
        )
        arcade.draw_text(
            f"SCORE: {score}",
            ctx.board_left + ctx.board_size / 2,
            bottom + SCORE_BAR_HEIGHT / 2,
            LIGHT_TEXT,
            16,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        banner = BANNERS.get(mode)
        if banner is None:
            return
        text, color, prompt = banner
        mid_y = ctx.board_bottom + ctx.board_size / 2
        arcade.draw_lrbt_rectangle_filled(
            ctx.board_left, ctx.board_left + ctx.board_size, mid_y - 30, mid_y + 30, (0, 0, 0, 200),
        )
        arcade.draw_text(text, ctx.board_left + ctx.board_size / 2, mid_y + 6, color, 22,
                         anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(prompt, ctx.board_left + ctx.board_size / 2, mid_y - 16,
                         LIGHT_TEXT, 10, anchor_x="center", anchor_y="center")
