from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from esper import World

from numbertile.components.animation_merge import MergeAnimation
from numbertile.components.animation_slide import SlideAnimation
from numbertile.components.animation_spawn import SpawnAnimation
from numbertile.components.board_position import BoardPosition
from numbertile.components.tile_view import TileView

BoardPos = Tuple[int, int]

# Share of a merge animation spent sliding the sources together.
MERGE_CONVERGE_SPLIT = 0.5


@dataclass(slots=True)
class TileSprite:
    value: int
    cx: float
    cy: float
    scale: float = 1.0


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    dimension: int
    tile_width: float
    padding: float
    board_left: float
    board_bottom: float
    board_size: float
    tiles: List[TileSprite] = field(default_factory=list)

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_size

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        # Row 0 is drawn at the top of the board.
        step = self.tile_width + self.padding
        cx = self.board_left + self.padding + col * step + self.tile_width / 2
        cy = self.board_top - (self.padding + row * step + self.tile_width / 2)
        return cx, cy


def ease_out(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def collect_animation_maps(world: World):
    slide_by_dst: Dict[BoardPos, SlideAnimation] = {}
    merge_by_dst: Dict[BoardPos, MergeAnimation] = {}
    spawn_by_pos: Dict[BoardPos, SpawnAnimation] = {}
    for _, slide in world.get_component(SlideAnimation):
        slide_by_dst[tuple(slide.dst)] = slide
    for _, merge in world.get_component(MergeAnimation):
        merge_by_dst[tuple(merge.dst)] = merge
    for _, spawn in world.get_component(SpawnAnimation):
        spawn_by_pos[tuple(spawn.pos)] = spawn
    return slide_by_dst, merge_by_dst, spawn_by_pos


def _interpolate(ctx: RenderContext, src: BoardPos, dst: BoardPos, t: float) -> Tuple[float, float]:
    sx, sy = ctx.cell_center(*src)
    dx, dy = ctx.cell_center(*dst)
    return sx + (dx - sx) * t, sy + (dy - sy) * t


def build_render_context(
    world: World,
    dimension: int,
    tile_width: float,
    padding: float,
    board_left: float,
    board_bottom: float,
    board_size: float,
    *,
    use_easing: bool = True,
) -> RenderContext:
    """Populate a RenderContext, placing every tile view at its animated position.

    A merge plays in two halves: the two source tiles slide into the
    destination showing their pre-merge value, then the merged tile pops.
    """

    ctx = RenderContext(
        dimension=dimension,
        tile_width=tile_width,
        padding=padding,
        board_left=board_left,
        board_bottom=board_bottom,
        board_size=board_size,
    )
    slide_by_dst, merge_by_dst, spawn_by_pos = collect_animation_maps(world)
    for _, (pos, tile) in world.get_components(BoardPosition, TileView):
        cell = pos.cell
        cx, cy = ctx.cell_center(*cell)
        scale = 1.0
        slide = slide_by_dst.get(cell)
        if slide is not None:
            t = ease_out(slide.linear) if use_easing else slide.linear
            cx, cy = _interpolate(ctx, slide.src, cell, t)
        merge = merge_by_dst.get(cell)
        if merge is not None:
            if merge.linear < MERGE_CONVERGE_SPLIT:
                t = merge.linear / MERGE_CONVERGE_SPLIT
                if use_easing:
                    t = ease_out(t)
                for src in merge.sources:
                    sx, sy = _interpolate(ctx, tuple(src), cell, t)
                    ctx.tiles.append(TileSprite(value=tile.value // 2, cx=sx, cy=sy))
                continue
            pop = (merge.linear - MERGE_CONVERGE_SPLIT) / (1.0 - MERGE_CONVERGE_SPLIT)
            scale = 1.0 + 0.2 * math.sin(math.pi * pop)
        spawn = spawn_by_pos.get(cell)
        if spawn is not None:
            scale = ease_out(spawn.linear) if use_easing else spawn.linear
        ctx.tiles.append(TileSprite(value=tile.value, cx=cx, cy=cy, scale=scale))
    return ctx
