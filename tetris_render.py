"""
Pygame view for the game.

Reads a GameInfo snapshot and draws it; nothing here touches game state.

- Static background (grid, panel frame, preview frame) is pre-rendered once
  per Dims.
- One solid cell Surface per piece kind, blitted for every occupied cell.
- Panel text Surfaces are cached and re-rendered only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, FIGURE_SIZE, PIECES
from tetris_game import GameInfo, PauseFlag

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

BANNERS = {
    PauseFlag.PAUSED: "PAUSED",
    PauseFlag.OVER: "GAME OVER",
}

CONTROLS = [
    "Enter Start",
    "←/→ Move",
    "↓ Soft drop",
    "Shift+↓ Drop",
    "Space Rotate",
    "P Pause",
    "Q Quit",
]


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    high_score: int = -1
    title: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Pre-rendered surfaces plus the draw routine for one snapshot."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self.hud = HudCache()
        self._make_static()
        self._make_cells()

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), self.panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), self.panel_rect, 1)
        size = FIGURE_SIZE * d.preview_cell
        frame = pygame.Rect(d.preview_x-6, d.preview_y-6, size+12, size+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.preview_surf: Dict[str, pygame.Surface] = {}
        c, pc = self.dims.cell, self.dims.preview_cell
        for t in PIECES:
            s = pygame.Surface((c-2, c-2))
            s.fill(COLORS[t])
            self.cell_surf[t] = s
            p = pygame.Surface((pc-2, pc-2))
            p.fill(COLORS[t])
            self.preview_surf[t] = p

    # ---------- Board ----------
    def draw_field(self, screen: pygame.Surface, info: GameInfo):
        d = self.dims
        for y, row in enumerate(info.field):
            for x, t in enumerate(row):
                if t:
                    screen.blit(self.cell_surf[t], (d.board_x + x*d.cell + 1, d.board_y + y*d.cell + 1))

    def draw_preview(self, screen: pygame.Surface, info: GameInfo):
        d = self.dims
        for y, row in enumerate(info.next):
            for x, t in enumerate(row):
                if t:
                    screen.blit(self.preview_surf[t],
                                (d.preview_x + x*d.preview_cell + 1, d.preview_y + y*d.preview_cell + 1))

    # ---------- Panel ----------
    def draw_panel(self, screen: pygame.Surface, info: GameInfo):
        d = self.dims
        f = self.font
        if self.hud.next_s is None:
            self.hud.next_s = f.render("Next", True, TEXT)
        if info.level != self.hud.level:
            self.hud.level = info.level
            self.hud.level_s = f.render(f"Level: {info.level}", True, TEXT)
        if info.score != self.hud.score:
            self.hud.score = info.score
            self.hud.score_s = f.render(f"Score: {info.score}", True, TEXT)
        if info.high_score != self.hud.high_score:
            self.hud.high_score = info.high_score
            self.hud.high_s = f.render(f"High Score: {info.high_score}", True, TEXT)
        if not self.hud.controls:
            self.hud.controls = [f.render(line, True, DIM_TEXT) for line in CONTROLS]

        x = d.panel_x + 12
        screen.blit(self.hud.next_s, (x, d.panel_y + 12))
        y = d.preview_y + FIGURE_SIZE*d.preview_cell + 20
        for surf in (self.hud.level_s, self.hud.score_s, self.hud.high_s):
            screen.blit(surf, (x, y)); y += 24
        y += 16
        for surf in self.hud.controls:
            screen.blit(surf, (x, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, info: GameInfo):
        text = BANNERS.get(info.pause)
        if text is None:
            return
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    def draw(self, screen: pygame.Surface, info: GameInfo):
        screen.blit(self.bg, (0,0))
        self.draw_field(screen, info)
        self.draw_preview(screen, info)
        self.draw_panel(screen, info)
        self.draw_banner(screen, info)
