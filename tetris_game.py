"""
Game controller: the state machine that spawns, drops, moves, rotates,
locks and clears pieces on the playfield.

One Game object owns all mutable state (field, preview, active piece,
score). Input handlers and the per-tick update both mutate it directly and
must run on the same thread. The view only ever sees the immutable GameInfo
returned by snapshot()/update().

Steps per state (one update() call each):

  Spawn     place the next piece at the spawn anchor, or end the game
  Falling   drop the piece one row, or go to Locking when it rests
  Moving    shift one column if possible, then one Falling step
  Locking   forget the active piece, its cells stay in the field
  Clearing  remove full rows, score them, level up, back to Spawn

Paused and GameOver do nothing until the matching input arrives.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional, Tuple

from tetris_config import CONFIG
from tetris_piece import (COLS, ROWS, FIGURE_SIZE, ActivePiece, mask_cells,
                          rotation_count, kick_offsets)
from tetris_board import (Board, new_grid, new_preview, set_cells, clear_cells,
                          fits, sweep, has_cells, freeze)
from tetris_rng import PieceRandom
from tetris_scoring import (BASE_SPEED, points_for_lines, speed_for_level,
                            advance_level)
from tetris_store import HighScoreStore

logger = logging.getLogger(__name__)

SPAWN_X = COLS // 2 - FIGURE_SIZE // 2
SPAWN_Y = 0

Grid = Tuple[Tuple[Optional[str], ...], ...]


class FsmState(Enum):
    START = auto()
    SPAWN = auto()
    FALLING = auto()
    MOVING = auto()
    ROTATING = auto()
    LOCKING = auto()
    CLEARING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class UserAction(Enum):
    START = auto()
    PAUSE = auto()
    TERMINATE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()       # reserved
    DOWN = auto()
    ROTATE = auto()


class PauseFlag(IntEnum):
    OVER = -1
    OFF = 0
    PAUSED = 1


@dataclass(frozen=True)
class GameInfo:
    field: Grid
    next: Grid
    score: int
    high_score: int
    level: int
    speed: int
    pause: PauseFlag


class Game:
    def __init__(self, store=None, rng=None):
        self.store = store if store is not None else HighScoreStore()
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"], CONFIG["REPEAT_REJECTION"])

        self.state = FsmState.START
        self.resume_state = FsmState.FALLING
        self.field: Optional[Board] = None
        self.preview: Optional[Board] = None
        self.piece: Optional[ActivePiece] = None
        self.next_kind: Optional[str] = None
        self.move_direction = 0

        self.score = 0
        self.high_score = 0
        self.level = 1
        self.speed = BASE_SPEED
        self.pause = PauseFlag.OFF
        self.points_toward_level = 0
        self.terminated = False

    # ---------- Input ----------
    def user_input(self, action: UserAction, hold: bool = False):
        live = self.pause is PauseFlag.OFF
        if action is UserAction.START:
            if self.state in (FsmState.START, FsmState.GAME_OVER):
                self.start()
        elif action is UserAction.PAUSE:
            if live and self.state is FsmState.FALLING:
                self.resume_state = self.state
                self.state = FsmState.PAUSED
                self.pause = PauseFlag.PAUSED
            elif self.pause is PauseFlag.PAUSED:
                self.pause = PauseFlag.OFF
                self.state = self.resume_state
        elif action is UserAction.TERMINATE:
            self.terminated = True
            if self.state not in (FsmState.START, FsmState.GAME_OVER):
                self.game_over()
        elif action in (UserAction.LEFT, UserAction.RIGHT):
            if live and self.state is FsmState.FALLING:
                self.move_direction = -1 if action is UserAction.LEFT else 1
                self.state = FsmState.MOVING
        elif action is UserAction.DOWN:
            if live and self.state in (FsmState.FALLING, FsmState.MOVING):
                self.state = FsmState.FALLING
                self.fall()
                while hold and self.state is FsmState.FALLING:
                    self.fall()
        elif action is UserAction.ROTATE:
            if live and self.state is FsmState.FALLING:
                self.state = FsmState.ROTATING
                self.rotate()
                self.state = FsmState.FALLING

    # ---------- Tick ----------
    def update(self) -> GameInfo:
        """Advance the state machine by exactly one step."""
        if self.pause is PauseFlag.OFF:
            if self.state is FsmState.SPAWN:
                self.spawn()
            elif self.state is FsmState.FALLING:
                self.fall()
            elif self.state is FsmState.MOVING:
                self.move(self.move_direction)
            elif self.state is FsmState.LOCKING:
                self.piece = None
                self.state = FsmState.CLEARING
            elif self.state is FsmState.CLEARING:
                self.clear_lines()
        return self.snapshot()

    def snapshot(self) -> GameInfo:
        return GameInfo(
            field=freeze(self.field, ROWS, COLS),
            next=freeze(self.preview, FIGURE_SIZE, FIGURE_SIZE),
            score=self.score,
            high_score=self.high_score,
            level=self.level,
            speed=self.speed,
            pause=self.pause,
        )

    # ---------- States ----------
    def start(self) -> bool:
        """Allocate the grids and reset progress. False if the game cannot start."""
        try:
            field = new_grid()
            preview = new_preview()
        except MemoryError:
            logger.error("failed to allocate game field")
            return False
        self.field, self.preview = field, preview
        self.piece = None
        self.next_kind = None
        self.score = 0
        self.level = 1
        self.speed = speed_for_level(self.level)
        self.pause = PauseFlag.OFF
        self.points_toward_level = 0
        self.high_score = self.store.load()
        self.state = FsmState.SPAWN
        logger.info("game started, high score %d", self.high_score)
        return True

    def generate_next(self):
        self.next_kind = self.rng.next_kind()
        for row in self.preview:
            row[:] = [None] * FIGURE_SIZE
        set_cells(self.preview, mask_cells(self.next_kind, 0, 0, 0), self.next_kind)

    def spawn(self):
        if not has_cells(self.preview):
            self.generate_next()
        piece = ActivePiece.at(self.next_kind, 0, SPAWN_X, SPAWN_Y)
        if not fits(self.field, piece.cells):
            self.game_over()
            return
        set_cells(self.field, piece.cells, piece.kind)
        self.piece = piece
        logger.debug("spawned %s", piece.kind)
        self.generate_next()
        self.state = FsmState.FALLING

    def fall(self):
        """One gravity step; switches to Locking when any column is supported."""
        lowest = {}
        for x, y in self.piece.cells:
            if y > lowest.get(x, -1):
                lowest[x] = y
        for x, y in lowest.items():
            if not fits(self.field, [(x, y + 1)]):
                self.state = FsmState.LOCKING
                return
        self._shift(0, 1)

    def move(self, direction: int):
        # only the leading cell of each row can run into something
        leading = {}
        for x, y in self.piece.cells:
            if y not in leading or (x < leading[y] if direction < 0 else x > leading[y]):
                leading[y] = x
        if all(fits(self.field, [(x + direction, y)]) for y, x in leading.items()):
            self._shift(direction, 0)
        self.fall()
        if self.state is not FsmState.LOCKING:
            self.state = FsmState.FALLING

    def rotate(self):
        p = self.piece
        count = rotation_count(p.kind)
        if count <= 1:
            return
        nxt = (p.rotation + 1) % count
        clear_cells(self.field, p.cells)
        for dx, dy in kick_offsets(p.kind):
            cells = mask_cells(p.kind, nxt, p.x + dx, p.y + dy)
            if fits(self.field, cells):
                p.rotation, p.x, p.y, p.cells = nxt, p.x + dx, p.y + dy, cells
                break
        set_cells(self.field, p.cells, p.kind)

    def clear_lines(self):
        lines = sweep(self.field)
        if lines:
            points = points_for_lines(lines)
            self.score += points
            level, self.points_toward_level = advance_level(
                self.level, self.points_toward_level + points)
            if level != self.level:
                self.level = level
                self.speed = speed_for_level(level)
                logger.info("level %d, speed %d ms", level, self.speed)
            if self.score > self.high_score:
                self.high_score = self.score
                self.store.save(self.high_score)
        self.state = FsmState.SPAWN

    def game_over(self):
        self.state = FsmState.GAME_OVER
        self.pause = PauseFlag.OVER
        self.high_score = max(self.score, self.high_score)
        self.store.save(self.high_score)
        logger.info("game over, score %d", self.score)

    # ---------- Helpers ----------
    def _shift(self, dx: int, dy: int):
        p = self.piece
        clear_cells(self.field, p.cells)
        p.x += dx
        p.y += dy
        p.cells = [(x + dx, y + dy) for x, y in p.cells]
        set_cells(self.field, p.cells, p.kind)
