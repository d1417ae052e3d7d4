"""Keyboard to UserAction translation and DAS/ARR for left/right"""
from typing import Optional, Tuple
import pygame
from tetris_config import CONFIG
from tetris_game import UserAction

KEY_ACTIONS = {
    pygame.K_RETURN: UserAction.START,
    pygame.K_s: UserAction.START,
    pygame.K_p: UserAction.PAUSE,
    pygame.K_q: UserAction.TERMINATE,
    pygame.K_ESCAPE: UserAction.TERMINATE,
    pygame.K_UP: UserAction.UP,
    pygame.K_DOWN: UserAction.DOWN,
    pygame.K_SPACE: UserAction.ROTATE,
}


def translate(event) -> Optional[Tuple[UserAction, bool]]:
    """Map one pygame event to (action, hold), or None if it means nothing."""
    if event.type == pygame.QUIT:
        return UserAction.TERMINATE, False
    if event.type != pygame.KEYDOWN:
        return None
    action = KEY_ACTIONS.get(event.key)
    if action is None:
        return None
    hold = action is UserAction.DOWN and bool(event.mod & pygame.KMOD_SHIFT)
    return action, hold


class MoveRepeat:
    """
    Turns held left/right keys into discrete move actions.

    A fresh press yields one move at once. Holding it past DAS_MS yields a
    move every ARR_MS (every frame when ARR_MS is 0). Both keys held cancel
    out, and any change of direction starts over.

    The game applies at most one move per controller step, and moves sent
    while one is pending are dropped. The effective repeat rate is therefore
    capped at one column per speed // STEP_DIVISOR ms, however small ARR_MS is.
    """
    def __init__(self):
        self.direction = 0
        self.held_ms = 0
        self.since_move_ms = 0
        self.pressed = False

    def update(self, dt_ms: int, left_held: bool, right_held: bool) -> Optional[UserAction]:
        direction = (-1 if left_held else 0) + (1 if right_held else 0)
        if direction != self.direction:
            self.direction = direction
            self.held_ms = 0
            self.since_move_ms = 0
            self.pressed = False
        if direction == 0:
            return None

        self.held_ms += dt_ms
        if not self.pressed:
            self.pressed = True
            return self._action()
        if self.held_ms < CONFIG["DAS_MS"]:
            return None
        if CONFIG["ARR_MS"] == 0:
            return self._action()
        self.since_move_ms += dt_ms
        if self.since_move_ms >= CONFIG["ARR_MS"]:
            self.since_move_ms = 0
            return self._action()
        return None

    def _action(self) -> UserAction:
        return UserAction.LEFT if self.direction < 0 else UserAction.RIGHT
