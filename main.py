import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_game import Game, UserAction
from tetris_input import MoveRepeat, translate
from tetris_layout import compute_dims
from tetris_render import RenderAssets


def step_interval(speed):
    return max(1, speed // CONFIG["STEP_DIVISOR"])


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(game: Game):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    repeat = MoveRepeat()

    game.user_input(UserAction.START)
    info = game.snapshot()
    acc = 0

    while not game.terminated:
        dt = clock.tick(CONFIG["FPS"])
        acc += dt

        # at most one pending event per frame
        event = pygame.event.poll()
        if event.type != pygame.NOEVENT:
            mapped = translate(event)
            if mapped:
                game.user_input(*mapped)

        keys = pygame.key.get_pressed()
        move = repeat.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
        if move:
            game.user_input(move)

        if acc >= step_interval(game.speed):
            acc = 0
            info = game.update()
        else:
            info = game.snapshot()

        render.draw(screen, info)
        pygame.display.flip()

    pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(Game())
    return 0


if __name__ == '__main__':
    sys.exit(main())
