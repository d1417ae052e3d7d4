import os

CONFIG = {
    "HIGH_SCORE_PATH": os.environ.get(
        "TETRIS_HIGH_SCORE", os.path.join(os.path.expanduser("~"), ".tetris_high_score")),
    "SEED": None,
    "REPEAT_REJECTION": True,
    "CELL_SIZE": 32,
    "DAS_MS": 170,
    "ARR_MS": 50,                  # capped by the step interval, one column per step
    "FPS": 60,
    "STEP_DIVISOR": 2,
}
