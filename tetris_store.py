"""High score persistence: a bare decimal integer in a text file"""
import logging
from typing import Optional

from tetris_config import CONFIG

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path: Optional[str] = None):
        self.path = path or CONFIG["HIGH_SCORE_PATH"]

    def load(self) -> int:
        """Stored high score, or 0 when the file is missing or unreadable."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return int(f.read().strip())
        except (OSError, ValueError) as e:
            logger.debug("no usable high score at %s: %s", self.path, e)
            return 0

    def save(self, score: int) -> bool:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(score))
        except OSError as e:
            logger.warning("failed to write high score to %s: %s", self.path, e)
            return False
        return True
