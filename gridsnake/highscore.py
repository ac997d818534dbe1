"""High score persistence."""

import logging
import os

logger = logging.getLogger(__name__)


class MemoryHighScoreStore:
    def __init__(self, value: int = 0):
        self.value = max(0, int(value))

    def load(self) -> int:
        return self.value

    def save(self, value: int):
        self.value = max(0, int(value))


class FileHighScoreStore:
    """Keeps the high score as a single integer in a text file.

    A missing or unreadable file counts as 0, like an empty browser store.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        try:
            with open(self.path, encoding="utf-8") as fh:
                return max(0, int(fh.read().strip() or 0))
        except FileNotFoundError:
            return 0
        except ValueError:
            logger.warning("ignoring corrupt high score file %s", self.path)
            return 0

    def save(self, value: int):
        tmp = f"{self.path}.tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                fh.write(str(max(0, int(value))))
            os.replace(tmp, self.path)
        except OSError:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
