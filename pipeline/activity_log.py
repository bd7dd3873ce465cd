"""
Activity log shown to the user: the most recent lines of what the agent did.

Error lines carry the ERR: prefix so a display can highlight them. Every
line is also written to the Python logger.
"""
import logging
from collections import deque
from typing import Deque, List

logger = logging.getLogger(__name__)

ERROR_PREFIX = "ERR:"
DEFAULT_CAPACITY = 50
INITIAL_MESSAGE = "System initialized. Waiting for user profile..."


def is_error_line(line: str) -> bool:
    return line.startswith(ERROR_PREFIX)


class ActivityLog:
    """Capped, append-only list of text lines."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, initial_message: str = INITIAL_MESSAGE):
        self.capacity = capacity
        self._lines: Deque[str] = deque(maxlen=capacity)
        if initial_message:
            self._lines.append(initial_message)

    def info(self, message: str) -> str:
        self._lines.append(message)
        logger.info(message)
        return message

    def error(self, message: str) -> str:
        line = f"{ERROR_PREFIX} {message}"
        self._lines.append(line)
        logger.error(line)
        return line

    def lines(self) -> List[str]:
        return list(self._lines)

    def errors(self) -> List[str]:
        return [line for line in self._lines if is_error_line(line)]

    def __len__(self) -> int:
        return len(self._lines)
