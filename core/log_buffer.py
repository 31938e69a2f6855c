"""
Ordered status log for the active project creation job.
"""

from collections import deque
from typing import Deque, Optional, Tuple


class LogBuffer:
    """Append-only list of human-readable status lines."""

    def __init__(self, max_lines: Optional[int] = None):
        """
        Initialize the buffer.

        Args:
            max_lines: Keep at most this many lines, dropping the oldest first.
                None keeps every line.
        """
        if max_lines is not None and max_lines < 1:
            raise ValueError(f"max_lines must be positive, got {max_lines}")
        self.max_lines = max_lines
        self._lines: Deque[str] = deque(maxlen=max_lines)

    def append(self, line: str) -> None:
        self._lines.append(str(line))

    def snapshot(self) -> Tuple[str, ...]:
        """Return the lines in insertion order as an immutable tuple."""
        return tuple(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)
