"""Wall-clock milliseconds and a clock that counts from its first reading."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


def now_ms() -> int:
    """Return the current time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


@dataclass
class Clock:
    """Milliseconds elapsed since the clock was first read."""

    created_at: int = 0
    source: Callable[[], int] = field(default=now_ms, repr=False)

    def elapsed_ms(self) -> int:
        """Return milliseconds since the first call; the first call returns 0."""
        if self.created_at == 0:
            self.created_at = self.source()
        return self.source() - self.created_at