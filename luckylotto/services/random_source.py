from __future__ import annotations

import random
import secrets
from typing import List, Optional

from ..errors import RangeError


class RandomNumberSource:
    """Draws distinct integers from an inclusive range.

    The default generator is backed by ``secrets.SystemRandom``; pass a seeded
    ``random.Random`` to get reproducible draws.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def draw_unique(self, count: int, minimum: int, maximum: int) -> List[int]:
        if minimum > maximum:
            raise RangeError(f"Empty range {minimum}..{maximum}")
        span = maximum - minimum + 1
        if count < 0 or count > span:
            raise RangeError(f"Cannot draw {count} distinct numbers from {minimum}..{maximum}")
        return self._rng.sample(range(minimum, maximum + 1), count)
