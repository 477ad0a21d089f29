from __future__ import annotations

import logging
import secrets
import threading
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from .engine import LottoEngine


class RoundRegistry:
    """Keeps one engine per round id, dropping the least recently used."""

    def __init__(
        self,
        factory: Callable[[], LottoEngine],
        max_rounds: int,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._factory = factory
        self._max_rounds = max_rounds
        self._rounds: "OrderedDict[str, LottoEngine]" = OrderedDict()
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger("luckylotto.rounds")

    def __len__(self) -> int:
        with self._lock:
            return len(self._rounds)

    def __contains__(self, round_id: str) -> bool:
        with self._lock:
            return round_id in self._rounds

    def get(self, round_id: Optional[str]) -> Optional[LottoEngine]:
        if round_id is None:
            return None
        with self._lock:
            engine = self._rounds.get(round_id)
            if engine is not None:
                self._rounds.move_to_end(round_id)
            return engine

    def create(self) -> Tuple[str, LottoEngine]:
        round_id = secrets.token_hex(8)
        engine = self._factory()
        with self._lock:
            self._rounds[round_id] = engine
            while len(self._rounds) > self._max_rounds:
                evicted, _ = self._rounds.popitem(last=False)
                self._logger.info("Evicted round %s", evicted)
        return round_id, engine

    def get_or_create(self, round_id: Optional[str]) -> Tuple[str, LottoEngine]:
        engine = self.get(round_id)
        if engine is not None:
            return round_id, engine
        return self.create()

    def discard(self, round_id: str) -> None:
        with self._lock:
            self._rounds.pop(round_id, None)
