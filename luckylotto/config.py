from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from .types import TICKET_SIZE, Rank

DEFAULT_PAYOUTS: Mapping[Rank, int] = {
    Rank.FIRST: 2_000_000_000,
    Rank.SECOND: 30_000_000,
    Rank.THIRD: 1_500_000,
    Rank.FOURTH: 50_000,
    Rank.FIFTH: 5_000,
}


def _int_from_env(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {key} must be an integer, got {value!r}") from exc


def _payouts_from_env(key: str) -> Dict[Rank, int]:
    payouts = dict(DEFAULT_PAYOUTS)
    raw = os.getenv(key)
    if not raw:
        return payouts
    try:
        overrides = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Environment variable {key} must be a JSON object") from exc
    if not isinstance(overrides, dict):
        raise RuntimeError(f"Environment variable {key} must be a JSON object")

    for name, amount in overrides.items():
        try:
            rank = Rank[str(name).upper()]
        except KeyError as exc:
            raise RuntimeError(f"Unknown rank in {key}: {name}") from exc
        if rank is Rank.NONE:
            raise RuntimeError(f"Rank {name} carries no prize")
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise RuntimeError(f"Prize for rank {name} must be a non-negative integer")
        payouts[rank] = amount
    return payouts


@dataclass(frozen=True)
class FlaskSettings:
    secret_key: str = "luckylotto-dev-secret"
    debug: bool = True


@dataclass(frozen=True)
class LottoSettings:
    max_number: int = 45
    ticket_price: int = 1000
    max_tickets_per_purchase: int = 100
    max_rounds: int = 1024
    payouts: Mapping[Rank, int] = field(default_factory=lambda: dict(DEFAULT_PAYOUTS))

    @property
    def ticket_size(self) -> int:
        return TICKET_SIZE

    def validate(self) -> "LottoSettings":
        if self.max_number < TICKET_SIZE + 1:
            raise RuntimeError(
                f"LOTTO_MAX_NUMBER must be at least {TICKET_SIZE + 1} to fit numbers and a bonus"
            )
        if self.ticket_price <= 0:
            raise RuntimeError("LOTTO_TICKET_PRICE must be positive")
        if self.max_tickets_per_purchase <= 0:
            raise RuntimeError("LOTTO_MAX_TICKETS_PER_PURCHASE must be positive")
        if self.max_rounds <= 0:
            raise RuntimeError("LOTTO_MAX_ROUNDS must be positive")
        missing = [rank.label for rank in Rank.ranked() if rank not in self.payouts]
        if missing:
            raise RuntimeError(f"Payout table is missing ranks: {', '.join(missing)}")
        return self


@dataclass(frozen=True)
class AppSettings:
    flask: FlaskSettings
    lotto: LottoSettings


@lru_cache(maxsize=1)
def load_settings(dotenv_path: Optional[str] = None) -> AppSettings:
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        load_dotenv()

    flask_settings = FlaskSettings(
        secret_key=os.getenv("FLASK_SECRET_KEY", "luckylotto-dev-secret"),
        debug=os.getenv("FLASK_DEBUG", "1") == "1",
    )

    lotto_settings = LottoSettings(
        max_number=_int_from_env("LOTTO_MAX_NUMBER", 45),
        ticket_price=_int_from_env("LOTTO_TICKET_PRICE", 1000),
        max_tickets_per_purchase=_int_from_env("LOTTO_MAX_TICKETS_PER_PURCHASE", 100),
        max_rounds=_int_from_env("LOTTO_MAX_ROUNDS", 1024),
        payouts=_payouts_from_env("LOTTO_PAYOUTS"),
    ).validate()

    return AppSettings(flask=flask_settings, lotto=lotto_settings)
