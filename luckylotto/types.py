from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

TICKET_SIZE = 6


class RoundState(Enum):
    NO_ANSWER = "no_answer"
    ANSWER_ACCEPTED = "answer_accepted"


class Rank(Enum):
    """Prize tiers keyed by (match count, bonus requirement).

    A bonus requirement of ``None`` means the bonus number is not considered.
    """

    FIRST = (6, None)
    SECOND = (5, True)
    THIRD = (5, False)
    FOURTH = (4, None)
    FIFTH = (3, None)
    NONE = (0, None)

    @property
    def match_count(self) -> int:
        return self.value[0]

    @property
    def bonus(self) -> Optional[bool]:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.name.lower()

    def matches(self, match_count: int, bonus_match: bool) -> bool:
        if self is Rank.NONE:
            return False
        if match_count != self.match_count:
            return False
        return self.bonus is None or self.bonus == bonus_match

    @classmethod
    def ranked(cls) -> Tuple["Rank", ...]:
        return (cls.FIRST, cls.SECOND, cls.THIRD, cls.FOURTH, cls.FIFTH)


@dataclass(frozen=True)
class Ticket:
    numbers: Tuple[int, ...]

    @classmethod
    def from_numbers(cls, numbers: Iterable[int]) -> "Ticket":
        return cls(numbers=tuple(sorted(numbers)))

    def __contains__(self, number: int) -> bool:
        return number in self.numbers

    def as_list(self):
        return list(self.numbers)


@dataclass(frozen=True)
class Answer:
    base: Tuple[int, ...]
    bonus: int

    def to_dict(self) -> dict:
        return {"numbers": list(self.base), "bonus": self.bonus}


@dataclass(frozen=True)
class RankResult:
    counts: Dict[Rank, int]
    unranked: int
    ticket_count: int
    total_payout: int
    total_spent: int
    benefit_rate: float
    payouts: Dict[Rank, int] = field(default_factory=dict, compare=False)

    def count(self, rank: Rank) -> int:
        if rank is Rank.NONE:
            return self.unranked
        return self.counts.get(rank, 0)

    def to_dict(self) -> dict:
        return {
            "ranks": [
                {
                    "rank": rank.label,
                    "match_count": rank.match_count,
                    "bonus": rank.bonus,
                    "prize": self.payouts.get(rank),
                    "count": self.counts.get(rank, 0),
                }
                for rank in Rank.ranked()
            ],
            "unranked": self.unranked,
            "ticket_count": self.ticket_count,
            "total_payout": self.total_payout,
            "total_spent": self.total_spent,
            "benefit_rate": self.benefit_rate,
        }
