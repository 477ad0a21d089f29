from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Mapping, Sequence

from ..errors import NoTicketsPurchasedError
from ..types import Answer, Rank, RankResult, Ticket

RATE_PRECISION = Decimal("0.01")


def classify(ticket: Ticket, answer: Answer) -> Rank:
    match_count = len(set(ticket.numbers).intersection(answer.base))
    bonus_match = answer.bonus in ticket
    for rank in Rank.ranked():
        if rank.matches(match_count, bonus_match):
            return rank
    return Rank.NONE


def benefit_rate(total_payout: int, total_spent: int) -> float:
    """Percentage of the spend returned as prizes, two decimals, half-up."""
    rate = Decimal(total_payout) * 100 / Decimal(total_spent)
    return float(rate.quantize(RATE_PRECISION, rounding=ROUND_HALF_UP))


class BenefitCalculator:
    def __init__(self, payouts: Mapping[Rank, int], ticket_price: int) -> None:
        self._payouts = dict(payouts)
        self._ticket_price = ticket_price

    def calculate(self, tickets: Sequence[Ticket], answer: Answer) -> RankResult:
        if not tickets:
            raise NoTicketsPurchasedError()

        counts: Dict[Rank, int] = {rank: 0 for rank in Rank.ranked()}
        unranked = 0
        for ticket in tickets:
            rank = classify(ticket, answer)
            if rank is Rank.NONE:
                unranked += 1
            else:
                counts[rank] += 1

        total_payout = sum(self._payouts[rank] * count for rank, count in counts.items())
        total_spent = len(tickets) * self._ticket_price

        return RankResult(
            counts=counts,
            unranked=unranked,
            ticket_count=len(tickets),
            total_payout=total_payout,
            total_spent=total_spent,
            benefit_rate=benefit_rate(total_payout, total_spent),
            payouts=dict(self._payouts),
        )
