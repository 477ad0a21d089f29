from __future__ import annotations

import logging
from numbers import Integral
from typing import List, Optional, Tuple

from ..errors import InvalidAmountError, PurchaseLimitExceededError
from ..types import TICKET_SIZE, Ticket
from .random_source import RandomNumberSource


class TicketGenerator:
    def __init__(self, max_number: int, source: Optional[RandomNumberSource] = None) -> None:
        self._max_number = max_number
        self._source = source or RandomNumberSource()

    def generate(self) -> Ticket:
        return Ticket.from_numbers(self._source.draw_unique(TICKET_SIZE, 1, self._max_number))


class TicketBook:
    """Tickets bought during the current round, in purchase order."""

    def __init__(
        self,
        generator: TicketGenerator,
        ticket_price: int,
        max_tickets_per_purchase: int,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._generator = generator
        self._ticket_price = ticket_price
        self._max_tickets = max_tickets_per_purchase
        self._tickets: List[Ticket] = []
        self._logger = logger or logging.getLogger("luckylotto.tickets")

    @property
    def ticket_price(self) -> int:
        return self._ticket_price

    @property
    def tickets(self) -> Tuple[Ticket, ...]:
        return tuple(self._tickets)

    @property
    def total_spent(self) -> int:
        return len(self._tickets) * self._ticket_price

    def __len__(self) -> int:
        return len(self._tickets)

    def ticket_count_for(self, amount) -> int:
        if isinstance(amount, bool) or not isinstance(amount, Integral):
            raise InvalidAmountError(amount, self._ticket_price)
        if amount <= 0 or amount % self._ticket_price != 0:
            raise InvalidAmountError(amount, self._ticket_price)
        return int(amount) // self._ticket_price

    def purchase(self, amount) -> Tuple[Ticket, ...]:
        count = self.ticket_count_for(amount)
        if count > self._max_tickets:
            raise PurchaseLimitExceededError(count, self._max_tickets)

        purchased = tuple(self._generator.generate() for _ in range(count))
        self._tickets.extend(purchased)
        self._logger.info(
            "Purchased %s tickets for %s; %s tickets in round", count, amount, len(self._tickets)
        )
        return purchased

    def clear(self) -> None:
        self._tickets.clear()
