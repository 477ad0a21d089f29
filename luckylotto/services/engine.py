from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ..config import LottoSettings
from ..errors import AnswerAlreadySubmittedError, AnswerNotSubmittedError, NoTicketsPurchasedError
from ..types import Answer, RankResult, RoundState, Ticket
from .answers import AnswerValidator, Verdict
from .benefit import BenefitCalculator
from .random_source import RandomNumberSource
from .tickets import TicketBook, TicketGenerator


class LottoEngine:
    """One lottery round: the ticket book, the winning answer and the results.

    Engines share no mutable state; create one per round or session.
    """

    def __init__(
        self,
        settings: LottoSettings,
        source: Optional[RandomNumberSource] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings
        self._logger = logger or logging.getLogger("luckylotto.engine")
        self._book = TicketBook(
            TicketGenerator(settings.max_number, source),
            ticket_price=settings.ticket_price,
            max_tickets_per_purchase=settings.max_tickets_per_purchase,
            logger=self._logger,
        )
        self._validator = AnswerValidator(settings.max_number)
        self._calculator = BenefitCalculator(settings.payouts, settings.ticket_price)
        self._answer: Optional[Answer] = None

    @property
    def settings(self) -> LottoSettings:
        return self._settings

    @property
    def tickets(self) -> Tuple[Ticket, ...]:
        return self._book.tickets

    @property
    def purchased_count(self) -> int:
        return len(self._book)

    @property
    def answer(self) -> Optional[Answer]:
        return self._answer

    @property
    def state(self) -> RoundState:
        return RoundState.NO_ANSWER if self._answer is None else RoundState.ANSWER_ACCEPTED

    def purchase(self, amount) -> Tuple[Ticket, ...]:
        return self._book.purchase(amount)

    def validate(self, base_numbers: Sequence[int], bonus_number: int) -> Verdict:
        return self._validator.validate(base_numbers, bonus_number)

    def submit_answer(self, base_numbers: Sequence[int], bonus_number: int) -> Answer:
        if self._answer is not None:
            raise AnswerAlreadySubmittedError()
        verdict = self.validate(base_numbers, bonus_number)
        if not verdict.accepted:
            self._logger.info("Rejected winning numbers: %s", verdict.reason)
        answer = verdict.unwrap()
        self._answer = answer
        self._logger.info("Accepted winning numbers %s + bonus %s", list(answer.base), answer.bonus)
        return answer

    def calc_benefit(self, answer: Optional[Answer] = None) -> RankResult:
        tickets = self._book.tickets
        if not tickets:
            raise NoTicketsPurchasedError()
        if answer is None:
            answer = self._answer
        if answer is None:
            raise AnswerNotSubmittedError()
        result = self._calculator.calculate(tickets, answer)
        self._logger.debug(
            "Checked %s tickets: payout=%s rate=%s%%",
            result.ticket_count,
            result.total_payout,
            result.benefit_rate,
        )
        return result

    def reset(self) -> None:
        self._book.clear()
        self._answer = None
        self._logger.info("Round reset")
