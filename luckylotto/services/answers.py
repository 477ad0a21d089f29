from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Set

from ..errors import AnswerRejectedError, DuplicateNumberError, OutOfRangeError
from ..types import TICKET_SIZE, Answer


@dataclass(frozen=True)
class Verdict:
    answer: Optional[Answer] = None
    reason: Optional[AnswerRejectedError] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    def unwrap(self) -> Answer:
        if self.reason is not None:
            raise self.reason
        return self.answer


class AnswerValidator:
    """Checks a winning combination and reports the first problem found.

    The bonus number is range-checked first. Base numbers are then checked in
    input order, each for range and then for repetition against the numbers
    seen so far (the bonus included).
    """

    def __init__(self, max_number: int) -> None:
        self._max_number = max_number

    def _in_range(self, number: int) -> bool:
        return 1 <= number <= self._max_number

    def validate(self, base_numbers: Sequence[int], bonus_number: int) -> Verdict:
        if len(base_numbers) != TICKET_SIZE:
            raise ValueError(f"Expected {TICKET_SIZE} base numbers, got {len(base_numbers)}")
        for number in (*base_numbers, bonus_number):
            if isinstance(number, bool) or not isinstance(number, int):
                raise TypeError(f"Winning numbers must be integers, got {number!r}")

        if not self._in_range(bonus_number):
            return Verdict(reason=OutOfRangeError(bonus_number, self._max_number))

        seen: Set[int] = {bonus_number}
        for number in base_numbers:
            if not self._in_range(number):
                return Verdict(reason=OutOfRangeError(number, self._max_number))
            if number in seen:
                return Verdict(reason=DuplicateNumberError(number))
            seen.add(number)

        return Verdict(answer=Answer(base=tuple(sorted(base_numbers)), bonus=bonus_number))
