from __future__ import annotations


class LottoError(Exception):
    """Base class for recoverable errors raised by the lottery engine."""

    code = "lotto_error"


class RangeError(LottoError):
    code = "range_error"


class InvalidAmountError(LottoError):
    code = "invalid_amount"

    def __init__(self, amount, ticket_price: int) -> None:
        super().__init__(f"Amount {amount!r} is not a positive multiple of {ticket_price}.")
        self.amount = amount
        self.ticket_price = ticket_price


class PurchaseLimitExceededError(LottoError):
    code = "purchase_limit_exceeded"

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(f"Requested {requested} tickets; at most {limit} per purchase.")
        self.requested = requested
        self.limit = limit


class AnswerRejectedError(LottoError):
    """Raised for a winning combination that cannot be accepted."""

    code = "answer_rejected"

    def __init__(self, number: int, message: str) -> None:
        super().__init__(message)
        self.number = number


class OutOfRangeError(AnswerRejectedError):
    code = "out_of_range"

    def __init__(self, number: int, max_number: int) -> None:
        super().__init__(number, f"Number {number} is outside 1..{max_number}.")
        self.max_number = max_number


class DuplicateNumberError(AnswerRejectedError):
    code = "duplicate_number"

    def __init__(self, number: int) -> None:
        super().__init__(number, f"Number {number} is entered more than once.")


class NoTicketsPurchasedError(LottoError):
    code = "no_tickets_purchased"

    def __init__(self) -> None:
        super().__init__("No tickets have been purchased in this round.")


class AnswerNotSubmittedError(LottoError):
    code = "answer_not_submitted"

    def __init__(self) -> None:
        super().__init__("No winning numbers have been submitted in this round.")


class AnswerAlreadySubmittedError(LottoError):
    code = "answer_already_submitted"

    def __init__(self) -> None:
        super().__init__("Winning numbers were already submitted; reset to start a new round.")
