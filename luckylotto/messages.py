from __future__ import annotations

from .errors import (
    AnswerAlreadySubmittedError,
    AnswerNotSubmittedError,
    DuplicateNumberError,
    InvalidAmountError,
    LottoError,
    NoTicketsPurchasedError,
    OutOfRangeError,
    PurchaseLimitExceededError,
)


def user_message(exc: LottoError) -> str:
    if isinstance(exc, InvalidAmountError):
        return f"{exc.ticket_price}원 단위로 입력해주세요."
    if isinstance(exc, PurchaseLimitExceededError):
        return f"한 번에 최대 {exc.limit}개까지 구매할 수 있습니다."
    if isinstance(exc, OutOfRangeError):
        return f"1부터 {exc.max_number} 사이의 숫자를 입력해주세요. (입력값: {exc.number})"
    if isinstance(exc, DuplicateNumberError):
        return f"중복된 숫자가 있습니다. (입력값: {exc.number})"
    if isinstance(exc, NoTicketsPurchasedError):
        return "구매한 로또가 없습니다."
    if isinstance(exc, AnswerNotSubmittedError):
        return "당첨 번호를 먼저 입력해주세요."
    if isinstance(exc, AnswerAlreadySubmittedError):
        return "이미 당첨 번호를 입력했습니다. 다시 시작해주세요."
    return str(exc)


def purchased_label(count: int) -> str:
    return f"총 {count}개를 구매하였습니다."
