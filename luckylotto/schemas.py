from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .types import TICKET_SIZE


class PurchaseRequest(BaseModel):
    amount: int = Field(..., description="Money spent; must be a multiple of the ticket price.")


class AnswerRequest(BaseModel):
    numbers: List[int] = Field(..., description="6 winning numbers, any order.")
    bonus: int = Field(..., description="Bonus number, distinct from the winning numbers.")

    @field_validator("numbers")
    @classmethod
    def validate_count(cls, value: List[int]) -> List[int]:
        if len(value) != TICKET_SIZE:
            raise ValueError(f"Winning combinations require exactly {TICKET_SIZE} numbers.")
        return value


class TicketListResponse(BaseModel):
    tickets: List[List[int]]
    purchased_count: int
    label: str


class PurchaseResponse(TicketListResponse):
    purchased: List[List[int]]


class RankCount(BaseModel):
    rank: str
    match_count: int
    bonus: Optional[bool] = None
    prize: Optional[int] = None
    count: int


class ResultResponse(BaseModel):
    ranks: List[RankCount]
    unranked: int
    ticket_count: int
    total_payout: int
    total_spent: int
    benefit_rate: float
    answer: Optional[Dict[str, object]] = None


class ConfigResponse(BaseModel):
    ticket_price: int
    ticket_size: int
    max_number: int
    max_tickets_per_purchase: int
    payouts: Dict[str, int]
