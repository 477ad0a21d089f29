from __future__ import annotations

from typing import Sequence

from flask import Blueprint, current_app, jsonify, request, session

from ..errors import NoTicketsPurchasedError
from ..messages import purchased_label
from ..schemas import AnswerRequest, PurchaseRequest, PurchaseResponse, ResultResponse, TicketListResponse
from ..services.engine import LottoEngine
from ..services.rounds import RoundRegistry
from ..types import RankResult, Ticket

bp = Blueprint("lotto", __name__)

ROUND_KEY = "round_id"


def _registry() -> RoundRegistry:
    return current_app.extensions["luckylotto.rounds"]


def current_engine() -> LottoEngine:
    round_id, engine = _registry().get_or_create(session.get(ROUND_KEY))
    session[ROUND_KEY] = round_id
    return engine


def _as_lists(tickets: Sequence[Ticket]):
    return [ticket.as_list() for ticket in tickets]


def _result_payload(engine: LottoEngine, result: RankResult) -> dict:
    payload = result.to_dict()
    payload["answer"] = engine.answer.to_dict() if engine.answer else None
    return ResultResponse(**payload).model_dump()


@bp.get("/tickets")
def list_tickets():
    engine = current_engine()
    response = TicketListResponse(
        tickets=_as_lists(engine.tickets),
        purchased_count=engine.purchased_count,
        label=purchased_label(engine.purchased_count),
    )
    return jsonify(response.model_dump())


@bp.post("/purchase")
def purchase():
    payload = request.get_json(force=True, silent=True)
    data = PurchaseRequest.model_validate(payload)

    engine = current_engine()
    purchased = engine.purchase(data.amount)
    current_app.logger.info("Round purchase of %s tickets", len(purchased))

    response = PurchaseResponse(
        purchased=_as_lists(purchased),
        tickets=_as_lists(engine.tickets),
        purchased_count=engine.purchased_count,
        label=purchased_label(engine.purchased_count),
    )
    return jsonify(response.model_dump()), 201


@bp.post("/answer")
def submit_answer():
    payload = request.get_json(force=True, silent=True)
    data = AnswerRequest.model_validate(payload)

    engine = current_engine()
    if engine.purchased_count == 0:
        raise NoTicketsPurchasedError()
    engine.submit_answer(data.numbers, data.bonus)
    result = engine.calc_benefit()
    return jsonify(_result_payload(engine, result))


@bp.get("/result")
def get_result():
    engine = current_engine()
    result = engine.calc_benefit()
    return jsonify(_result_payload(engine, result))


@bp.post("/reset")
def reset():
    engine = current_engine()
    engine.reset()
    return jsonify({"purchased_count": 0, "tickets": []})
