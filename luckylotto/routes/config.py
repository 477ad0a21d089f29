from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ..config import LottoSettings
from ..schemas import ConfigResponse

bp = Blueprint("config", __name__)


@bp.get("/config")
def get_config():
    settings: LottoSettings = current_app.extensions["luckylotto.settings"].lotto
    response = ConfigResponse(
        ticket_price=settings.ticket_price,
        ticket_size=settings.ticket_size,
        max_number=settings.max_number,
        max_tickets_per_purchase=settings.max_tickets_per_purchase,
        payouts={rank.label: amount for rank, amount in settings.payouts.items()},
    )
    return jsonify(response.model_dump())
