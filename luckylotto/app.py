from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from .config import AppSettings, load_settings
from .errors import LottoError
from .routes.config import bp as config_bp
from .routes.health import bp as health_bp
from .routes.lotto import bp as lotto_bp
from .messages import user_message
from .services.engine import LottoEngine
from .services.rounds import RoundRegistry


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.flask.secret_key
    app.config["DEBUG"] = settings.flask.debug

    lotto_settings = settings.lotto
    app.extensions["luckylotto.settings"] = settings
    app.extensions["luckylotto.rounds"] = RoundRegistry(
        lambda: LottoEngine(lotto_settings),
        max_rounds=lotto_settings.max_rounds,
    )

    app.register_blueprint(health_bp)
    app.register_blueprint(config_bp)
    app.register_blueprint(lotto_bp, url_prefix="/lotto")

    @app.errorhandler(LottoError)
    def handle_lotto_error(exc: LottoError):
        app.logger.info("Rejected request: %s", exc)
        return jsonify({"error": exc.code, "message": user_message(exc), "detail": str(exc)}), 400

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        details = exc.errors(include_url=False, include_context=False)
        return jsonify({"error": "invalid_request", "details": details}), 400

    @app.errorhandler(Exception)
    def handle_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"error": str(exc)}), 500

    return app
