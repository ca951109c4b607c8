"""Flask JSON API serving fee quotes to the simulator front end."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from flask import Flask, jsonify, request

from . import __version__
from .config import SimulatorConfig, load_config
from .data_load import load_store
from .sepa import CHANNELS
from .settlement import default_settlement, settlement_options
from .simulator import parse_amount, quote
from .store import BankRuleStore

__all__ = ["create_app"]


def _amount(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str) and value.strip():
        return parse_amount(value)
    return None


def create_app(store: BankRuleStore | None = None, config: SimulatorConfig | None = None) -> Flask:
    """Build the API app; datasets load from ``config`` when no store is given."""
    config = config or load_config()
    if store is None:
        store = load_store(config.datasets)

    app = Flask(__name__)
    app.json.sort_keys = False

    @app.route("/api/status")
    def api_status():
        return jsonify({
            "status": "running",
            "version": __version__,
            "client_types": list(store.client_types),
        })

    @app.route("/api/banks")
    def api_banks():
        client_type = request.args.get("client_type", config.default_client_type)
        resident = request.args.get("resident", "true").lower() != "false"
        banks = [
            {
                "name": profile.name,
                "settlement_options": settlement_options(profile, resident),
                "default_settlement": default_settlement(profile, resident),
            }
            for profile in store.list_banks(client_type)
        ]
        return jsonify({"client_type": client_type, "banks": banks})

    @app.route("/api/quote", methods=["POST"])
    def api_quote():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        bank = data.get("bank")
        amount = _amount(data.get("amount"))
        if not isinstance(bank, str) or not bank:
            return jsonify({"error": "Field 'bank' is required"}), 400
        if amount is None:
            return jsonify({"error": "Field 'amount' must be a number"}), 400

        client_type = data.get("client_type", config.default_client_type)
        channel = data.get("channel", config.default_channel)
        settlement = data.get("settlement")
        resident = data.get("resident", True)
        first_of_day = data.get("first_of_day", True)
        if not isinstance(client_type, str):
            return jsonify({"error": "Field 'client_type' must be a string"}), 400
        if channel not in CHANNELS:
            return jsonify({"error": f"Field 'channel' must be one of {list(CHANNELS)}"}), 400
        if settlement is not None and not isinstance(settlement, str):
            return jsonify({"error": "Field 'settlement' must be a string"}), 400
        if not isinstance(resident, bool) or not isinstance(first_of_day, bool):
            return jsonify({"error": "Fields 'resident' and 'first_of_day' must be booleans"}), 400

        result = quote(
            store,
            amount,
            bank,
            client_type=client_type,
            resident=resident,
            channel=channel,
            first_of_day=first_of_day,
            settlement=settlement,
        )
        if result is None:
            return jsonify({"error": f"Bank not found: {bank}"}), 404
        logging.debug("Quote %s", result)
        return jsonify(result.to_dict())

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)
