"""
Concord Lens API
================
Flask endpoints exposing the lens recommender to the chat frontend.

The server keeps no session state: the client sends its session (and
telemetry) with every request and gets the advanced version back.

Endpoints:
    POST /lens/recommend            - Recommend lenses for one message
    GET  /lens/catalog              - Catalog version and entries
    POST /lens/session/<action>     - Mark a lens opened or dismissed
    POST /lens/telemetry/<event>    - Append a telemetry event
    GET  /health                    - Health check
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request

from . import __version__
from .lens_recommender import (
    LensRecommender,
    advance_session,
    mark_dismissed,
    mark_opened,
    record_dismissal,
    record_lens_opened,
    record_recommendation_shown,
    record_time_to_action,
    summarize_telemetry,
)
from .lens_recommender.integration import (
    get_default_recommender,
    result_to_dict,
    session_from_dict,
    session_to_dict,
)
from .lens_recommender.telemetry import SessionTelemetry

logger = logging.getLogger("concord.api")

TELEMETRY_EVENTS = ('shown', 'opened', 'dismissed', 'time_to_action')
SESSION_ACTIONS = ('opened', 'dismissed')


def _lens_id(data):
    """Required string 'lens_id' of a request body."""
    lens_id = data['lens_id']
    if not isinstance(lens_id, str):
        raise ValueError("'lens_id' must be a string")
    return lens_id


def create_app(recommender: Optional[LensRecommender] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        recommender: Recommender to serve (default singleton if None)
    """
    app = Flask(__name__)
    app.config['LENS_RECOMMENDER'] = recommender or get_default_recommender()

    # ===== Recommendation Endpoints =====

    @app.route('/lens/recommend', methods=['POST'])
    def lens_recommend():
        """Recommend lenses for the latest user message."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        message = data.get('message')
        if not isinstance(message, str):
            return jsonify({"error": "'message' must be a string"}), 400

        try:
            session = session_from_dict(data.get('session'))
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        try:
            result = app.config['LENS_RECOMMENDER'].recommend(message, session)
        except Exception as e:
            logger.exception(f"[LENS] Recommendation failed: {e}")
            return jsonify({"error": "Recommendation failed"}), 500

        response = result_to_dict(result)
        response['next_session'] = session_to_dict(advance_session(session, message, result))
        return jsonify(response)

    @app.route('/lens/catalog', methods=['GET'])
    def lens_catalog():
        """List the catalog the recommender scores against."""
        catalog = app.config['LENS_RECOMMENDER'].catalog
        return jsonify({
            "version": catalog.version,
            "lenses": [
                {
                    "lens_id": entry.lens_id,
                    "name": entry.name,
                    "categories": list(entry.categories),
                    "domain_tags": list(entry.domain_tags),
                    "intent_tags": [i.value for i in entry.intent_tags],
                    "entry_cost": entry.entry_cost.value,
                    "supported_actions": list(entry.supported_actions),
                    "required_scope": entry.required_scope.value,
                }
                for entry in catalog
            ],
        })

    @app.route('/lens/session/<action>', methods=['POST'])
    def lens_session(action):
        """Record that the user opened or dismissed a recommended lens."""
        if action not in SESSION_ACTIONS:
            return jsonify({"error": f"Unknown session action: {action}"}), 400

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            session = session_from_dict(data.get('session'))
            lens_id = _lens_id(data)
            if action == 'opened':
                session = mark_opened(session, lens_id)
            else:
                session = mark_dismissed(session, lens_id, int(data['turn_index']))
        except KeyError as e:
            return jsonify({"error": f"Missing field: {e.args[0]}"}), 400
        except (TypeError, ValueError) as e:
            return jsonify({"error": str(e)}), 400

        return jsonify({"session": session_to_dict(session)})

    # ===== Telemetry Endpoints =====

    @app.route('/lens/telemetry/<event>', methods=['POST'])
    def lens_telemetry(event):
        """Append one event to the client's telemetry and hand it back."""
        if event not in TELEMETRY_EVENTS:
            return jsonify({"error": f"Unknown telemetry event: {event}"}), 400

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            telemetry = SessionTelemetry.from_dict(data.get('telemetry'))

            if event == 'shown':
                record_recommendation_shown(telemetry)
            elif event == 'time_to_action':
                record_time_to_action(telemetry, float(data['ms']))
            else:
                lens_id = _lens_id(data)
                turn_index = int(data['turn_index'])
                if event == 'opened':
                    record_lens_opened(telemetry, lens_id, turn_index)
                else:
                    record_dismissal(telemetry, lens_id, turn_index)
        except KeyError as e:
            return jsonify({"error": f"Missing field: {e.args[0]}"}), 400
        except (TypeError, ValueError) as e:
            return jsonify({"error": str(e)}), 400

        return jsonify({
            "telemetry": telemetry.to_dict(),
            "summary": summarize_telemetry(telemetry),
        })

    @app.route('/health', methods=['GET'])
    def health():
        """Health check."""
        catalog = app.config['LENS_RECOMMENDER'].catalog
        return jsonify({
            "status": "ok",
            "version": __version__,
            "catalog_version": catalog.version,
            "lenses": len(catalog),
        })

    return app
