# src/jungle_gem/server/app.py

"""
Companion HTTP server.

Two stateless routes:
- GET  /api/health -> {"ok": true}
- POST /api/echo   -> {"received": <json body>}
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from ..config import get_settings

logger = logging.getLogger(__name__)


def create_app(settings=None) -> Flask:
    """Flask application factory; settings default to get_settings()."""
    if settings is None:
        settings = get_settings()

    app = Flask(__name__)
    origins = list(getattr(settings, "cors_origins", None) or ["*"])
    CORS(app, origins=origins)

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"ok": True})

    @app.route("/api/echo", methods=["POST"])
    def echo():
        # Non-JSON or empty requests echo an empty object; malformed JSON is a 400 from Flask.
        has_body = bool(request.get_data(cache=True))
        body = request.get_json() if request.is_json and has_body else {}
        logger.debug("Echo request content_type=%s", request.content_type)
        return jsonify({"received": body})

    return app
