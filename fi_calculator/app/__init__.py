"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from fi_calculator.app.api.routes import api_bp
from fi_calculator.app.config import Settings, load_settings
from fi_calculator.app.log_setup import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["FI_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("app created env=%s origins=%s", settings.env, ",".join(settings.cors_origins))
    return app
