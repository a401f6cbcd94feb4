"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS
from loguru import logger

from asb_dividend.app.api.routes import api_bp
from asb_dividend.config import Settings, get_settings
from asb_dividend.log_setup import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(f"{settings.APP_NAME} {settings.VERSION} ready (default language '{settings.DEFAULT_LANGUAGE}')")
    return app
