from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from asb_dividend.app import create_app
from asb_dividend.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        LOG_LEVEL="WARNING",
        DEFAULT_LANGUAGE="ms",
        MAX_INVESTMENT_PERIOD_YEARS=100,
    )


@pytest.fixture()
def app(settings: Settings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
