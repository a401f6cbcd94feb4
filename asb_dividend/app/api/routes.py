"""HTTP routes for the Flask API."""

import json
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from asb_dividend.config import Settings
from asb_dividend.constants import LANGUAGE_COOKIE
from asb_dividend.core.dividend import simulate_dividends, wealth_series
from asb_dividend.core.health import get_health_status
from asb_dividend.core.i18n import (
    available_languages,
    is_supported,
    resolve_language,
    translations_for,
)
from asb_dividend.schemas.dividend import (
    ChartData,
    ChartDataset,
    DividendRequest,
    DividendResponse,
    LanguagePreference,
    TranslationsResponse,
)

api_bp = Blueprint("api", __name__)

LANGUAGE_COOKIE_MAX_AGE = 365 * 24 * 60 * 60


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _preferred_language(*explicit: Any) -> str:
    return resolve_language(
        *explicit,
        request.args.get("lang"),
        request.cookies.get(LANGUAGE_COOKIE),
        default=_settings().DEFAULT_LANGUAGE,
    )


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning(f"Rejected payload on {request.path}: {exc.error_count()} error(s)")
    return jsonify({"detail": json.loads(exc.json())}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(get_health_status(_settings()).model_dump())


@api_bp.post("/calc/dividend")
def dividend() -> Any:
    """Year-by-year dividend + bonus projection, with its chart series."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = DividendRequest.model_validate(
        raw_payload,
        context={"max_years": _settings().MAX_INVESTMENT_PERIOD_YEARS},
    )
    language = _preferred_language(payload.language)
    strings = translations_for(language)

    inputs = payload.to_simulation_input()
    results = simulate_dividends(inputs)
    labels, values = wealth_series(results)
    logger.info(f"Dividend projection: {inputs.investmentPeriodYears} year(s) -> {len(results)} row(s)")

    response = DividendResponse(
        language=language,
        title=strings["title"],
        inputs=inputs,
        results=results,
        chart=ChartData(
            labels=labels,
            datasets=[ChartDataset(label=strings["total_wealth"], data=values)],
        ),
        message=None if results else strings["no_results"],
    )
    return jsonify(response.model_dump())


@api_bp.get("/i18n")
def current_translations() -> Any:
    """Strings for the caller's preferred language."""
    language = _preferred_language()
    response = TranslationsResponse(language=language, strings=translations_for(language))
    return jsonify({**response.model_dump(), "available": list(available_languages())})


@api_bp.get("/i18n/<lang>")
def translations(lang: str) -> Any:
    if not is_supported(lang):
        return jsonify({"detail": f"unsupported language: {lang}"}), HTTPStatus.NOT_FOUND
    response = TranslationsResponse(language=lang, strings=translations_for(lang))
    return jsonify(response.model_dump())


@api_bp.put("/preferences/language")
def set_language() -> Any:
    """Remember the caller's language in a cookie."""
    preference = LanguagePreference.model_validate(request.get_json(force=True, silent=False))
    resp = jsonify(preference.model_dump())
    resp.set_cookie(
        LANGUAGE_COOKIE,
        preference.language,
        max_age=LANGUAGE_COOKIE_MAX_AGE,
        samesite="Lax",
    )
    return resp
