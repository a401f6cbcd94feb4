"""Calculator strings for the supported languages."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from asb_dividend.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "ASB Dividend Calculator - Calculate Your ASB Investment Growth",
        "calculate": "Calculate",
        "results_heading": "Total Wealth Over the Years",
        "year": "Year",
        "total_wealth": "Total Wealth (RM)",
        "no_results": "No results yet. Enter a positive balance and investment period.",
    },
    "ms": {
        "title": "Kalkulator Dividen ASB - Kira Pertumbuhan Pelaburan ASB Anda",
        "calculate": "Kira",
        "results_heading": "Jumlah Kekayaan Mengikut Tahun",
        "year": "Tahun",
        "total_wealth": "Jumlah Kekayaan (RM)",
        "no_results": "Tiada keputusan lagi. Masukkan baki dan tempoh pelaburan yang positif.",
    },
}


def is_supported(language: Optional[str]) -> bool:
    return language in SUPPORTED_LANGUAGES


def resolve_language(*candidates: Optional[str], default: str = DEFAULT_LANGUAGE) -> str:
    """First supported candidate (e.g. body, query, cookie), else ``default``."""
    return next((c for c in candidates if is_supported(c)), default)


def translations_for(language: str) -> Dict[str, str]:
    if not is_supported(language):
        raise KeyError(f"unsupported language: {language}")
    return dict(TRANSLATIONS[language])


def available_languages() -> Iterable[str]:
    return SUPPORTED_LANGUAGES
