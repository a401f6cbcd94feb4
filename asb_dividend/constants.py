"""Domain constants for the ASB dividend calculator."""

MONTHS_PER_YEAR: int = 12

# Balance above this ceiling earns dividend but no bonus.
BONUS_ELIGIBLE_BALANCE_CAP: float = 30000.0

REPORT_DECIMALS: int = 2

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "ms")
DEFAULT_LANGUAGE: str = "ms"
LANGUAGE_COOKIE: str = "lang"
