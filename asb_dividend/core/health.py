"""Health-check payload for the API."""

from asb_dividend.config import Settings
from asb_dividend.schemas.health import HealthResponse


def get_health_status(settings: Settings) -> HealthResponse:
    """Static liveness report naming the running service."""
    return HealthResponse(status="ok", service=settings.APP_NAME, version=settings.VERSION)
