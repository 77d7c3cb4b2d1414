"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Callable, Optional, Union

from fastapi import APIRouter, Depends

from app.api.dependencies import get_translation_wrapper
from app.core.config import settings
from app.models.schemas import HealthCheckResponse
from app.translation.translation_wrapper import SUPPORTED_PROVIDERS, TranslationServiceWrapper

router = APIRouter()


HealthEvaluator = Callable[[], Union[bool, tuple[bool, Optional[str]]]]


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Health check with details",
    description="Get the health status with a configuration check for each provider",
)
async def health_check(
    wrapper: TranslationServiceWrapper = Depends(get_translation_wrapper),
):
    """Health check endpoint with detailed checks."""

    checks: dict = {}
    overall_status = "healthy"

    def add_check(name: str, evaluator: HealthEvaluator) -> None:
        nonlocal overall_status
        try:
            result = evaluator()
            detail: Optional[str] = None
            if isinstance(result, tuple):
                healthy, detail = result
            else:
                healthy = result
            status = "healthy" if healthy else "unhealthy"
        except Exception as exc:
            status = "error"
            detail = str(exc)

        if status != "healthy":
            overall_status = "unhealthy"

        entry = {"status": status}
        if detail:
            entry["detail"] = detail
        checks[name] = entry

    def provider_check(provider_id: str) -> HealthEvaluator:
        def evaluate():
            provider = wrapper.get_service(provider_id).provider
            return True, provider.model

        return evaluate

    for provider_id in SUPPORTED_PROVIDERS:
        add_check(provider_id, provider_check(provider_id))

    checks["service_info"] = {
        "status": "informational",
        "name": settings.app_name,
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    return HealthCheckResponse(
        status=overall_status,
        checks=checks,
    )
