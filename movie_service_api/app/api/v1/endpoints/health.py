"""Health check endpoint used by load balancers and orchestrators."""

import time

from fastapi import APIRouter, Depends

from movie_service_api.app.core.config import Settings, get_app_settings
from movie_service_api.app.schemas.common import HealthStatus

router = APIRouter()


@router.get("/mshealth", response_model=HealthStatus)
def health_check(settings: Settings = Depends(get_app_settings)) -> HealthStatus:
    return HealthStatus(status="healthy", version=settings.api_version, timestamp=int(time.time()))
