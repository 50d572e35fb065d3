"""Health check endpoint"""
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from formgateway.models.forms import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Liveness plus the form endpoints this instance serves"""
    handlers = request.app.state.form_handlers
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service="formgateway",
        environment=request.app.state.settings.environment,
        endpoints=[f"/api{h.descriptor.path}" for h in handlers.values()],
    )
