"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if no Gemini credential resolves (readiness)
    - Neither probe calls the remote model
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from kutubi.api.dependencies import get_gemini_client
from kutubi.infrastructure.gemini_client import ResilientGeminiClient

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "kutubi-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    """Readiness probe — a credential must resolve from settings or the store."""
    if not client.handles.has_credential():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "credential_missing",
            },
        )
    return {"status": "ready", "checks": {"credential": "configured"}}
