"""
Health check endpoint.

Unauthenticated so load balancers and the runner can check it.
"""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health(request: Request) -> dict:
    settings = request.app.state.settings
    return {"status": "ok", "version": settings.api_version}
