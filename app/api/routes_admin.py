"""Admin API endpoints for process supervision."""

from fastapi import APIRouter, Request

router = APIRouter(tags=["admin"])


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    return {"status": "healthy", "service": request.app.title}
