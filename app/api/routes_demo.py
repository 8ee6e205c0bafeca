"""Deployment check endpoint."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(prefix="/api", tags=["demo"])

WORKING_PAGE = "<h1>API IS WORKING FINE</h1>"


@router.get("/get", response_class=HTMLResponse)
async def get_status():
    """Static page confirming the deployed process is reachable."""
    return WORKING_PAGE
