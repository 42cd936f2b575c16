# =============================================================================
# app/routers/root.py - Root Endpoint
# =============================================================================
# Public greeting. No token required.
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello World!"
