"""Endpoint de health check.

Reporta apenas flags de configuração derivadas das settings; nenhum
upstream é chamado.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import get_drive_settings, get_relay_settings, get_stripe_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    timestamp: str
    stripe_configured: bool
    drive_configured: bool
    make_configured: bool
    webhook_token_configured: bool
    apps_script_configured: bool


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness + flags de configuração por upstream."""
    relay = get_relay_settings()
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC).isoformat(),
        stripe_configured=get_stripe_settings().configured,
        drive_configured=get_drive_settings().configured,
        make_configured=relay.make_configured,
        webhook_token_configured=relay.relay_token_configured,
        apps_script_configured=relay.apps_script_configured,
    )
