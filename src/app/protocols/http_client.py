"""Protocolo do cliente HTTP de saída usado pelos casos de uso."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.infra.http import OutboundResult


class RelayHttpClientProtocol(Protocol):
    """Contrato mínimo: uma chamada, timeout explícito, resultado classificado."""

    async def call(
        self,
        url: str,
        method: str = "POST",
        *,
        headers: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        timeout_seconds: float,
        upstream: str = "upstream",
    ) -> OutboundResult: ...
