"""Use case do relay de contato para o Apps Script.

Upstream com falha HTTP, corpo `ok: false` ou inacessível vira erro
502-equivalente com a mensagem do próprio upstream quando houver.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import NormalizedBody, body_snippet
from app.observability import get_correlation_id, record_upstream_outcome
from utils.errors import (
    ConfigurationError,
    TransportError,
    UpstreamHTTPError,
    UpstreamLogicalError,
    UpstreamTimeoutError,
)

if TYPE_CHECKING:
    from app.domain.contact import ContactMessage
    from app.infra.http import OutboundResult
    from app.protocols.http_client import RelayHttpClientProtocol
    from config.settings import RelaySettings

logger = logging.getLogger(__name__)

_UPSTREAM = "apps_script"


class RelayContactMessageUseCase:
    """Encaminha a mensagem de contato e interpreta a resposta."""

    def __init__(self, http_client: RelayHttpClientProtocol, settings: RelaySettings) -> None:
        self._http = http_client
        self._settings = settings

    async def execute(self, message: ContactMessage) -> None:
        """Envia o evento CONTACT_MESSAGE.

        Raises:
            ConfigurationError: APPS_SCRIPT_URL ausente.
            TransportError / UpstreamTimeoutError: upstream inacessível.
            UpstreamHTTPError: status fora de 2xx.
            UpstreamLogicalError: 2xx com `ok: false`.
        """
        url = self._settings.apps_script_url
        if not url:
            raise ConfigurationError("APPS_SCRIPT_URL not configured")

        try:
            result = await self._http.call(
                url,
                "POST",
                json=message.to_relay_event(),
                timeout_seconds=self._settings.contact_timeout_seconds,
                upstream=_UPSTREAM,
            )
        except UpstreamTimeoutError as exc:
            self._log_failure("contact_relay_timeout", exc)
            raise UpstreamTimeoutError("Upstream error (Apps Script timed out)") from exc
        except TransportError as exc:
            self._log_failure("contact_relay_unreachable", exc)
            raise TransportError("Upstream error (Apps Script unreachable)") from exc

        if not result.succeeded:
            snippet = body_snippet(NormalizedBody(result.structured, result.body))
            logger.error(
                "contact_relay_http_error",
                extra={
                    "status_code": result.status_code,
                    "structured": result.structured,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise UpstreamHTTPError(
                _http_error_message(result, snippet),
                upstream_status=result.status_code,
            )

        body = result.body
        if result.structured and isinstance(body, dict) and body.get("ok") is False:
            record_upstream_outcome(_UPSTREAM, "logical_error", status_code=result.status_code)
            logger.error(
                "contact_relay_logical_error",
                extra={"correlation_id": get_correlation_id()},
            )
            raise UpstreamLogicalError(str(body.get("error") or "Apps Script error"))

        logger.info("contact_relayed", extra={"correlation_id": get_correlation_id()})

    @staticmethod
    def _log_failure(event: str, exc: Exception) -> None:
        logger.error(
            event,
            extra={"error": str(exc), "correlation_id": get_correlation_id()},
        )


def _http_error_message(result: OutboundResult, snippet: str) -> str:
    if not result.structured:
        return (
            f"Apps Script returned non-JSON (HTTP {result.status_code}). "
            f"Snippet: {snippet}"
        )
    body: Any = result.body if isinstance(result.body, dict) else {}
    return str(body.get("error") or body.get("detail") or f"Apps Script HTTP {result.status_code}")
