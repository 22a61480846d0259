"""Use case do relay "order-created" para o Make.

O segredo compartilhado vai em X-Relay-Token; sem ele a chamada segue
mesmo assim e o filtro do cenário no Make decide.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id
from utils.errors import (
    ConfigurationError,
    TransportError,
    UpstreamHTTPError,
    UpstreamTimeoutError,
)

if TYPE_CHECKING:
    from app.domain.order import OrderCreated
    from app.infra.http import OutboundResult
    from app.protocols.http_client import RelayHttpClientProtocol
    from config.settings import RelaySettings

logger = logging.getLogger(__name__)

RELAY_TOKEN_HEADER = "X-Relay-Token"


class RelayOrderCreatedUseCase:
    """Encaminha o order_id ao webhook do Make."""

    def __init__(self, http_client: RelayHttpClientProtocol, settings: RelaySettings) -> None:
        self._http = http_client
        self._settings = settings

    def resolve_relay_token(self, header_token: str | None) -> str:
        """Token do header da requisição, senão o configurado no ambiente."""
        return (header_token or self._settings.relay_token or "").strip()

    async def execute(self, order: OrderCreated, header_token: str | None = None) -> Any:
        """Executa o relay e devolve a resposta do Make.

        Returns:
            Corpo JSON do Make, ou `{"raw": texto}` para respostas não-JSON.

        Raises:
            ConfigurationError: URL do Make ausente.
            UpstreamTimeoutError: Make não respondeu no prazo.
            TransportError: Make inacessível.
            UpstreamHTTPError: status fora de 2xx (detail traz `payload`).
        """
        url = self._settings.make_order_created_url
        if not url:
            raise ConfigurationError("MAKE_ORDER_CREATED_WEBHOOK_URL is not set")

        relay_token = self.resolve_relay_token(header_token)
        if not relay_token:
            logger.warning(
                "order_relay_token_missing",
                extra={
                    "reason": "no X-Relay-Token header or WEBHOOK_RELAY_TOKEN; Make filter may reject",
                    "correlation_id": get_correlation_id(),
                },
            )

        try:
            result = await self._http.call(
                url,
                "POST",
                headers={RELAY_TOKEN_HEADER: relay_token},
                json={"order_id": order.order_id},
                timeout_seconds=self._settings.order_timeout_seconds,
                upstream="make",
            )
        except UpstreamTimeoutError as exc:
            logger.error("order_relay_timeout", extra={"correlation_id": get_correlation_id()})
            raise UpstreamTimeoutError("Make webhook timed out") from exc
        except TransportError as exc:
            logger.error(
                "order_relay_unreachable",
                extra={"error": exc.message, "correlation_id": get_correlation_id()},
            )
            raise TransportError(f"Make webhook fetch failed: {exc.message}") from exc

        payload = make_response_payload(result)
        if not result.succeeded:
            raise UpstreamHTTPError(
                f"Make webhook responded with {result.status_code}",
                upstream_status=result.status_code,
                detail={"payload": payload},
            )

        logger.info(
            "order_relayed",
            extra={"status_code": result.status_code, "correlation_id": get_correlation_id()},
        )
        return payload


def make_response_payload(result: OutboundResult) -> Any:
    """Corpo do Make parseado como JSON; texto bruto em `raw` quando não parseia.

    O módulo "Webhook response" do Make manda JSON como text/plain por
    padrão, então o parse não depende do content-type.
    """
    if result.structured and result.body is not None:
        return result.body
    text = result.raw_text
    if text is None:
        text = result.body if isinstance(result.body, str) else ""
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}
