"""Cliente HTTP de saída para os relays.

Uma chamada por invocação, com timeout por chamada e sem retry: uma
falha de upstream é terminal para a requisição e o frontend decide se
tenta de novo.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from app.infra.http.response import normalize_response, read_text
from app.observability import record_latency, record_upstream_outcome
from utils.errors import ConfigurationError, TransportError, UpstreamTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    default_headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    verify_ssl: bool = True


@dataclass(frozen=True, slots=True)
class OutboundResult:
    """Resultado classificado de uma chamada a upstream.

    Attributes:
        succeeded: Status 2xx
        structured: Corpo declarado como JSON
        body: Corpo normalizado (objeto, texto ou None)
        status_code: Status HTTP bruto
        raw_text: Corpo como texto, qualquer que seja o content-type
    """

    succeeded: bool
    structured: bool
    body: Any
    status_code: int
    raw_text: str | None = None


class HttpRelayClient:
    """Executa uma chamada HTTP com timeout e classifica a resposta.

    Args:
        config: Headers padrão e verificação TLS.
        transport: Transport httpx alternativo (testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def call(
        self,
        url: str,
        method: str = "POST",
        *,
        headers: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        timeout_seconds: float,
        upstream: str = "upstream",
    ) -> OutboundResult:
        """Executa a chamada e devolve o resultado classificado.

        Args:
            url: Endpoint configurado do upstream.
            method: Método HTTP.
            headers: Headers extras (sobrescrevem os padrão).
            json: Corpo JSON.
            timeout_seconds: Limite total da chamada; ao expirar a
                requisição em andamento é cancelada.
            upstream: Nome do upstream para logs/métricas.

        Raises:
            ConfigurationError: URL vazia (nenhuma chamada é feita).
            UpstreamTimeoutError: Limite de tempo excedido.
            TransportError: Falha de rede (DNS, conexão, TLS).
        """
        if not url:
            raise ConfigurationError(f"{upstream} URL not configured")

        merged_headers = {**self._config.default_headers, **(headers or {})}
        started_at = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await asyncio.wait_for(
                    client.request(
                        method,
                        url,
                        json=json,
                        headers=merged_headers,
                        timeout=timeout_seconds,
                    ),
                    timeout=timeout_seconds,
                )
        except (TimeoutError, httpx.TimeoutException) as exc:
            record_upstream_outcome(upstream, "timeout")
            raise UpstreamTimeoutError(
                f"{upstream} timed out after {timeout_seconds:g}s"
            ) from exc
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"{upstream} URL is invalid") from exc
        except httpx.TransportError as exc:
            record_upstream_outcome(upstream, "transport_error")
            logger.warning(
                "outbound_call_transport_error",
                extra={"upstream": upstream, "error_type": type(exc).__name__},
            )
            raise TransportError(str(exc) or type(exc).__name__) from exc
        finally:
            record_latency("http_relay", method, (time.perf_counter() - started_at) * 1000)

        normalized = normalize_response(response)
        succeeded = response.is_success
        record_upstream_outcome(
            upstream,
            "ok" if succeeded else "http_error",
            status_code=response.status_code,
        )
        return OutboundResult(
            succeeded=succeeded,
            structured=normalized.structured,
            body=normalized.body,
            status_code=response.status_code,
            raw_text=read_text(response),
        )
