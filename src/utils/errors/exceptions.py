"""Taxonomia de erros do relay.

Cada erro carrega `kind`, status HTTP padrão, mensagem legível e
`detail` opcional com campos extras da resposta da rota.
"""

from __future__ import annotations

from typing import Any


class RelayError(RuntimeError):
    """Base para falhas que viram resposta `{ok: false, error}`."""

    kind: str = "relay_error"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message or self.kind
        self.detail = dict(detail or {})
        if status_code is not None:
            self.status_code = status_code


class ValidationError(RelayError):
    """Entrada ausente ou malformada; rejeitada antes de qualquer chamada."""

    kind = "validation"
    status_code = 400


class ConfigurationError(RelayError):
    """Endpoint ou segredo obrigatório não configurado."""

    kind = "configuration"
    status_code = 500


class TransportError(RelayError):
    """Upstream inacessível (DNS, conexão recusada, TLS)."""

    kind = "transport"
    status_code = 502


class UpstreamTimeoutError(RelayError):
    """Upstream excedeu o timeout da chamada."""

    kind = "timeout"
    status_code = 504


class UpstreamHTTPError(RelayError):
    """Upstream respondeu com status fora de 2xx."""

    kind = "upstream_http"
    status_code = 502

    def __init__(
        self,
        message: str,
        *,
        upstream_status: int,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, detail=detail)
        self.upstream_status = upstream_status


class UpstreamLogicalError(RelayError):
    """Upstream respondeu 2xx mas o corpo declara falha (`ok: false`)."""

    kind = "upstream_logical"
    status_code = 502


class SignatureError(RelayError):
    """Assinatura de webhook ausente ou inválida."""

    kind = "signature"
    status_code = 400
