"""Infra HTTP: chamada de saída com timeout e normalização de resposta."""

from app.infra.http.client import (
    DEFAULT_HEADERS,
    HttpClientConfig,
    HttpRelayClient,
    OutboundResult,
)
from app.infra.http.response import (
    NormalizedBody,
    body_snippet,
    is_structured,
    normalize_response,
    read_text,
)

__all__ = [
    "DEFAULT_HEADERS",
    "HttpClientConfig",
    "HttpRelayClient",
    "NormalizedBody",
    "OutboundResult",
    "body_snippet",
    "is_structured",
    "normalize_response",
    "read_text",
]
