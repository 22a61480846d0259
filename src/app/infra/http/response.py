"""Normalização de respostas de upstream.

Upstreams de automação (Apps Script, Make) devolvem páginas HTML ou
texto puro quando falham; o relay precisa montar a própria mensagem de
erro a partir desse corpo sem nunca levantar exceção.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from config.logging import log_fallback

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
DEFAULT_SNIPPET_LIMIT = 300


@dataclass(frozen=True, slots=True)
class NormalizedBody:
    """Corpo de resposta reduzido a um formato uniforme.

    Attributes:
        structured: True quando o upstream declarou JSON
        body: Objeto JSON, texto, ou None se o JSON declarado não parseou
    """

    structured: bool
    body: Any


def is_structured(content_type: str | None) -> bool:
    """True se o content-type declara JSON."""
    return JSON_CONTENT_TYPE in (content_type or "").lower()


def normalize_response(response: httpx.Response) -> NormalizedBody:
    """Reduz a resposta a `NormalizedBody` sem propagar erros de parse.

    JSON declarado e inválido vira `NormalizedBody(True, None)`.
    """
    structured = is_structured(response.headers.get("content-type"))
    if not structured:
        return NormalizedBody(structured=False, body=read_text(response))

    try:
        return NormalizedBody(structured=True, body=response.json())
    except ValueError:
        log_fallback(logger, "response_normalizer", reason="invalid_json")
        return NormalizedBody(structured=True, body=None)


def read_text(response: httpx.Response) -> str | None:
    """Texto bruto do corpo; None se não decodificar."""
    try:
        return response.text
    except (UnicodeDecodeError, LookupError):
        log_fallback(logger, "response_normalizer", reason="undecodable_text")
        return None


def body_snippet(normalized: NormalizedBody, limit: int = DEFAULT_SNIPPET_LIMIT) -> str:
    """Texto truncado do corpo, para mensagens de erro e logs."""
    if normalized.structured:
        text = json.dumps(normalized.body, ensure_ascii=False, default=str)
    else:
        text = str(normalized.body or "")
    return text[:limit]
