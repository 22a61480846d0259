"""Respostas JSON compartilhadas pelas rotas.

Toda falha vira `{"ok": false, "error": <mensagem>, **detail}`; sucesso
nunca carrega `error`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from utils.errors import RelayError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_reply(exc: RelayError) -> JSONResponse:
    """Converte qualquer RelayError na resposta uniforme de falha."""
    content: dict[str, Any] = {**exc.detail, "ok": False, "error": exc.message}
    return JSONResponse(content=content, status_code=exc.status_code)


def internal_error_reply(message: str = INTERNAL_ERROR_MESSAGE, **extra: Any) -> JSONResponse:
    """Falha inesperada: 500 com mensagem genérica (o traceback fica no log)."""
    return JSONResponse(
        content={**extra, "ok": False, "error": message or INTERNAL_ERROR_MESSAGE},
        status_code=500,
    )


async def read_json_object(request: Request) -> dict[str, Any]:
    """Lê o corpo JSON da requisição.

    Corpo vazio ou JSON que não é objeto vira `{}` e os validators
    reportam os campos ausentes.

    Raises:
        ValidationError: corpo não é JSON válido.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = await request.json()
    except ValueError as exc:
        raise ValidationError("Invalid JSON body") from exc
    return data if isinstance(data, dict) else {}
