"""Middlewares HTTP da API."""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.observability import CORRELATION_HEADER, correlation_scope


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Define o correlation_id da requisição e o devolve no header de resposta.

    Usa o X-Correlation-Id recebido ou gera um UUID novo.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            request.state.correlation_id = correlation_id
            response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
