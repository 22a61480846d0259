"""Endpoint de relay do evento "pedido criado" para o Make."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.replies import error_reply, internal_error_reply, read_json_object
from api.validators import validate_order_created
from app.bootstrap.dependencies import get_order_relay_use_case
from app.observability import get_correlation_id
from app.use_cases.hooks import RELAY_TOKEN_HEADER, RelayOrderCreatedUseCase
from utils.errors import RelayError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/order-created")
async def relay_order_created(
    request: Request,
    use_case: RelayOrderCreatedUseCase = Depends(get_order_relay_use_case),
) -> JSONResponse:
    """Repassa `{order_id}` ao webhook do Make com o X-Relay-Token.

    Returns:
        `{ok: true, order_id, make_response}`; em falha do Make o corpo
        de resposta dele vem em `payload`.
    """
    try:
        data = await read_json_object(request)
        order = validate_order_created(data)
        make_response = await use_case.execute(order, request.headers.get(RELAY_TOKEN_HEADER))
    except RelayError as exc:
        logger.warning(
            "order_relay_rejected",
            extra={"error_kind": exc.kind, "correlation_id": get_correlation_id()},
        )
        return error_reply(exc)
    except Exception as exc:
        logger.exception("order_relay_failed", extra={"correlation_id": get_correlation_id()})
        return internal_error_reply(str(exc))

    return JSONResponse(
        content={"ok": True, "order_id": order.order_id, "make_response": make_response}
    )
