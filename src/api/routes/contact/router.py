"""Endpoints do formulário de contato.

Endpoints:
- GET /contact: ping de diagnóstico
- OPTIONS /contact: preflight manual (204)
- POST /contact: valida e repassa ao Apps Script
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from api.routes.replies import error_reply, internal_error_reply, read_json_object
from api.validators import validate_contact_message
from app.bootstrap.dependencies import get_contact_use_case
from app.observability import get_correlation_id
from app.use_cases.contact import RelayContactMessageUseCase
from utils.errors import RelayError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/contact")
async def contact_ping() -> dict[str, Any]:
    return {"ok": True, "method": "GET"}


@router.options("/contact")
async def contact_preflight() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/contact")
async def relay_contact(
    request: Request,
    use_case: RelayContactMessageUseCase = Depends(get_contact_use_case),
) -> JSONResponse:
    """Valida a mensagem e faz uma única chamada ao Apps Script.

    Returns:
        `{ok: true}` ou falha uniforme (400 validação, 5xx upstream).
    """
    try:
        data = await read_json_object(request)
        message = validate_contact_message(data)
        await use_case.execute(message)
    except RelayError as exc:
        logger.info(
            "contact_rejected",
            extra={
                "error_kind": exc.kind,
                "status_code": exc.status_code,
                "correlation_id": get_correlation_id(),
            },
        )
        return error_reply(exc)
    except Exception:
        logger.exception("contact_relay_failed", extra={"correlation_id": get_correlation_id()})
        return internal_error_reply()

    return JSONResponse(content={"ok": True})
