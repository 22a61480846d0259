"""Endpoints do Stripe Checkout.

Endpoints:
- POST /create-checkout-session: cria sessão com line item único
- GET /checkout-session/{session_id}: resumo para a página de confirmação
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.replies import error_reply, internal_error_reply, read_json_object
from api.validators import validate_checkout_request, validate_session_id
from app.bootstrap.dependencies import (
    get_create_checkout_use_case,
    get_retrieve_checkout_use_case,
)
from app.observability import get_correlation_id
from app.use_cases.checkout import (
    CreateCheckoutSessionUseCase,
    RetrieveCheckoutSessionUseCase,
)
from config.settings import get_base_settings
from utils.errors import RelayError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

RETRIEVE_FAILED_MESSAGE = (
    "Failed to retrieve Stripe session. Check that your test/live keys match the session."
)


def error_message(exc: Exception, fallback: str) -> str:
    """Mensagem legível do erro (user_message do Stripe quando houver)."""
    if isinstance(exc, RelayError):
        return exc.message
    return str(getattr(exc, "user_message", None) or exc) or fallback


def stripe_error_type(exc: Exception) -> str:
    """Tipo do erro do Stripe (ex: invalid_request_error) ou genérico."""
    if isinstance(exc, RelayError):
        return exc.kind
    error = getattr(exc, "error", None)
    return str(getattr(error, "type", None) or "stripe_error")


@router.post("/create-checkout-session")
async def create_checkout_session(
    request: Request,
    use_case: CreateCheckoutSessionUseCase = Depends(get_create_checkout_use_case),
) -> JSONResponse:
    """Cria a sessão de checkout e devolve `{id, url}`."""
    try:
        data = await read_json_object(request)
        checkout = validate_checkout_request(data)
    except ValidationError as exc:
        return error_reply(exc)

    try:
        session = await use_case.execute(checkout)
    except Exception as exc:
        logger.exception(
            "checkout_session_create_failed",
            extra={"error_type": type(exc).__name__, "correlation_id": get_correlation_id()},
        )
        content: dict[str, Any] = {
            "ok": False,
            "error": error_message(exc, "Stripe error"),
            "type": stripe_error_type(exc),
        }
        if get_base_settings().is_development:
            content["details"] = traceback.format_exc()
        status_code = exc.status_code if isinstance(exc, RelayError) else 500
        return JSONResponse(content=content, status_code=status_code)

    return JSONResponse(content=session.model_dump())


@router.get("/checkout-session/{session_id}")
async def retrieve_checkout_session(
    session_id: str,
    use_case: RetrieveCheckoutSessionUseCase = Depends(get_retrieve_checkout_use_case),
) -> JSONResponse:
    """Resumo achatado da sessão e dos line items (somente leitura)."""
    try:
        summary = await use_case.execute(validate_session_id(session_id))
    except ValidationError as exc:
        return error_reply(exc)
    except Exception as exc:
        logger.exception(
            "checkout_session_retrieve_failed",
            extra={"error_type": type(exc).__name__, "correlation_id": get_correlation_id()},
        )
        return internal_error_reply(error_message(exc, RETRIEVE_FAILED_MESSAGE))

    return JSONResponse(content=summary.model_dump())
