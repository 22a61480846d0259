"""Endpoints de pagamento.

Endpoints:
- POST /stripe-webhook: verifica a assinatura sobre o corpo bruto e
  agenda aviso PAYMENT_FAILED para eventos de falha
- POST /test-payment-failed: dispara aviso de exemplo (fora de produção)

Segurança:
- O corpo fica em bytes até a assinatura ser verificada
- Assinatura inválida: 400 e nenhum efeito colateral
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.payments.runtime import schedule_notice_task
from api.routes.replies import error_reply, internal_error_reply, read_json_object
from app.bootstrap.dependencies import (
    get_notify_payment_failed_use_case,
    get_stripe_webhook_use_case,
)
from app.domain.checkout import PaymentFailureNotice
from app.observability import get_correlation_id
from app.use_cases.payments import NotifyPaymentFailedUseCase, ProcessStripeWebhookUseCase
from utils.errors import RelayError, SignatureError

logger = logging.getLogger(__name__)

router = APIRouter()
test_router = APIRouter()

SIGNATURE_HEADER = "Stripe-Signature"


@router.post("/stripe-webhook")
async def stripe_webhook(
    request: Request,
    use_case: ProcessStripeWebhookUseCase = Depends(get_stripe_webhook_use_case),
    notifier: NotifyPaymentFailedUseCase = Depends(get_notify_payment_failed_use_case),
) -> JSONResponse:
    """Recebe eventos do Stripe; responde `{received: true}` sem esperar o aviso."""
    payload = await request.body()
    correlation_id = get_correlation_id()
    try:
        outcome = use_case.execute(payload, request.headers.get(SIGNATURE_HEADER))
    except SignatureError as exc:
        logger.warning(
            "stripe_webhook_signature_invalid",
            extra={"error": exc.message, "correlation_id": correlation_id},
        )
        return error_reply(SignatureError(f"Webhook Error: {exc.message}"))
    except RelayError as exc:
        return error_reply(exc)
    except Exception:
        logger.exception("stripe_webhook_failed", extra={"correlation_id": correlation_id})
        return internal_error_reply("handler error")

    if outcome.notice is not None:
        schedule_notice_task(
            correlation_id=correlation_id,
            coroutine=notifier.execute(outcome.notice),
        )
    return JSONResponse(content={"received": True})


def sample_failure_notice(data: dict[str, Any]) -> PaymentFailureNotice:
    """Aviso de exemplo no formato de sessão expirada.

    Qualquer `id` enviado é aceito; o que não for int ou str segue como texto.
    """
    sample_id = data.get("id") or 9999
    if isinstance(sample_id, bool) or not isinstance(sample_id, (int, str)):
        sample_id = str(sample_id)
    return PaymentFailureNotice(
        id=sample_id,
        order_code=str(data.get("order_code") or "ORD-9999"),
        kind="checkout_session",
        payment_details={
            "type": "checkout_session",
            "id": "cs_test_123",
            "status": "expired",
            "payment_status": "unpaid",
            "amount_total": 1234,
            "currency": "eur",
        },
    )


@test_router.post("/test-payment-failed")
async def test_payment_failed(
    request: Request,
    notifier: NotifyPaymentFailedUseCase = Depends(get_notify_payment_failed_use_case),
) -> JSONResponse:
    """Envia um aviso de exemplo ao Apps Script e devolve o que foi enviado."""
    try:
        data = await read_json_object(request)
    except RelayError as exc:
        return error_reply(exc)

    notice = sample_failure_notice(data)
    await notifier.execute(notice)
    forwarded = notice.to_relay_event()
    forwarded.pop("event")
    return JSONResponse(content={"ok": True, "forwarded": forwarded})
