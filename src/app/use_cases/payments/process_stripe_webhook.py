"""Use case de ingestão do webhook do Stripe.

A assinatura é verificada sobre o corpo bruto antes de qualquer parse.
Só eventos de falha geram aviso; o resto é confirmado e ignorado.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.checkout import PaymentFailureNotice
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from app.protocols.payment_gateway import PaymentGatewayProtocol

logger = logging.getLogger(__name__)

PAYMENT_INTENT_FAILED = "payment_intent.payment_failed"
SESSION_ASYNC_PAYMENT_FAILED = "checkout.session.async_payment_failed"
SESSION_EXPIRED = "checkout.session.expired"

FAILURE_EVENT_TYPES = frozenset(
    {PAYMENT_INTENT_FAILED, SESSION_ASYNC_PAYMENT_FAILED, SESSION_EXPIRED}
)


@dataclass(frozen=True, slots=True)
class StripeWebhookOutcome:
    """Resultado do processamento: tipo do evento e aviso a enviar (se houver)."""

    event_type: str
    notice: PaymentFailureNotice | None = None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def build_failure_notice(event: Mapping[str, Any]) -> PaymentFailureNotice | None:
    """Aviso normalizado para eventos de falha; None para os demais."""
    event_type = event.get("type")
    if event_type not in FAILURE_EVENT_TYPES:
        return None

    obj = _mapping(_mapping(event.get("data")).get("object"))
    metadata = _mapping(obj.get("metadata"))

    if event_type == PAYMENT_INTENT_FAILED:
        last_error = _mapping(obj.get("last_payment_error"))
        return PaymentFailureNotice(
            id=metadata.get("order_id") or None,
            order_code=metadata.get("order_code") or None,
            kind="payment_intent",
            payment_details={
                "type": "payment_intent",
                "id": obj.get("id"),
                "last_payment_error": last_error.get("message") or None,
                "status": obj.get("status"),
                "amount": obj.get("amount"),
                "currency": obj.get("currency"),
            },
        )

    return PaymentFailureNotice(
        id=metadata.get("order_id") or None,
        order_code=metadata.get("order_code") or None,
        kind="checkout_session",
        payment_details={
            "type": "checkout_session",
            "id": obj.get("id"),
            "status": obj.get("status"),
            "payment_status": obj.get("payment_status"),
            "amount_total": obj.get("amount_total"),
            "currency": obj.get("currency"),
        },
    )


class ProcessStripeWebhookUseCase:
    """Verifica, classifica e prepara o aviso de falha de pagamento."""

    def __init__(self, gateway: PaymentGatewayProtocol) -> None:
        self._gateway = gateway

    def execute(self, payload: bytes, signature: str | None) -> StripeWebhookOutcome:
        """Processa o corpo bruto do webhook.

        Raises:
            SignatureError: assinatura inválida (nada mais é processado).
            ValidationError: corpo não é um objeto JSON.
        """
        event = self._gateway.verify_webhook(payload, signature)
        event_type = str(event.get("type") or "unknown")
        notice = build_failure_notice(event)
        logger.info(
            "stripe_webhook_received",
            extra={
                "event_type": event_type,
                "event_id": event.get("id"),
                "notify": notice is not None,
                "correlation_id": get_correlation_id(),
            },
        )
        return StripeWebhookOutcome(event_type=event_type, notice=notice)
