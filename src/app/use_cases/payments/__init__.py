"""Use cases de pagamento (webhook do Stripe e avisos de falha)."""

from .notify_payment_failed import NotifyPaymentFailedUseCase
from .process_stripe_webhook import (
    FAILURE_EVENT_TYPES,
    ProcessStripeWebhookUseCase,
    StripeWebhookOutcome,
    build_failure_notice,
)

__all__ = [
    "FAILURE_EVENT_TYPES",
    "NotifyPaymentFailedUseCase",
    "ProcessStripeWebhookUseCase",
    "StripeWebhookOutcome",
    "build_failure_notice",
]
