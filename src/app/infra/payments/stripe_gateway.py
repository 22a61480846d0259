"""Gateway concreto de pagamento usando o SDK oficial do Stripe.

Chamadas do SDK são bloqueantes e rodam em thread. A chave vai em cada
chamada (sem estado global em `stripe.api_key`).
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING, Any

import stripe

from app.observability import get_correlation_id, record_latency, record_upstream_outcome
from app.protocols.payment_gateway import PaymentGatewayProtocol
from utils.errors import ConfigurationError, SignatureError, ValidationError

if TYPE_CHECKING:
    from config.settings import StripeSettings

logger = logging.getLogger(__name__)

_COMPONENT = "stripe_gateway"
SESSION_EXPAND = ["payment_intent", "customer", "total_details.breakdown"]
LINE_ITEMS_EXPAND = ["data.price.product"]
LINE_ITEMS_LIMIT = 100


def _to_dict(obj: Any) -> dict[str, Any]:
    if isinstance(obj, dict) and not isinstance(obj, stripe.StripeObject):
        return obj
    return obj.to_dict()


class StripeCheckoutGateway(PaymentGatewayProtocol):
    """Checkout Sessions + verificação de assinatura de webhook."""

    __slots__ = ("_settings",)

    def __init__(self, settings: StripeSettings) -> None:
        self._settings = settings

    def _request_options(self) -> dict[str, Any]:
        if not self._settings.secret_key:
            raise ConfigurationError("STRIPE_SECRET_KEY not configured")
        return {
            "api_key": self._settings.secret_key,
            "stripe_version": self._settings.api_version,
        }

    async def create_checkout_session(self, params: dict[str, Any]) -> dict[str, Any]:
        options = self._request_options()
        session = await self._run(
            "create_checkout_session",
            stripe.checkout.Session.create,
            **options,
            **params,
        )
        return _to_dict(session)

    async def retrieve_checkout_session(self, session_id: str) -> dict[str, Any]:
        options = self._request_options()
        session = await self._run(
            "retrieve_checkout_session",
            stripe.checkout.Session.retrieve,
            session_id,
            expand=SESSION_EXPAND,
            **options,
        )
        return _to_dict(session)

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]:
        options = self._request_options()
        listing = await self._run(
            "list_line_items",
            stripe.checkout.Session.list_line_items,
            session_id,
            limit=LINE_ITEMS_LIMIT,
            expand=LINE_ITEMS_EXPAND,
            **options,
        )
        return list(_to_dict(listing).get("data") or [])

    def verify_webhook(self, payload: bytes, signature: str | None) -> dict[str, Any]:
        """Verifica assinatura sobre o corpo bruto e só então parseia o JSON.

        Sem STRIPE_WEBHOOK_SECRET a verificação é pulada (risco registrado em log).
        """
        secret = self._settings.webhook_secret
        if secret:
            if not signature:
                raise SignatureError("Missing Stripe-Signature header")
            try:
                stripe.WebhookSignature.verify_header(
                    payload.decode("utf-8"),
                    signature,
                    secret,
                    stripe.Webhook.DEFAULT_TOLERANCE,
                )
            except UnicodeDecodeError as exc:
                raise SignatureError("Payload is not valid UTF-8") from exc
            except stripe.SignatureVerificationError as exc:
                raise SignatureError(str(exc) or "Signature verification failed") from exc
        else:
            logger.warning(
                "stripe_webhook_signature_skipped",
                extra={
                    "component": _COMPONENT,
                    "reason": "STRIPE_WEBHOOK_SECRET not configured",
                    "correlation_id": get_correlation_id(),
                },
            )

        try:
            event = json.loads(payload or b"{}")
        except ValueError as exc:
            raise ValidationError("Invalid JSON payload") from exc
        if not isinstance(event, dict):
            raise ValidationError("Event payload must be an object")
        return event

    async def _run(self, operation: str, func: Any, *args: Any, **kwargs: Any) -> Any:
        started_at = time.perf_counter()
        try:
            result = await asyncio.to_thread(func, *args, **kwargs)
        except stripe.StripeError as exc:
            record_upstream_outcome("stripe", "http_error", status_code=exc.http_status)
            logger.error(
                "stripe_request_failed",
                extra={
                    "component": _COMPONENT,
                    "operation": operation,
                    "error_type": type(exc).__name__,
                    "status_code": exc.http_status,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise
        finally:
            record_latency(_COMPONENT, operation, (time.perf_counter() - started_at) * 1000)
        record_upstream_outcome("stripe", "ok")
        return result
