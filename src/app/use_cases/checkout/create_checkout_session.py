"""Use case de criação de sessão do Stripe Checkout.

O total já vem agregado pelo frontend: a sessão tem um line item único
com o valor do pedido inteiro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.checkout import ORDER_PRODUCT_NAME, CheckoutSessionRef
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from app.domain.checkout import CheckoutRequest
    from app.protocols.payment_gateway import PaymentGatewayProtocol
    from config.settings import BaseSettings, StripeSettings

logger = logging.getLogger(__name__)

SUCCESS_PATH = "/payment-success?session_id={CHECKOUT_SESSION_ID}"
CANCEL_PATH = "/payment-cancel"


class CreateCheckoutSessionUseCase:
    """Monta os parâmetros da sessão e cria via gateway."""

    def __init__(
        self,
        gateway: PaymentGatewayProtocol,
        stripe_settings: StripeSettings,
        base_settings: BaseSettings,
    ) -> None:
        self._gateway = gateway
        self._stripe = stripe_settings
        self._base = base_settings

    def build_params(self, request: CheckoutRequest) -> dict[str, Any]:
        """Parâmetros de `checkout.Session.create` para o pedido."""
        base_url = self._base.redirect_base_url
        params: dict[str, Any] = {
            "mode": "payment",
            "line_items": [
                {
                    "price_data": {
                        "currency": self._stripe.currency,
                        "product_data": {
                            "name": ORDER_PRODUCT_NAME,
                            "description": f"Order containing {request.item_count} items",
                        },
                        "unit_amount": request.unit_amount,
                    },
                    "quantity": 1,
                }
            ],
            "success_url": f"{base_url}{SUCCESS_PATH}",
            "cancel_url": f"{base_url}{CANCEL_PATH}",
            "locale": "auto",
            "billing_address_collection": "auto",
            "metadata": request.session_metadata(),
        }
        if request.customer_email:
            params["customer_email"] = request.customer_email
        # Config com PayPal habilitado; sem ela o Stripe usa a padrão da conta
        if self._stripe.payment_method_configuration:
            params["payment_method_configuration"] = self._stripe.payment_method_configuration
        return params

    async def execute(self, request: CheckoutRequest) -> CheckoutSessionRef:
        session = await self._gateway.create_checkout_session(self.build_params(request))
        logger.info(
            "checkout_session_created",
            extra={
                "session_id": session.get("id"),
                "unit_amount": request.unit_amount,
                "item_count": request.item_count,
                "correlation_id": get_correlation_id(),
            },
        )
        return CheckoutSessionRef(id=session["id"], url=session.get("url"))
