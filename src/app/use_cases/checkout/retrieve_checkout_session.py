"""Use case de leitura de sessão do Checkout (idempotente, só leitura)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.checkout import CheckoutSessionSummary, LineItemSummary

if TYPE_CHECKING:
    from app.protocols.payment_gateway import PaymentGatewayProtocol


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def summarize_line_item(item: Mapping[str, Any], session_currency: str | None) -> LineItemSummary:
    price = _mapping(item.get("price"))
    return LineItemSummary(
        description=item.get("description"),
        quantity=item.get("quantity"),
        amount_total=item.get("amount_total"),
        amount_subtotal=item.get("amount_subtotal"),
        price=price.get("unit_amount"),
        currency=price.get("currency") or session_currency,
    )


def summarize_session(
    session: Mapping[str, Any],
    line_items: list[Mapping[str, Any]],
) -> CheckoutSessionSummary:
    """Achata sessão + line items no resumo exposto ao frontend."""
    customer_details = _mapping(session.get("customer_details"))
    currency = session.get("currency")
    return CheckoutSessionSummary(
        id=session["id"],
        payment_status=session.get("payment_status"),
        status=session.get("status"),
        amount_total=session.get("amount_total"),
        amount_subtotal=session.get("amount_subtotal"),
        currency=currency,
        customer_email=customer_details.get("email") or session.get("customer_email") or None,
        total_details=session.get("total_details") or None,
        shipping_cost=session.get("shipping_cost") or None,
        line_items=[summarize_line_item(item, currency) for item in line_items],
        metadata=dict(session.get("metadata") or {}),
    )


class RetrieveCheckoutSessionUseCase:
    """Busca sessão e line items e devolve o resumo."""

    def __init__(self, gateway: PaymentGatewayProtocol) -> None:
        self._gateway = gateway

    async def execute(self, session_id: str) -> CheckoutSessionSummary:
        session = await self._gateway.retrieve_checkout_session(session_id)
        line_items = await self._gateway.list_line_items(session_id)
        return summarize_session(session, line_items)
