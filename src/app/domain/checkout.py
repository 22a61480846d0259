"""Modelos do checkout: pedido de sessão, resumo e aviso de falha.

O valor total já chega agregado pelo frontend; aqui ele só vira um
line item único em centavos.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ORDER_PRODUCT_NAME = "Order from Printora"


def to_minor_units(amount: float) -> int:
    """Converte valor em unidades para centavos, arredondando meio para cima.

    49.99 -> 4999; 0.005 -> 1.
    """
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CheckoutRequest(BaseModel):
    """Pedido validado de criação de sessão de checkout."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    amount: float
    items: list[Any] = Field(default_factory=list)
    shipping_address: dict[str, Any] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    order_id: str | None = None
    order_code: str | None = None

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def unit_amount(self) -> int:
        return to_minor_units(self.amount)

    @property
    def customer_email(self) -> str | None:
        if not self.shipping_address:
            return None
        email = self.shipping_address.get("email")
        return str(email) if email else None

    def session_metadata(self) -> dict[str, str]:
        """Metadata da sessão: contagem, total, extras do cliente e ids do pedido.

        order_id/order_code do corpo só entram se a metadata do cliente
        não trouxer as mesmas chaves. Valores viram string (exigência do Stripe).
        """
        merged: dict[str, Any] = {
            "item_count": self.item_count,
            "order_total": _format_amount(self.amount),
            **self.metadata,
        }
        if self.order_id and not merged.get("order_id"):
            merged["order_id"] = self.order_id
        if self.order_code and not merged.get("order_code"):
            merged["order_code"] = self.order_code
        return {key: str(value) for key, value in merged.items() if value is not None}


def _format_amount(amount: float) -> str:
    # 50.0 -> "50", 49.99 -> "49.99"
    return str(int(amount)) if float(amount).is_integer() else str(amount)


class CheckoutSessionRef(BaseModel):
    """Sessão criada: id e URL de redirecionamento."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str | None = None


class LineItemSummary(BaseModel):
    """Line item achatado (valores em centavos)."""

    model_config = ConfigDict(frozen=True)

    description: str | None = None
    quantity: int | None = None
    amount_total: int | None = None
    amount_subtotal: int | None = None
    price: int | None = None
    currency: str | None = None


class CheckoutSessionSummary(BaseModel):
    """Resumo de leitura da sessão para a página de confirmação."""

    model_config = ConfigDict(frozen=True)

    id: str
    payment_status: str | None = None
    status: str | None = None
    amount_total: int | None = None
    amount_subtotal: int | None = None
    currency: str | None = None
    customer_email: str | None = None
    total_details: dict[str, Any] | None = None
    shipping_cost: dict[str, Any] | None = None
    line_items: list[LineItemSummary] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


PAYMENT_FAILED_EVENT = "PAYMENT_FAILED"


class PaymentFailureNotice(BaseModel):
    """Aviso de pagamento falho enviado ao Apps Script."""

    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    order_code: str | None = None
    payment_details: dict[str, Any]
    kind: Literal["payment_intent", "checkout_session"] = "checkout_session"

    def to_relay_event(self) -> dict[str, Any]:
        return {
            "event": PAYMENT_FAILED_EVENT,
            "id": self.id,
            "order_code": self.order_code,
            "payment_details": self.payment_details,
        }
