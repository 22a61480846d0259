"""Validadores do Stripe Checkout."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from api.validators.limits import SESSION_ID_PATTERN
from app.domain.checkout import CheckoutRequest
from utils.errors import ValidationError

_SESSION_ID_RE = re.compile(SESSION_ID_PATTERN)


def _is_positive_number(value: Any) -> bool:
    # bool é int em Python; "100" (string) não é aceito
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def _optional_id(value: Any) -> str | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    return str(value)


def validate_checkout_request(data: Mapping[str, Any] | None) -> CheckoutRequest:
    """Valida o corpo de criação de sessão.

    Raises:
        ValidationError: amount não numérico/não positivo ou campos com tipo errado.
    """
    data = data or {}
    amount = data.get("amount")
    if not _is_positive_number(amount):
        raise ValidationError("Amount must be a positive number")

    items = data.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ValidationError("items must be a list")

    shipping_address = data.get("shippingAddress")
    if shipping_address is not None and not isinstance(shipping_address, Mapping):
        raise ValidationError("shippingAddress must be an object")

    metadata = data.get("metadata")
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, Mapping):
        raise ValidationError("metadata must be an object")

    return CheckoutRequest(
        amount=float(amount),
        items=items,
        shipping_address=dict(shipping_address) if shipping_address else None,
        metadata=dict(metadata),
        order_id=_optional_id(data.get("order_id")),
        order_code=_optional_id(data.get("order_code")),
    )


def validate_session_id(session_id: str | None) -> str:
    """Ids do Stripe (cs_test_..., cs_live_...) só têm letras, dígitos e "_"."""
    value = (session_id or "").strip()
    if not _SESSION_ID_RE.match(value):
        raise ValidationError("Invalid session id")
    return value
