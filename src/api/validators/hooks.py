"""Validador do relay de pedido criado."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from app.domain.order import OrderCreated
from utils.errors import ValidationError


def validate_order_created(data: Mapping[str, Any] | None) -> OrderCreated:
    """Exige `order_id` numérico ou texto (0 é válido; bool não é id).

    Raises:
        ValidationError: "order_id is required".
    """
    order_id = (data or {}).get("order_id")
    if isinstance(order_id, bool) or not isinstance(order_id, (int, float, str)):
        raise ValidationError("order_id is required")
    if isinstance(order_id, float) and not math.isfinite(order_id):
        raise ValidationError("order_id is required")
    if isinstance(order_id, str) and not order_id.strip():
        raise ValidationError("order_id is required")
    return OrderCreated(order_id=order_id)
