"""Testes do validador do relay de pedido criado."""

from __future__ import annotations

import pytest

from api.validators import validate_order_created
from utils.errors import ValidationError


@pytest.mark.parametrize("order_id", [0, 42, 12.5, "A-100"])
def test_accepts_numeric_and_str_ids(order_id: object) -> None:
    order = validate_order_created({"order_id": order_id})

    assert order.order_id == order_id


@pytest.mark.parametrize("data", [None, {}, {"order_id": None}, {"order_id": ""}, {"order_id": True}])
def test_rejects_missing_order_id(data: object) -> None:
    with pytest.raises(ValidationError, match="order_id is required"):
        validate_order_created(data)  # type: ignore[arg-type]


def test_float_id_keeps_its_type() -> None:
    order = validate_order_created({"order_id": 12.5})

    assert isinstance(order.order_id, float)


@pytest.mark.parametrize("order_id", [float("nan"), float("inf"), [1], {"id": 1}])
def test_rejects_non_finite_and_container_ids(order_id: object) -> None:
    with pytest.raises(ValidationError, match="order_id is required"):
        validate_order_created({"order_id": order_id})
