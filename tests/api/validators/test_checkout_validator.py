"""Testes dos validadores do checkout."""

from __future__ import annotations

import pytest

from api.validators import validate_checkout_request, validate_session_id
from utils.errors import ValidationError


def test_valid_request() -> None:
    request = validate_checkout_request(
        {
            "amount": 49.99,
            "items": [{"sku": "A"}, {"sku": "B"}],
            "shippingAddress": {"email": "buyer@example.it"},
            "metadata": {"coupon": "SPRING"},
            "order_id": 77,
            "order_code": "ORD-77",
        }
    )

    assert request.unit_amount == 4999
    assert request.item_count == 2
    assert request.customer_email == "buyer@example.it"
    assert request.order_id == "77"


def test_defaults_for_optional_fields() -> None:
    request = validate_checkout_request({"amount": 10})

    assert request.items == []
    assert request.metadata == {}
    assert request.shipping_address is None
    assert request.customer_email is None


@pytest.mark.parametrize("amount", [-5, 0, "100", None, True, float("nan"), float("inf")])
def test_rejects_non_positive_or_non_numeric_amount(amount: object) -> None:
    with pytest.raises(ValidationError, match="Amount must be a positive number"):
        validate_checkout_request({"amount": amount})


def test_rejects_items_that_are_not_a_list() -> None:
    with pytest.raises(ValidationError, match="items must be a list"):
        validate_checkout_request({"amount": 1, "items": "abc"})


def test_rejects_metadata_that_is_not_an_object() -> None:
    with pytest.raises(ValidationError, match="metadata must be an object"):
        validate_checkout_request({"amount": 1, "metadata": ["x"]})


def test_session_id() -> None:
    assert validate_session_id(" cs_test_a1B2 ") == "cs_test_a1B2"
    with pytest.raises(ValidationError, match="Invalid session id"):
        validate_session_id("cs_test/../../x")
    with pytest.raises(ValidationError):
        validate_session_id("")
