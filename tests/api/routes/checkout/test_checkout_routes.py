"""Testes dos endpoints do Stripe Checkout."""

from __future__ import annotations

import json

import pytest

from api.routes.checkout import router as checkout_routes
from app.use_cases.checkout import CreateCheckoutSessionUseCase, RetrieveCheckoutSessionUseCase
from config.settings import BaseSettings, StripeSettings
from tests.fakes.fake_payment_gateway import FakePaymentGateway
from tests.fakes.fake_request import build_request


def _create_use_case(gateway: FakePaymentGateway) -> CreateCheckoutSessionUseCase:
    return CreateCheckoutSessionUseCase(
        gateway, StripeSettings(secret_key="sk_test_1"), BaseSettings()
    )


@pytest.mark.asyncio
async def test_create_returns_id_and_url() -> None:
    gateway = FakePaymentGateway()

    response = await checkout_routes.create_checkout_session(
        build_request(json_body={"amount": 49.99, "items": [{}]}),
        use_case=_create_use_case(gateway),
    )

    assert response.status_code == 200
    assert json.loads(response.body) == {
        "id": "cs_test_123",
        "url": "https://checkout.stripe.test/c/1",
    }
    assert gateway.created_params[0]["line_items"][0]["price_data"]["unit_amount"] == 4999


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [-5, "100"])
async def test_create_rejects_invalid_amount_before_stripe(amount: object) -> None:
    gateway = FakePaymentGateway()

    response = await checkout_routes.create_checkout_session(
        build_request(json_body={"amount": amount}), use_case=_create_use_case(gateway)
    )

    assert response.status_code == 400
    assert json.loads(response.body) == {
        "ok": False,
        "error": "Amount must be a positive number",
    }
    assert gateway.created_params == []


@pytest.mark.asyncio
async def test_create_failure_reports_type_and_details_in_development(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(checkout_routes, "get_base_settings", lambda: BaseSettings())
    gateway = FakePaymentGateway(fail_with=RuntimeError("Stripe unavailable"))

    response = await checkout_routes.create_checkout_session(
        build_request(json_body={"amount": 10}), use_case=_create_use_case(gateway)
    )

    body = json.loads(response.body)
    assert response.status_code == 500
    assert body["ok"] is False
    assert body["error"] == "Stripe unavailable"
    assert body["type"] == "stripe_error"
    assert "RuntimeError" in body["details"]


@pytest.mark.asyncio
async def test_create_failure_hides_details_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        checkout_routes,
        "get_base_settings",
        lambda: BaseSettings(environment="production"),
    )
    gateway = FakePaymentGateway(fail_with=RuntimeError("Stripe unavailable"))

    response = await checkout_routes.create_checkout_session(
        build_request(json_body={"amount": 10}), use_case=_create_use_case(gateway)
    )

    assert "details" not in json.loads(response.body)


@pytest.mark.asyncio
async def test_retrieve_returns_summary() -> None:
    gateway = FakePaymentGateway(
        session={"id": "cs_test_1", "payment_status": "paid", "currency": "eur"}
    )

    response = await checkout_routes.retrieve_checkout_session(
        "cs_test_1", use_case=RetrieveCheckoutSessionUseCase(gateway)
    )

    body = json.loads(response.body)
    assert response.status_code == 200
    assert body["id"] == "cs_test_1"
    assert body["payment_status"] == "paid"
    assert body["line_items"] == []
    assert body["metadata"] == {}


@pytest.mark.asyncio
async def test_retrieve_rejects_malformed_id() -> None:
    gateway = FakePaymentGateway()

    response = await checkout_routes.retrieve_checkout_session(
        "cs_test_1;drop", use_case=RetrieveCheckoutSessionUseCase(gateway)
    )

    assert response.status_code == 400
    assert gateway.retrieved == []


@pytest.mark.asyncio
async def test_retrieve_failure_uses_hint_when_message_empty() -> None:
    gateway = FakePaymentGateway(fail_with=RuntimeError(""))

    response = await checkout_routes.retrieve_checkout_session(
        "cs_live_1", use_case=RetrieveCheckoutSessionUseCase(gateway)
    )

    assert response.status_code == 500
    assert json.loads(response.body) == {
        "ok": False,
        "error": checkout_routes.RETRIEVE_FAILED_MESSAGE,
    }
