"""Testes da ingestão do webhook do Stripe."""

from __future__ import annotations

import json
from typing import Any

import pytest

from app.use_cases.payments import (
    FAILURE_EVENT_TYPES,
    ProcessStripeWebhookUseCase,
    build_failure_notice,
)
from tests.fakes.fake_payment_gateway import VALID_SIGNATURE, FakePaymentGateway
from utils.errors import SignatureError


def _event(event_type: str, obj: dict[str, Any]) -> dict[str, Any]:
    return {"id": "evt_1", "type": event_type, "data": {"object": obj}}


def test_failure_event_types() -> None:
    assert FAILURE_EVENT_TYPES == {
        "payment_intent.payment_failed",
        "checkout.session.async_payment_failed",
        "checkout.session.expired",
    }


def test_payment_intent_notice() -> None:
    notice = build_failure_notice(
        _event(
            "payment_intent.payment_failed",
            {
                "id": "pi_1",
                "status": "requires_payment_method",
                "amount": 4999,
                "currency": "eur",
                "last_payment_error": {"message": "Your card was declined."},
                "metadata": {"order_id": "77", "order_code": "ORD-77"},
            },
        )
    )

    assert notice is not None
    assert notice.to_relay_event() == {
        "event": "PAYMENT_FAILED",
        "id": "77",
        "order_code": "ORD-77",
        "payment_details": {
            "type": "payment_intent",
            "id": "pi_1",
            "last_payment_error": "Your card was declined.",
            "status": "requires_payment_method",
            "amount": 4999,
            "currency": "eur",
        },
    }


@pytest.mark.parametrize(
    "event_type", ["checkout.session.expired", "checkout.session.async_payment_failed"]
)
def test_checkout_session_notice(event_type: str) -> None:
    notice = build_failure_notice(
        _event(
            event_type,
            {
                "id": "cs_1",
                "status": "expired",
                "payment_status": "unpaid",
                "amount_total": 1234,
                "currency": "eur",
                "metadata": {},
            },
        )
    )

    assert notice is not None
    assert notice.id is None
    assert notice.order_code is None
    assert notice.payment_details == {
        "type": "checkout_session",
        "id": "cs_1",
        "status": "expired",
        "payment_status": "unpaid",
        "amount_total": 1234,
        "currency": "eur",
    }


def test_other_events_are_ignored() -> None:
    assert build_failure_notice(_event("checkout.session.completed", {"id": "cs_1"})) is None
    assert build_failure_notice({"type": "payment_intent.payment_failed"}) is not None


def test_use_case_returns_outcome_with_notice() -> None:
    payload = json.dumps(_event("checkout.session.expired", {"id": "cs_1"})).encode("utf-8")
    gateway = FakePaymentGateway()

    outcome = ProcessStripeWebhookUseCase(gateway).execute(payload, VALID_SIGNATURE)

    assert outcome.event_type == "checkout.session.expired"
    assert outcome.notice is not None


def test_use_case_stops_on_bad_signature() -> None:
    gateway = FakePaymentGateway()

    with pytest.raises(SignatureError):
        ProcessStripeWebhookUseCase(gateway).execute(b'{"type": "x"}', "t=1,v1=forged")
    assert gateway.verified_payloads == []
