"""Testes do endpoint de relay de pedido criado."""

from __future__ import annotations

import json

import pytest

from api.routes.hooks import router as hooks_routes
from app.use_cases.hooks import RelayOrderCreatedUseCase
from config.settings import RelaySettings
from tests.fakes.fake_http_client import FakeRelayHttpClient, failed_result, ok_result
from tests.fakes.fake_request import build_request


def _use_case(http: FakeRelayHttpClient) -> RelayOrderCreatedUseCase:
    return RelayOrderCreatedUseCase(
        http,
        RelaySettings(make_order_created_url="https://hook.make.test/x", relay_token="env"),
    )


@pytest.mark.asyncio
async def test_success_reply_includes_make_response() -> None:
    http = FakeRelayHttpClient([ok_result({"status": "queued"})])
    request = build_request(json_body={"order_id": 12}, headers={"X-Relay-Token": "from-header"})

    response = await hooks_routes.relay_order_created(request, use_case=_use_case(http))

    assert response.status_code == 200
    assert json.loads(response.body) == {
        "ok": True,
        "order_id": 12,
        "make_response": {"status": "queued"},
    }
    assert http.calls[0].headers == {"X-Relay-Token": "from-header"}


@pytest.mark.asyncio
async def test_missing_order_id() -> None:
    http = FakeRelayHttpClient()

    response = await hooks_routes.relay_order_created(
        build_request(json_body={}), use_case=_use_case(http)
    )

    assert response.status_code == 400
    assert json.loads(response.body) == {"ok": False, "error": "order_id is required"}
    assert http.calls == []


@pytest.mark.asyncio
async def test_make_failure_is_502_with_payload() -> None:
    http = FakeRelayHttpClient([failed_result({"message": "Scenario off"}, 410)])

    response = await hooks_routes.relay_order_created(
        build_request(json_body={"order_id": "A1"}), use_case=_use_case(http)
    )

    assert response.status_code == 502
    assert json.loads(response.body) == {
        "ok": False,
        "error": "Make webhook responded with 410",
        "payload": {"message": "Scenario off"},
    }
