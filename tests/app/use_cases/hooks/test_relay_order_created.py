"""Testes do use case de relay "order-created" para o Make."""

from __future__ import annotations

import pytest

from app.domain.order import OrderCreated
from app.infra.http import OutboundResult
from app.use_cases.hooks import RELAY_TOKEN_HEADER, RelayOrderCreatedUseCase
from app.use_cases.hooks.relay_order_created import make_response_payload
from config.settings import RelaySettings
from tests.fakes.fake_http_client import FakeRelayHttpClient, failed_result, ok_result
from utils.errors import ConfigurationError, TransportError, UpstreamHTTPError, UpstreamTimeoutError

MAKE_URL = "https://hook.eu1.make.com/abc"


def _use_case(
    http: FakeRelayHttpClient,
    *,
    url: str = MAKE_URL,
    relay_token: str = "env-token",
) -> RelayOrderCreatedUseCase:
    return RelayOrderCreatedUseCase(
        http,
        RelaySettings(make_order_created_url=url, relay_token=relay_token),
    )


@pytest.mark.asyncio
async def test_forwards_order_id_with_header_token() -> None:
    http = FakeRelayHttpClient([ok_result({"accepted": True})])

    response = await _use_case(http).execute(OrderCreated(order_id=0), "header-token")

    assert response == {"accepted": True}
    call = http.calls[0]
    assert call.url == MAKE_URL
    assert call.json == {"order_id": 0}
    assert call.headers == {RELAY_TOKEN_HEADER: "header-token"}
    assert call.timeout_seconds == 8.0


@pytest.mark.asyncio
async def test_falls_back_to_env_token() -> None:
    http = FakeRelayHttpClient([ok_result({})])

    await _use_case(http).execute(OrderCreated(order_id=5), None)

    assert http.calls[0].headers == {RELAY_TOKEN_HEADER: "env-token"}


@pytest.mark.asyncio
async def test_missing_token_is_logged_but_call_proceeds(caplog: pytest.LogCaptureFixture) -> None:
    http = FakeRelayHttpClient([ok_result({})])

    with caplog.at_level("WARNING"):
        await _use_case(http, relay_token="").execute(OrderCreated(order_id=5), "")

    assert len(http.calls) == 1
    assert "order_relay_token_missing" in caplog.text


@pytest.mark.asyncio
async def test_missing_url() -> None:
    http = FakeRelayHttpClient()

    with pytest.raises(ConfigurationError, match="MAKE_ORDER_CREATED_WEBHOOK_URL is not set"):
        await _use_case(http, url="").execute(OrderCreated(order_id=1))
    assert http.calls == []


@pytest.mark.asyncio
async def test_non_2xx_carries_payload() -> None:
    http = FakeRelayHttpClient([failed_result("Accepted? no", 400, structured=False)])

    with pytest.raises(UpstreamHTTPError, match="Make webhook responded with 400") as exc_info:
        await _use_case(http).execute(OrderCreated(order_id=1))
    assert exc_info.value.detail == {"payload": {"raw": "Accepted? no"}}


@pytest.mark.asyncio
async def test_timeout_and_transport_messages() -> None:
    http = FakeRelayHttpClient(
        [UpstreamTimeoutError("make timed out"), TransportError("connection refused")]
    )
    use_case = _use_case(http)

    with pytest.raises(UpstreamTimeoutError, match="Make webhook timed out"):
        await use_case.execute(OrderCreated(order_id=1))
    with pytest.raises(TransportError, match="Make webhook fetch failed: connection refused"):
        await use_case.execute(OrderCreated(order_id=1))


def test_make_response_payload_shapes() -> None:
    assert make_response_payload(ok_result({"a": 1})) == {"a": 1}
    assert make_response_payload(
        OutboundResult(succeeded=True, structured=False, body="Accepted", status_code=200)
    ) == {"raw": "Accepted"}
    # JSON declarado mas inválido
    assert make_response_payload(
        OutboundResult(succeeded=True, structured=True, body=None, status_code=200)
    ) == {"raw": ""}


@pytest.mark.asyncio
async def test_json_sent_as_plain_text_is_parsed() -> None:
    http = FakeRelayHttpClient(
        [
            OutboundResult(
                succeeded=True,
                structured=False,
                body='{"accepted": true, "row": 7}',
                status_code=200,
                raw_text='{"accepted": true, "row": 7}',
            )
        ]
    )

    response = await _use_case(http).execute(OrderCreated(order_id=7))

    assert response == {"accepted": True, "row": 7}


@pytest.mark.asyncio
async def test_declared_json_that_fails_to_parse_keeps_text() -> None:
    http = FakeRelayHttpClient(
        [
            OutboundResult(
                succeeded=False,
                structured=True,
                body=None,
                status_code=502,
                raw_text="<html>Bad gateway</html>",
            )
        ]
    )

    with pytest.raises(UpstreamHTTPError) as exc_info:
        await _use_case(http).execute(OrderCreated(order_id=7))
    assert exc_info.value.detail == {"payload": {"raw": "<html>Bad gateway</html>"}}
