"""Testes do use case de relay do formulário de contato."""

from __future__ import annotations

import pytest

from app.domain.contact import ContactMessage
from app.use_cases.contact import RelayContactMessageUseCase
from config.settings import RelaySettings
from tests.fakes.fake_http_client import FakeRelayHttpClient, failed_result, ok_result
from utils.errors import (
    ConfigurationError,
    TransportError,
    UpstreamHTTPError,
    UpstreamLogicalError,
    UpstreamTimeoutError,
)

APPS_SCRIPT_URL = "https://script.google.com/macros/s/abc/exec"

MESSAGE = ContactMessage(
    name="Marco",
    email="marco@example.it",
    message="Ciao!",
    subject=None,
    order_code="ORD-9",
)


def _use_case(http: FakeRelayHttpClient, url: str = APPS_SCRIPT_URL) -> RelayContactMessageUseCase:
    return RelayContactMessageUseCase(http, RelaySettings(apps_script_url=url))


@pytest.mark.asyncio
async def test_forwards_single_event_with_all_fields() -> None:
    http = FakeRelayHttpClient([ok_result({"ok": True})])

    await _use_case(http).execute(MESSAGE)

    assert len(http.calls) == 1
    call = http.calls[0]
    assert call.url == APPS_SCRIPT_URL
    assert call.timeout_seconds == 15.0
    assert call.json == {
        "event": "CONTACT_MESSAGE",
        "name": "Marco",
        "email": "marco@example.it",
        "subject": None,
        "message": "Ciao!",
        "order_code": "ORD-9",
    }


@pytest.mark.asyncio
async def test_missing_url_makes_no_call() -> None:
    http = FakeRelayHttpClient()

    with pytest.raises(ConfigurationError, match="APPS_SCRIPT_URL not configured"):
        await _use_case(http, url="").execute(MESSAGE)
    assert http.calls == []


@pytest.mark.asyncio
async def test_timeout_is_translated() -> None:
    http = FakeRelayHttpClient([UpstreamTimeoutError("apps_script timed out after 15s")])

    with pytest.raises(UpstreamTimeoutError, match=r"Upstream error \(Apps Script timed out\)"):
        await _use_case(http).execute(MESSAGE)


@pytest.mark.asyncio
async def test_unreachable_is_translated() -> None:
    http = FakeRelayHttpClient([TransportError("Name or service not known")])

    with pytest.raises(TransportError) as exc_info:
        await _use_case(http).execute(MESSAGE)
    assert exc_info.value.message == "Upstream error (Apps Script unreachable)"
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_http_error_uses_upstream_error_field() -> None:
    http = FakeRelayHttpClient([failed_result({"error": "Quota exceeded"}, 429)])

    with pytest.raises(UpstreamHTTPError, match="Quota exceeded") as exc_info:
        await _use_case(http).execute(MESSAGE)
    assert exc_info.value.upstream_status == 429
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_http_error_falls_back_to_detail_then_status() -> None:
    http = FakeRelayHttpClient(
        [failed_result({"detail": "Bad sheet"}, 500), failed_result({}, 503)]
    )
    use_case = _use_case(http)

    with pytest.raises(UpstreamHTTPError, match="Bad sheet"):
        await use_case.execute(MESSAGE)
    with pytest.raises(UpstreamHTTPError, match="Apps Script HTTP 503"):
        await use_case.execute(MESSAGE)


@pytest.mark.asyncio
async def test_http_error_with_opaque_body_includes_snippet() -> None:
    html = "<html>" + "x" * 500 + "</html>"
    http = FakeRelayHttpClient([failed_result(html, 502, structured=False)])

    with pytest.raises(UpstreamHTTPError) as exc_info:
        await _use_case(http).execute(MESSAGE)

    message = exc_info.value.message
    assert message.startswith("Apps Script returned non-JSON (HTTP 502). Snippet: <html>")
    assert len(message.split("Snippet: ", 1)[1]) == 300


@pytest.mark.asyncio
async def test_logical_error_on_ok_false() -> None:
    http = FakeRelayHttpClient(
        [ok_result({"ok": False, "error": "Invalid sheet"}), ok_result({"ok": False})]
    )
    use_case = _use_case(http)

    with pytest.raises(UpstreamLogicalError, match="Invalid sheet"):
        await use_case.execute(MESSAGE)
    with pytest.raises(UpstreamLogicalError, match="Apps Script error"):
        await use_case.execute(MESSAGE)


@pytest.mark.asyncio
async def test_opaque_success_body_is_accepted() -> None:
    http = FakeRelayHttpClient([ok_result("done")])

    await _use_case(http).execute(MESSAGE)

    assert len(http.calls) == 1
