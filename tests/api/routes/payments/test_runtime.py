"""Testes do controle de tasks de aviso de pagamento."""

from __future__ import annotations

import asyncio

import pytest

from api.routes.payments import runtime


async def _wait_until_tasks_empty(timeout: float = 1.0) -> None:
    start = asyncio.get_running_loop().time()
    while runtime._active_tasks:
        if asyncio.get_running_loop().time() - start > timeout:
            break
        await asyncio.sleep(0.01)


@pytest.fixture(autouse=True)
async def _cleanup_active_tasks() -> None:
    yield
    for task in list(runtime._active_tasks):
        task.cancel()
    if runtime._active_tasks:
        await asyncio.gather(*list(runtime._active_tasks), return_exceptions=True)
    runtime._active_tasks.clear()


@pytest.mark.asyncio
async def test_schedule_runs_coroutine_and_cleans_active_set() -> None:
    event = asyncio.Event()

    async def _work() -> None:
        event.set()

    runtime.schedule_notice_task(correlation_id="corr-1", coroutine=_work())

    assert runtime.active_task_count() == 1
    await asyncio.wait_for(event.wait(), timeout=1.0)
    await _wait_until_tasks_empty()
    assert runtime.active_task_count() == 0


@pytest.mark.asyncio
async def test_task_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level("ERROR"):
        runtime.schedule_notice_task(correlation_id="corr-2", coroutine=_boom())
        await _wait_until_tasks_empty()

    assert "payment_notice_task_failed" in caplog.text


@pytest.mark.asyncio
async def test_drain_returns_immediately_when_empty() -> None:
    await runtime.drain_notice_tasks(timeout_seconds=0.01)

    assert runtime.active_task_count() == 0


@pytest.mark.asyncio
async def test_drain_cancels_tasks_past_timeout(caplog: pytest.LogCaptureFixture) -> None:
    async def _slow() -> None:
        await asyncio.sleep(10)

    runtime.schedule_notice_task(correlation_id="corr-3", coroutine=_slow())

    with caplog.at_level("WARNING"):
        await runtime.drain_notice_tasks(timeout_seconds=0.05)

    assert "payment_notice_shutdown_cancelled" in caplog.text
    await _wait_until_tasks_empty()
    assert runtime.active_task_count() == 0
