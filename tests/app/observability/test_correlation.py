"""Testes de correlation_id e métricas via log."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_latency,
    record_upstream_outcome,
    reset_correlation_id,
    set_correlation_id,
)


def test_scope_sets_and_restores() -> None:
    assert get_correlation_id() == ""

    with correlation_scope("corr-1") as cid:
        assert cid == "corr-1"
        assert get_correlation_id() == "corr-1"

    assert get_correlation_id() == ""


@pytest.mark.parametrize("incoming", [None, "", "   "])
def test_blank_ids_are_generated(incoming) -> None:
    with correlation_scope(incoming) as cid:
        assert len(cid) == 36


def test_long_ids_are_truncated() -> None:
    token = set_correlation_id("x" * 500)
    try:
        assert len(get_correlation_id()) == 128
    finally:
        reset_correlation_id(token)


@pytest.mark.asyncio
async def test_concurrent_tasks_keep_their_own_id() -> None:
    async def _worker(value: str) -> str:
        with correlation_scope(value):
            await asyncio.sleep(0.01)
            return get_correlation_id()

    results = await asyncio.gather(_worker("a"), _worker("b"))

    assert results == ["a", "b"]


def test_record_latency_uses_context_id(caplog) -> None:
    with caplog.at_level(logging.INFO), correlation_scope("corr-lat"):
        record_latency("http_relay", "POST", 12.3456)

    record = next(r for r in caplog.records if r.getMessage() == "metric_latency")
    assert record.latency_ms == 12.35
    assert record.correlation_id == "corr-lat"


def test_record_upstream_outcome(caplog) -> None:
    with caplog.at_level(logging.INFO):
        record_upstream_outcome("make", "http_error", status_code=503)

    record = next(r for r in caplog.records if r.getMessage() == "metric_upstream_outcome")
    assert record.upstream == "make"
    assert record.outcome == "http_error"
    assert record.status_code == 503
