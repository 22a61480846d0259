"""Controle das tasks de aviso de pagamento falho.

O webhook responde ao Stripe sem esperar o aviso ao Apps Script; as
tasks pendentes são aguardadas no shutdown.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

MAX_CONCURRENT_NOTICES = 20

_notice_semaphore: asyncio.Semaphore | None = None
_active_tasks: set[asyncio.Task[Any]] = set()


def _semaphore() -> asyncio.Semaphore:
    global _notice_semaphore
    if _notice_semaphore is None:
        _notice_semaphore = asyncio.Semaphore(MAX_CONCURRENT_NOTICES)
    return _notice_semaphore


def active_task_count() -> int:
    return len(_active_tasks)


def schedule_notice_task(*, correlation_id: str, coroutine: Awaitable[Any]) -> asyncio.Task[Any]:
    """Agenda o aviso em background com limite de concorrência."""
    task = asyncio.create_task(_run_with_limit(coroutine))
    _active_tasks.add(task)
    task.add_done_callback(_on_notice_task_done)
    logger.info(
        "payment_notice_scheduled",
        extra={"correlation_id": correlation_id, "active_tasks": len(_active_tasks)},
    )
    return task


async def _run_with_limit(coroutine: Awaitable[Any]) -> None:
    async with _semaphore():
        await coroutine


def _on_notice_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            logger.error(
                "payment_notice_task_failed",
                extra={"error_type": type(exc).__name__, "active_tasks": len(_active_tasks)},
            )


async def drain_notice_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda avisos pendentes no shutdown; cancela o que passar do prazo."""
    if not _active_tasks:
        return

    pending_now = list(_active_tasks)
    logger.info(
        "payment_notice_shutdown_wait",
        extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning("payment_notice_shutdown_cancelled", extra={"cancelled_tasks": len(pending)})
