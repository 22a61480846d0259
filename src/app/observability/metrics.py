"""Registro de métricas via structured logging.

As métricas saem como logs estruturados e são agregadas depois
(ex: Cloud Logging / BigQuery).

Métricas suportadas:
- Latência: tempo de cada chamada a upstream
- Resultado de upstream: contador por upstream e desfecho

Uso:
    start = time.perf_counter()
    # ... chamada ...
    record_latency("http_relay", "POST", (time.perf_counter() - start) * 1000)
    record_upstream_outcome("apps_script", "ok")
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "http_relay", "google_drive")
        operation: Nome da operação (ex: "POST", "upload_file")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação; usa o do contexto se None
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_upstream_outcome(
    upstream: str,
    outcome: str,
    status_code: int | None = None,
) -> None:
    """Registra o desfecho de uma chamada a upstream.

    Args:
        upstream: "apps_script", "make", "stripe" ou "google_drive"
        outcome: "ok", "http_error", "logical_error", "timeout", "transport_error"
        status_code: Status HTTP devolvido, quando houver
    """
    logger.info(
        "metric_upstream_outcome",
        extra={
            "metric_type": "upstream_outcome",
            "upstream": upstream,
            "outcome": outcome,
            "status_code": status_code,
            "correlation_id": get_correlation_id(),
        },
    )
