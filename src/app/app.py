"""Entrypoint da aplicação printora-relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 5000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --port 5000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import CorrelationIdMiddleware
from api.routes import create_api_router
from api.routes.payments.runtime import drain_notice_tasks
from app.bootstrap import initialize_app, log_startup_banner, validate_runtime_settings
from config.logging import get_logger
from config.settings import (
    ALLOWED_HEADERS,
    ALLOWED_METHODS,
    get_base_settings,
    get_cors_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    - Registra modo do Stripe e upstreams ausentes

    Shutdown:
    - Aguarda avisos de pagamento pendentes
    """
    base = get_base_settings()
    logger.info(
        "app_starting",
        extra={"service": base.service_name, "environment": base.environment},
    )
    validate_runtime_settings()
    log_startup_banner()

    yield

    logger.info("app_shutting_down", extra={"service": base.service_name})
    await drain_notice_tasks(timeout_seconds=SHUTDOWN_DRAIN_SECONDS)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    cors = get_cors_settings()

    fastapi_app = FastAPI(
        title="printora-relay",
        description="Relay do frontend da loja para Apps Script, Make, Stripe e Google Drive",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )

    fastapi_app.add_middleware(CorrelationIdMiddleware)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors.allowed_origins),
        allow_credentials=cors.allow_credentials,
        allow_methods=list(ALLOWED_METHODS),
        allow_headers=list(ALLOWED_HEADERS),
    )

    # /api/test-payment-failed só existe fora de produção
    fastapi_app.include_router(create_api_router(include_test_routes=not base.is_production))

    logger.info(
        "app_configured",
        extra={"service": base.service_name, "cors_origins": len(cors.allowed_origins)},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    base = get_base_settings()
    logger.info("app_listening", extra={"port": base.port, "environment": base.environment})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=base.port,
        reload=base.is_development,
    )


if __name__ == "__main__":
    main()
