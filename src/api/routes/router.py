"""Agregador de rotas: registra todos os routers sob `/api`.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.checkout.router import router as checkout_router
from api.routes.contact.router import router as contact_router
from api.routes.files.router import router as files_router
from api.routes.health.router import router as health_router
from api.routes.hooks.router import router as hooks_router
from api.routes.payments.router import router as payments_router
from api.routes.payments.router import test_router as payments_test_router

API_PREFIX = "/api"


def create_api_router(*, include_test_routes: bool = False) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        include_test_routes: registra /test-payment-failed (nunca em produção).

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter(prefix=API_PREFIX)

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(contact_router, tags=["contact"])
    api_router.include_router(hooks_router, prefix="/hooks", tags=["hooks"])
    api_router.include_router(files_router, prefix="/files", tags=["files"])
    api_router.include_router(checkout_router, tags=["checkout"])
    api_router.include_router(payments_router, tags=["payments"])

    if include_test_routes:
        api_router.include_router(payments_test_router, tags=["payments"])

    return api_router
