"""Factories de clientes externos: HTTP, Google Drive e Stripe.

Cada factory é um singleton (lru_cache); os clients não guardam estado
de requisição.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.infra.http import HttpRelayClient
from app.infra.payments import StripeCheckoutGateway
from app.infra.storage import GoogleDriveClient
from config.settings import get_drive_settings, get_stripe_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_http_client() -> HttpRelayClient:
    """Cria o client de chamadas de saída (Apps Script, Make)."""
    return HttpRelayClient()


@lru_cache(maxsize=1)
def create_storage_client() -> GoogleDriveClient:
    """Cria client do Google Drive.

    O serviço da API só é construído na primeira operação; sem key file
    a operação falha com ConfigurationError.
    """
    settings = get_drive_settings()
    if not settings.service_account_json_path:
        logger.warning(
            "drive_client_without_credentials",
            extra={"reason": "GOOGLE_SERVICE_ACCOUNT_JSON_PATH not set"},
        )
    return GoogleDriveClient(service_account_json_path=settings.service_account_json_path)


@lru_cache(maxsize=1)
def create_payment_gateway() -> StripeCheckoutGateway:
    """Cria gateway do Stripe com as settings do ambiente."""
    return StripeCheckoutGateway(get_stripe_settings())
