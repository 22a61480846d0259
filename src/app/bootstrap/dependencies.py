"""Providers de use cases para as rotas (FastAPI `Depends`).

Cada provider monta o use case com os clients singleton e as settings
cacheadas. Testes substituem via `app.dependency_overrides`.
"""

from __future__ import annotations

from app.bootstrap.clients import (
    create_http_client,
    create_payment_gateway,
    create_storage_client,
)
from app.use_cases.checkout import CreateCheckoutSessionUseCase, RetrieveCheckoutSessionUseCase
from app.use_cases.contact import RelayContactMessageUseCase
from app.use_cases.files import UploadFileToStorageUseCase
from app.use_cases.hooks import RelayOrderCreatedUseCase
from app.use_cases.payments import NotifyPaymentFailedUseCase, ProcessStripeWebhookUseCase
from config.settings import (
    get_base_settings,
    get_drive_settings,
    get_relay_settings,
    get_stripe_settings,
)


def get_contact_use_case() -> RelayContactMessageUseCase:
    return RelayContactMessageUseCase(create_http_client(), get_relay_settings())


def get_order_relay_use_case() -> RelayOrderCreatedUseCase:
    return RelayOrderCreatedUseCase(create_http_client(), get_relay_settings())


def get_upload_use_case() -> UploadFileToStorageUseCase:
    return UploadFileToStorageUseCase(create_storage_client(), get_drive_settings())


def get_create_checkout_use_case() -> CreateCheckoutSessionUseCase:
    return CreateCheckoutSessionUseCase(
        create_payment_gateway(),
        get_stripe_settings(),
        get_base_settings(),
    )


def get_retrieve_checkout_use_case() -> RetrieveCheckoutSessionUseCase:
    return RetrieveCheckoutSessionUseCase(create_payment_gateway())


def get_stripe_webhook_use_case() -> ProcessStripeWebhookUseCase:
    return ProcessStripeWebhookUseCase(create_payment_gateway())


def get_notify_payment_failed_use_case() -> NotifyPaymentFailedUseCase:
    return NotifyPaymentFailedUseCase(create_http_client(), get_relay_settings())
