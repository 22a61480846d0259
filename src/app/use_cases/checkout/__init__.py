"""Use cases do Stripe Checkout."""

from .create_checkout_session import CreateCheckoutSessionUseCase
from .retrieve_checkout_session import RetrieveCheckoutSessionUseCase, summarize_session

__all__ = [
    "CreateCheckoutSessionUseCase",
    "RetrieveCheckoutSessionUseCase",
    "summarize_session",
]
