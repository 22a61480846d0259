"""Payments: implementação concreta do gateway Stripe."""

from app.infra.payments.stripe_gateway import StripeCheckoutGateway

__all__ = ["StripeCheckoutGateway"]
