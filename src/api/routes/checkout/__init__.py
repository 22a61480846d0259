"""Rotas do Stripe Checkout."""
