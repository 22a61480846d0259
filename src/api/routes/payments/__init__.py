"""Rotas de pagamento (webhook do Stripe)."""
