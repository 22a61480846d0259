"""Use cases dos webhooks de automação."""

from .relay_order_created import RELAY_TOKEN_HEADER, RelayOrderCreatedUseCase

__all__ = ["RELAY_TOKEN_HEADER", "RelayOrderCreatedUseCase"]
