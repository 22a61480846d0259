"""Agregador de settings do relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por upstream para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.cors import (
    ALLOWED_HEADERS,
    ALLOWED_METHODS,
    CorsSettings,
    get_cors_settings,
)
from config.settings.drive import (
    DriveSettings,
    get_drive_settings,
)
from config.settings.relay import (
    RelaySettings,
    get_relay_settings,
)
from config.settings.stripe import (
    STRIPE_API_VERSION,
    StripeSettings,
    get_stripe_settings,
)

__all__ = [
    "ALLOWED_HEADERS",
    "ALLOWED_METHODS",
    "STRIPE_API_VERSION",
    "BaseSettings",
    "CorsSettings",
    "DriveSettings",
    "Environment",
    "RelaySettings",
    "StripeSettings",
    "get_base_settings",
    "get_cors_settings",
    "get_drive_settings",
    "get_relay_settings",
    "get_stripe_settings",
]
