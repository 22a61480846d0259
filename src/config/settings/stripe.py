"""Settings do Stripe (Checkout + webhooks)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

STRIPE_API_VERSION: str = "2024-06-20"
DEFAULT_CURRENCY: str = "eur"


@dataclass(frozen=True)
class StripeSettings:
    """Configurações do Stripe.

    Attributes:
        secret_key: Chave secreta (sk_test_... ou sk_live_...)
        webhook_secret: Segredo de assinatura do endpoint de webhook (whsec_...)
        payment_method_configuration: Config de meios de pagamento (ex: com PayPal)
        api_version: Versão fixa da API
        currency: Moeda do line item único do checkout
    """

    secret_key: str = ""
    webhook_secret: str = ""
    payment_method_configuration: str = ""
    api_version: str = STRIPE_API_VERSION
    currency: str = DEFAULT_CURRENCY

    @property
    def configured(self) -> bool:
        return bool(self.secret_key)

    @property
    def key_mode(self) -> str:
        """LIVE para chaves sk_live_, TEST caso contrário."""
        return "LIVE" if self.secret_key.startswith("sk_live_") else "TEST"

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.secret_key:
            errors.append("STRIPE_SECRET_KEY não configurado")

        if self.webhook_secret and not self.webhook_secret.startswith("whsec_"):
            errors.append("STRIPE_WEBHOOK_SECRET deve começar com whsec_")

        if len(self.currency) != 3:
            errors.append(f"STRIPE_CURRENCY inválida: {self.currency}")

        return errors


def _load_from_env() -> StripeSettings:
    """Carrega StripeSettings de variáveis de ambiente."""
    return StripeSettings(
        secret_key=os.getenv("STRIPE_SECRET_KEY", "").strip(),
        webhook_secret=os.getenv("STRIPE_WEBHOOK_SECRET", "").strip(),
        payment_method_configuration=os.getenv("STRIPE_PMC_ID", "").strip(),
        api_version=os.getenv("STRIPE_API_VERSION", STRIPE_API_VERSION),
        currency=os.getenv("STRIPE_CURRENCY", DEFAULT_CURRENCY).lower(),
    )


@lru_cache(maxsize=1)
def get_stripe_settings() -> StripeSettings:
    """Retorna instância cacheada de StripeSettings."""
    return _load_from_env()
