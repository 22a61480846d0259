"""Settings dos relays para a plataforma de automação.

Endpoints do Apps Script (formulários/notificações) e do webhook
"order-created" do Make, com o segredo compartilhado enviado em
X-Relay-Token.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class RelaySettings:
    """Configurações dos relays HTTP.

    Attributes:
        apps_script_url: URL do Web App do Apps Script (contato e falhas de pagamento)
        make_order_created_url: URL do webhook "order-created" do Make
        relay_token: Segredo compartilhado enviado em X-Relay-Token
        contact_timeout_seconds: Timeout do relay de contato
        order_timeout_seconds: Timeout do relay de pedido criado
        notify_timeout_seconds: Timeout do aviso de falha de pagamento
    """

    apps_script_url: str = ""
    make_order_created_url: str = ""
    relay_token: str = ""

    contact_timeout_seconds: float = 15.0
    order_timeout_seconds: float = 8.0
    notify_timeout_seconds: float = 10.0

    @property
    def apps_script_configured(self) -> bool:
        return bool(self.apps_script_url)

    @property
    def make_configured(self) -> bool:
        return bool(self.make_order_created_url)

    @property
    def relay_token_configured(self) -> bool:
        return bool(self.relay_token)

    def validate(self) -> list[str]:
        """Valida timeouts e formato das URLs configuradas.

        URLs ausentes não são erro de boot: cada rota responde 500
        de configuração quando precisar delas.
        """
        errors: list[str] = []

        for name, url in (
            ("APPS_SCRIPT_URL", self.apps_script_url),
            ("MAKE_ORDER_CREATED_WEBHOOK_URL", self.make_order_created_url),
        ):
            if url and not url.startswith(("http://", "https://")):
                errors.append(f"{name} deve começar com http:// ou https://")

        for name, value in (
            ("CONTACT_RELAY_TIMEOUT_SECONDS", self.contact_timeout_seconds),
            ("ORDER_RELAY_TIMEOUT_SECONDS", self.order_timeout_seconds),
            ("PAYMENT_NOTIFY_TIMEOUT_SECONDS", self.notify_timeout_seconds),
        ):
            if value <= 0:
                errors.append(f"{name} deve ser > 0")

        return errors


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings de variáveis de ambiente."""
    return RelaySettings(
        apps_script_url=os.getenv("APPS_SCRIPT_URL", "").strip(),
        make_order_created_url=os.getenv("MAKE_ORDER_CREATED_WEBHOOK_URL", "").strip(),
        relay_token=os.getenv("WEBHOOK_RELAY_TOKEN", "").strip(),
        contact_timeout_seconds=float(os.getenv("CONTACT_RELAY_TIMEOUT_SECONDS", "15")),
        order_timeout_seconds=float(os.getenv("ORDER_RELAY_TIMEOUT_SECONDS", "8")),
        notify_timeout_seconds=float(os.getenv("PAYMENT_NOTIFY_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
