"""Settings de CORS.

Origens autorizadas a chamar o relay a partir do navegador.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_ALLOWED_ORIGINS: tuple[str, ...] = (
    "http://localhost:5173",
    "http://localhost:3000",
    "https://printora.it",
    "https://www.printora.it",
)

ALLOWED_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")

# X-Relay-Token precisa passar pelo preflight (o filtro do Make lê o header)
ALLOWED_HEADERS: tuple[str, ...] = (
    "Content-Type",
    "Authorization",
    "Accept",
    "X-Relay-Token",
    "X-Correlation-Id",
)


@dataclass(frozen=True)
class CorsSettings:
    """Configurações de CORS.

    Attributes:
        allowed_origins: Origens aceitas (sem duplicatas, ordem preservada)
        allow_credentials: Envia Access-Control-Allow-Credentials
    """

    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)
    allow_credentials: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.allowed_origins:
            errors.append("CORS_ALLOWED_ORIGINS não pode ser vazio")
        if self.allow_credentials and "*" in self.allowed_origins:
            errors.append("CORS_ALLOWED_ORIGINS não aceita '*' com credenciais")
        return errors


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    origins = [item.strip().rstrip("/") for item in raw.split(",") if item.strip()]
    return tuple(dict.fromkeys(origins))


def _load_from_env() -> CorsSettings:
    """Carrega CorsSettings de variáveis de ambiente."""
    return CorsSettings(
        allowed_origins=_parse_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
    )


@lru_cache(maxsize=1)
def get_cors_settings() -> CorsSettings:
    """Retorna instância cacheada de CorsSettings."""
    return _load_from_env()
