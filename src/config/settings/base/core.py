"""Settings base do relay.

Configurações comuns a todas as rotas: ambiente, nome do serviço e
URLs do frontend usadas para montar links de redirecionamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_FRONTEND_URL = "https://printora.it"
DEFAULT_DEV_FRONTEND_URL = "http://localhost:5173"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        frontend_url: URL pública da loja (produção)
        dev_frontend_url: URL do frontend local (fora de produção)
        port: Porta HTTP do uvicorn
    """

    environment: Environment = "development"
    service_name: str = "printora-relay"
    debug: bool = False

    frontend_url: str = DEFAULT_FRONTEND_URL
    dev_frontend_url: str = DEFAULT_DEV_FRONTEND_URL

    port: int = 5000

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    @property
    def redirect_base_url(self) -> str:
        """Base dos links de retorno do checkout (sem barra final)."""
        base = self.frontend_url if self.is_production else self.dev_frontend_url
        return base.rstrip("/")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.frontend_url.startswith(("http://", "https://")):
            errors.append("FRONTEND_URL deve começar com http:// ou https://")

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "printora-relay"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        frontend_url=os.getenv("FRONTEND_URL") or DEFAULT_FRONTEND_URL,
        dev_frontend_url=os.getenv("DEV_FRONTEND_URL") or DEFAULT_DEV_FRONTEND_URL,
        port=int(os.getenv("PORT", "5000")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
