"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e expõe os providers que conectam clients concretos aos use cases.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_cors_settings,
    get_drive_settings,
    get_relay_settings,
    get_stripe_settings,
)

# Nome do serviço para logs e métricas
SERVICE_NAME = "printora_relay"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço, antes de criar o app.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        environment=get_base_settings().environment,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging em DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Junta os erros de validate() de todas as settings, prefixados pelo domínio."""
    errors: list[str] = []
    sources = (
        ("base", get_base_settings()),
        ("cors", get_cors_settings()),
        ("relay", get_relay_settings()),
        ("stripe", get_stripe_settings()),
        ("drive", get_drive_settings()),
    )
    for prefix, settings in sources:
        errors.extend(f"{prefix}: {error}" for error in settings.validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def log_startup_banner() -> None:
    """Registra versão da API do Stripe, tipo de chave e upstreams ausentes."""
    stripe_settings = get_stripe_settings()
    relay = get_relay_settings()
    logger.info(
        "stripe_configured",
        extra={
            "api_version": stripe_settings.api_version,
            "key_mode": stripe_settings.key_mode,
            "configured": stripe_settings.configured,
        },
    )
    if not relay.make_configured:
        logger.warning(
            "make_webhook_not_configured",
            extra={"reason": "MAKE_ORDER_CREATED_WEBHOOK_URL not set; /api/hooks/order-created will fail"},
        )
    if not relay.relay_token_configured:
        logger.warning(
            "relay_token_not_configured",
            extra={"reason": "WEBHOOK_RELAY_TOKEN not set; X-Relay-Token must come from the client"},
        )
