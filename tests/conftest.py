"""Configuração do pytest para o projeto printora-relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_cors_settings,
    get_drive_settings,
    get_relay_settings,
    get_stripe_settings,
)

_SETTINGS_GETTERS = (
    get_base_settings,
    get_cors_settings,
    get_drive_settings,
    get_relay_settings,
    get_stripe_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    """Cada teste lê o ambiente de novo (monkeypatch.setenv funciona)."""
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
