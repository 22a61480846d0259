"""Rotas HTTP da API: adapters de entrada do relay.

Responsabilidades:
- Definir endpoints HTTP (contato, hooks, upload, checkout, webhook, health)
- Ler o corpo e delegar aos validators
- Delegar para use_cases via providers do bootstrap
- Traduzir RelayError para a resposta uniforme `{ok: false, error}`

Agregação:
- router.py: registra todos os routers sob /api
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
