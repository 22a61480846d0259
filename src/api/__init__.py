"""API: camada de borda HTTP do relay.

Responsabilidades:
- Receber requests do frontend da loja e webhooks do Stripe
- Validar payloads e limites antes de qualquer chamada a upstream
- Traduzir erros do relay em respostas JSON uniformes

Subpastas:
- validators/: checagens puras sobre a entrada não confiável
- routes/: endpoints HTTP agrupados por domínio (montados em /api)

NÃO PODE conter: chamadas diretas a upstream, leitura de env, regras de negócio.
"""
