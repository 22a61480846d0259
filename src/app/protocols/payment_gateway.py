"""Contrato do gateway de pagamento (Stripe Checkout)."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PaymentGatewayProtocol(Protocol):
    """Operações de checkout e verificação de webhook.

    Objetos do provider são devolvidos como dicts simples.
    """

    async def create_checkout_session(self, params: dict[str, Any]) -> dict[str, Any]:
        """Cria sessão de checkout com os parâmetros já montados."""
        ...

    async def retrieve_checkout_session(self, session_id: str) -> dict[str, Any]:
        """Busca sessão expandida (payment_intent, customer, breakdown)."""
        ...

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]:
        """Line items da sessão (até 100, com produto expandido)."""
        ...

    def verify_webhook(self, payload: bytes, signature: str | None) -> dict[str, Any]:
        """Verifica a assinatura e devolve o evento parseado.

        Raises:
            SignatureError: assinatura ausente, inválida ou fora da tolerância.
        """
        ...
