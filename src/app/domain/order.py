"""Evento de pedido criado, repassado ao cenário do Make."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OrderCreated(BaseModel):
    """Identificador do pedido recém-criado no frontend.

    `order_id` mantém o tipo recebido (int, float ou str); 0 é um id válido.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    order_id: int | float | str
