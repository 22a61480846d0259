"""Mensagem de contato enviada pelo formulário da loja."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

CONTACT_EVENT = "CONTACT_MESSAGE"


class ContactMessage(BaseModel):
    """Payload validado do formulário de contato."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    email: str
    message: str
    subject: str | None = None
    order_code: str | None = None

    def to_relay_event(self) -> dict[str, Any]:
        """Corpo enviado ao Apps Script (todos os campos, inclusive vazios)."""
        return {
            "event": CONTACT_EVENT,
            "name": self.name,
            "email": self.email,
            "subject": self.subject,
            "message": self.message,
            "order_code": self.order_code,
        }
