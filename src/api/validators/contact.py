"""Validador do formulário de contato.

Reporta a primeira regra violada, na ordem: presença, e-mail, tamanho.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from api.validators.limits import (
    EMAIL_PATTERN,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SUBJECT_LENGTH,
)
from app.domain.contact import ContactMessage
from utils.errors import ValidationError

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def _optional_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def validate_contact_message(data: Mapping[str, Any] | None) -> ContactMessage:
    """Valida o corpo do formulário de contato.

    Raises:
        ValidationError: "Missing fields", "Invalid email",
            "Field too long" ou "Message too long".
    """
    data = data or {}
    name, email, message = data.get("name"), data.get("email"), data.get("message")
    if not name or not email or not message:
        raise ValidationError("Missing fields")

    email = str(email)
    if not is_valid_email(email):
        raise ValidationError("Invalid email")

    name = str(name)
    subject = _optional_text(data.get("subject"))
    if len(name) > MAX_NAME_LENGTH or len(subject or "") > MAX_SUBJECT_LENGTH:
        raise ValidationError("Field too long")

    message = str(message)
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError("Message too long")

    return ContactMessage(
        name=name,
        email=email,
        message=message,
        subject=subject,
        order_code=_optional_text(data.get("order_code")),
    )
