"""Validators por rota: checagens puras sobre a entrada não confiável.

Cada função devolve o payload tipado ou levanta ValidationError com a
primeira regra violada, antes de qualquer chamada a upstream.
"""

from api.validators.checkout import validate_checkout_request, validate_session_id
from api.validators.contact import is_valid_email, validate_contact_message
from api.validators.files import file_extension, validate_upload_filename
from api.validators.hooks import validate_order_created

__all__ = [
    "file_extension",
    "is_valid_email",
    "validate_checkout_request",
    "validate_contact_message",
    "validate_order_created",
    "validate_session_id",
    "validate_upload_filename",
]
