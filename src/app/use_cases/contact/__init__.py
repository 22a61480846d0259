"""Use cases do formulário de contato."""

from .relay_contact_message import RelayContactMessageUseCase

__all__ = ["RelayContactMessageUseCase"]
