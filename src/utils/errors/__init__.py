"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    RelayError,
    SignatureError,
    TransportError,
    UpstreamHTTPError,
    UpstreamLogicalError,
    UpstreamTimeoutError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "RelayError",
    "SignatureError",
    "TransportError",
    "UpstreamHTTPError",
    "UpstreamLogicalError",
    "UpstreamTimeoutError",
    "ValidationError",
]
