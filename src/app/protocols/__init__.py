"""Protocolos e contratos do core da aplicação."""

from .file_storage import FileStorageProtocol
from .http_client import RelayHttpClientProtocol
from .payment_gateway import PaymentGatewayProtocol

__all__ = [
    "FileStorageProtocol",
    "PaymentGatewayProtocol",
    "RelayHttpClientProtocol",
]
