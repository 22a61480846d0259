"""Storage: implementação concreta do Google Drive."""

from app.infra.storage.google_drive_client import GoogleDriveClient, escape_query_value

__all__ = ["GoogleDriveClient", "escape_query_value"]
