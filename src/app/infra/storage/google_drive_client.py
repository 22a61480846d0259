"""Client concreto de Google Drive para os uploads da loja.

Todas as chamadas usam as flags de Shared Drive; a service account
precisa ser membro do drive com permissão de "Content manager".
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload

from app.domain.storage import FOLDER_MIME_TYPE, DriveFile
from app.observability import get_correlation_id, record_latency
from app.protocols.file_storage import FileStorageProtocol
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

_COMPONENT = "google_drive_client"
_DRIVE_SCOPE = "https://www.googleapis.com/auth/drive"
_CREATED_FIELDS = "id, name, mimeType, size, webViewLink"
_FILE_FIELDS = "id, name, mimeType, size, webViewLink, parents"
_FOLDER_FIELDS = "id, name, webViewLink"


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def escape_query_value(value: str) -> str:
    """Escapa barra invertida e aspas simples para a query `q` do Drive."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


class GoogleDriveClient(FileStorageProtocol):
    """Implementação do protocolo de storage usando Drive API v3.

    O serviço é construído na primeira chamada; sem key file válido a
    operação falha com ConfigurationError.
    """

    __slots__ = ("_key_path", "_service")

    def __init__(self, *, service_account_json_path: str = "", service: Any | None = None) -> None:
        self._key_path = service_account_json_path
        self._service = service

    def _get_service(self) -> Any:
        if self._service is None:
            if not self._key_path or not Path(self._key_path).is_file():
                raise ConfigurationError(
                    "Service account JSON not found. Check GOOGLE_SERVICE_ACCOUNT_JSON_PATH."
                )
            credentials = service_account.Credentials.from_service_account_file(
                self._key_path,
                scopes=[_DRIVE_SCOPE],
            )
            self._service = build("drive", "v3", credentials=credentials, cache_discovery=False)
        return self._service

    async def upload_file(
        self,
        *,
        local_path: Path,
        file_name: str,
        mime_type: str,
        parent_id: str | None,
    ) -> DriveFile:
        started_at = time.perf_counter()
        try:
            data = await asyncio.to_thread(
                self._upload_sync, local_path, file_name, mime_type, parent_id
            )
        except HttpError as exc:
            self._log_error(action="upload_file", exc=exc)
            raise
        finally:
            record_latency(_COMPONENT, "upload_file", (time.perf_counter() - started_at) * 1000)
        return DriveFile.model_validate({**data, "size": int(data.get("size") or 0)})

    async def create_folder(self, *, name: str, parent_id: str | None) -> dict[str, Any]:
        body: dict[str, Any] = {"name": name, "mimeType": FOLDER_MIME_TYPE}
        if parent_id:
            body["parents"] = [parent_id]
        try:
            return await asyncio.to_thread(self._create_folder_sync, body)
        except HttpError as exc:
            self._log_error(action="create_folder", exc=exc)
            raise

    async def find_folder(self, *, name: str, parent_id: str | None) -> dict[str, Any] | None:
        # Nomes de pasta não são únicos no Drive: vence o primeiro resultado.
        query_parts = [
            f"mimeType = '{FOLDER_MIME_TYPE}'",
            f"name = '{escape_query_value(name)}'",
            "trashed = false",
        ]
        if parent_id:
            query_parts.append(f"'{escape_query_value(parent_id)}' in parents")
        try:
            data = await asyncio.to_thread(self._list_sync, " and ".join(query_parts))
        except HttpError as exc:
            self._log_error(action="find_folder", exc=exc)
            raise
        files = data.get("files") or []
        return files[0] if files else None

    async def ensure_folder_path(self, *, root_id: str, segments: list[str]) -> str:
        if not root_id:
            raise ValueError("root_id is required for ensure_folder_path")
        current_parent = root_id
        for segment in segments:
            existing = await self.find_folder(name=segment, parent_id=current_parent)
            if existing:
                current_parent = existing["id"]
                continue
            created = await self.create_folder(name=segment, parent_id=current_parent)
            logger.info(
                "google_drive_folder_created",
                extra={"component": _COMPONENT, "correlation_id": get_correlation_id()},
            )
            current_parent = created["id"]
        return current_parent

    async def move_file(
        self,
        *,
        file_id: str,
        new_parent_id: str,
        keep_old_parents: bool = False,
    ) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(
                self._move_sync, file_id, new_parent_id, keep_old_parents
            )
        except HttpError as exc:
            self._log_error(action="move_file", exc=exc)
            raise

    async def get_file(self, file_id: str) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(self._get_sync, file_id, _FILE_FIELDS)
        except HttpError as exc:
            self._log_error(action="get_file", exc=exc)
            raise

    def _upload_sync(
        self,
        local_path: Path,
        file_name: str,
        mime_type: str,
        parent_id: str | None,
    ) -> dict[str, Any]:
        service = self._get_service()
        body: dict[str, Any] = {"name": file_name}
        if parent_id:
            body["parents"] = [parent_id]
        media = MediaFileUpload(str(local_path), mimetype=mime_type, resumable=True)
        created = (
            service.files()
            .create(body=body, media_body=media, fields=_CREATED_FIELDS, supportsAllDrives=True)
            .execute()
        )
        # O create nem sempre traz webViewLink; relemos os metadados completos.
        return self._get_sync(created["id"], _FILE_FIELDS)

    def _create_folder_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return (
            self._get_service()
            .files()
            .create(body=body, fields=_FOLDER_FIELDS, supportsAllDrives=True)
            .execute()
        )

    def _list_sync(self, query: str) -> dict[str, Any]:
        return (
            self._get_service()
            .files()
            .list(
                q=query,
                fields="files(id, name)",
                includeItemsFromAllDrives=True,
                supportsAllDrives=True,
                spaces="drive",
                pageSize=10,
                corpora="allDrives",
            )
            .execute()
        )

    def _move_sync(self, file_id: str, new_parent_id: str, keep_old_parents: bool) -> dict[str, Any]:
        current = self._get_sync(file_id, "id, parents")
        previous_parents = ",".join(current.get("parents") or [])
        params: dict[str, Any] = {
            "fileId": file_id,
            "addParents": new_parent_id,
            "fields": "id, parents",
            "supportsAllDrives": True,
        }
        if not keep_old_parents and previous_parents:
            params["removeParents"] = previous_parents
        return self._get_service().files().update(**params).execute()

    def _get_sync(self, file_id: str, fields: str) -> dict[str, Any]:
        return (
            self._get_service()
            .files()
            .get(fileId=file_id, fields=fields, supportsAllDrives=True)
            .execute()
        )

    def _log_error(self, *, action: str, exc: HttpError) -> None:
        logger.error(
            "google_drive_http_error",
            extra={
                "component": _COMPONENT,
                "action": action,
                "result": "error",
                "status_code": http_status(exc),
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
