"""Use case de upload: staging local → Google Drive.

O arquivo temporário é removido em todo caminho de saída, com sucesso
ou erro. Uploads simultâneos com o mesmo nome colidem no staging local
(caso aceito; não há lock).

O limite de tamanho é checado ao copiar para o staging, depois que o
Starlette já gravou o corpo multipart inteiro no próprio spool. Um
arquivo acima do limite ocupa até o dobro do seu tamanho em disco
temporário antes do 413.
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from app.observability import get_correlation_id
from utils.errors import ConfigurationError, RelayError, ValidationError

if TYPE_CHECKING:
    from app.domain.storage import DriveFile
    from app.protocols.file_storage import FileStorageProtocol
    from config.settings import DriveSettings

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(file_name: str, declared: str | None = None) -> str:
    """MIME pelo nome do arquivo, senão o declarado pelo cliente."""
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or declared or DEFAULT_MIME_TYPE


class UploadFileToStorageUseCase:
    """Faz staging do arquivo com limite de tamanho e envia ao Drive."""

    def __init__(self, storage: FileStorageProtocol, settings: DriveSettings) -> None:
        self._storage = storage
        self._settings = settings

    def require_staging_folder(self) -> str:
        """Id da pasta de staging no Drive; checado antes de ler o arquivo."""
        staging_id = self._settings.staging_folder_id
        if not staging_id:
            raise ConfigurationError("DRIVE_STAGING_FOLDER_ID not set")
        return staging_id

    async def execute(
        self,
        *,
        file_name: str,
        stream: BinaryIO,
        content_type: str | None = None,
    ) -> DriveFile:
        """Executa o upload de um arquivo já validado pelo nome.

        Raises:
            ConfigurationError: DRIVE_STAGING_FOLDER_ID ausente.
            ValidationError: arquivo acima do limite (413).
            RelayError: qualquer falha no Drive, inclusive credencial ausente
                ("Upload failed" + details).
        """
        staging_id = self.require_staging_folder()

        local_path = self._settings.upload_tmp_dir / Path(file_name).name
        try:
            size = await asyncio.to_thread(self._stage, stream, local_path)
            logger.info(
                "upload_staged",
                extra={"size_bytes": size, "correlation_id": get_correlation_id()},
            )
            return await self._storage.upload_file(
                local_path=local_path,
                file_name=file_name,
                mime_type=guess_mime_type(file_name, content_type),
                parent_id=staging_id,
            )
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception(
                "upload_failed",
                extra={"error_type": type(exc).__name__, "correlation_id": get_correlation_id()},
            )
            raise RelayError("Upload failed", detail={"details": str(exc)}) from exc
        finally:
            local_path.unlink(missing_ok=True)

    def _stage(self, stream: BinaryIO, local_path: Path) -> int:
        max_bytes = self._settings.max_upload_bytes
        local_path.parent.mkdir(parents=True, exist_ok=True)
        written = 0
        with local_path.open("wb") as target:
            while chunk := stream.read(CHUNK_SIZE):
                written += len(chunk)
                if written > max_bytes:
                    raise ValidationError(
                        f"File too large. Maximum size is {self._settings.max_upload_mb} MB",
                        status_code=413,
                    )
                target.write(chunk)
        return written
