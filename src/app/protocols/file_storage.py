"""Contrato de armazenamento de arquivos (Google Drive).

Mantemos o protocolo separado para que o caso de uso de upload seja
testado sem a API do Google.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from app.domain.storage import DriveFile


@runtime_checkable
class FileStorageProtocol(Protocol):
    """Operações de arquivo e pasta usadas pelo relay."""

    async def upload_file(
        self,
        *,
        local_path: Path,
        file_name: str,
        mime_type: str,
        parent_id: str | None,
    ) -> DriveFile:
        """Envia arquivo local para a pasta indicada."""
        ...

    async def create_folder(self, *, name: str, parent_id: str | None) -> dict[str, Any]:
        """Cria pasta sob o parent."""
        ...

    async def find_folder(self, *, name: str, parent_id: str | None) -> dict[str, Any] | None:
        """Primeira pasta com o nome exato sob o parent, ou None."""
        ...

    async def ensure_folder_path(self, *, root_id: str, segments: list[str]) -> str:
        """Garante o caminho de pastas e devolve o id da última."""
        ...

    async def move_file(
        self,
        *,
        file_id: str,
        new_parent_id: str,
        keep_old_parents: bool = False,
    ) -> dict[str, Any]:
        """Move arquivo para outro parent."""
        ...

    async def get_file(self, file_id: str) -> dict[str, Any]:
        """Metadados do arquivo."""
        ...
