"""Fake in-memory do storage de arquivos (Drive) para testes deterministas."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from uuid import uuid4

from app.domain.storage import DriveFile


class FakeFileStorage:
    """Implementa o protocolo sem IO externo.

    `upload_file` lê o arquivo staged para que os testes confiram o
    conteúdo antes da remoção do temporário.
    """

    def __init__(self, *, fail_with: Exception | None = None) -> None:
        self.fail_with = fail_with
        self.uploads: list[dict[str, Any]] = []
        self.folders: dict[str, dict[str, Any]] = {}
        self.parents: dict[str, list[str]] = {}

    async def upload_file(
        self,
        *,
        local_path: Path,
        file_name: str,
        mime_type: str,
        parent_id: str | None,
    ) -> DriveFile:
        content = local_path.read_bytes()
        self.uploads.append(
            {
                "local_path": local_path,
                "file_name": file_name,
                "mime_type": mime_type,
                "parent_id": parent_id,
                "content": content,
            }
        )
        if self.fail_with is not None:
            raise self.fail_with
        file_id = uuid4().hex[:12]
        self.parents[file_id] = [parent_id] if parent_id else []
        return DriveFile(
            id=file_id,
            name=file_name,
            mime_type=mime_type,
            size=len(content),
            web_view_link=f"https://drive.google.com/fake/{file_id}",
            parents=self.parents[file_id],
        )

    async def create_folder(self, *, name: str, parent_id: str | None) -> dict[str, Any]:
        folder_id = f"folder-{len(self.folders) + 1}"
        self.folders[folder_id] = {"id": folder_id, "name": name, "parent_id": parent_id}
        return {"id": folder_id, "name": name}

    async def find_folder(self, *, name: str, parent_id: str | None) -> dict[str, Any] | None:
        for folder in self.folders.values():
            if folder["name"] == name and folder["parent_id"] == parent_id:
                return {"id": folder["id"], "name": name}
        return None

    async def ensure_folder_path(self, *, root_id: str, segments: list[str]) -> str:
        current = root_id
        for segment in segments:
            existing = await self.find_folder(name=segment, parent_id=current)
            current = (existing or await self.create_folder(name=segment, parent_id=current))["id"]
        return current

    async def move_file(
        self,
        *,
        file_id: str,
        new_parent_id: str,
        keep_old_parents: bool = False,
    ) -> dict[str, Any]:
        previous = self.parents.get(file_id, []) if keep_old_parents else []
        self.parents[file_id] = [*previous, new_parent_id]
        return {"id": file_id, "parents": self.parents[file_id]}

    async def get_file(self, file_id: str) -> dict[str, Any]:
        return {"id": file_id, "parents": self.parents.get(file_id, [])}
