"""Arquivo armazenado no Google Drive."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"


class DriveFile(BaseModel):
    """Metadados de um arquivo enviado ao Drive."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str
    mime_type: str = Field(default="application/octet-stream", alias="mimeType")
    size: int = 0
    web_view_link: str | None = Field(default=None, alias="webViewLink")
    parents: list[str] = Field(default_factory=list)
