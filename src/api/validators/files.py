"""Validador de arquivos enviados para upload."""

from __future__ import annotations

from pathlib import PurePath

from utils.errors import ValidationError

FILE_FIELD = "file"


def file_extension(file_name: str) -> str:
    """Extensão em minúsculas, sem ponto ("" se não houver)."""
    return PurePath(file_name).suffix[1:].lower()


def validate_upload_filename(file_name: str | None, allowed_extensions: tuple[str, ...]) -> str:
    """Valida presença e extensão; devolve o nome base do arquivo.

    Caminhos enviados pelo cliente são reduzidos ao nome base, para o
    staging local nunca sair do diretório de uploads.

    Raises:
        ValidationError: arquivo ausente ou extensão fora da allow-list.
    """
    base_name = PurePath((file_name or "").replace("\\", "/")).name
    if not base_name:
        raise ValidationError(f"No file provided (field name: {FILE_FIELD})")

    extension = file_extension(base_name)
    if extension not in allowed_extensions:
        raise ValidationError(
            f"File type .{extension} not allowed. Allowed: {', '.join(allowed_extensions)}"
        )
    return base_name
