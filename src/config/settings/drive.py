"""Settings do Google Drive (uploads de arquivos de impressão).

Os arquivos chegam primeiro numa pasta de staging do Shared Drive;
a automação do pedido os move depois para a pasta final.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

DEFAULT_ALLOWED_EXTENSIONS: tuple[str, ...] = (
    "pdf",
    "tif",
    "tiff",
    "png",
    "jpg",
    "jpeg",
    "ai",
    "cdr",
)
DEFAULT_MAX_UPLOAD_MB: int = 2048


def _default_tmp_dir() -> Path:
    return Path(tempfile.gettempdir()) / "printora_uploads"


@dataclass(frozen=True)
class DriveSettings:
    """Configurações do Drive e do staging local de uploads.

    Attributes:
        service_account_json_path: Caminho do JSON da service account
        root_folder_id: Pasta raiz dos pedidos no Shared Drive
        staging_folder_id: Pasta de staging dos uploads
        max_upload_mb: Tamanho máximo por arquivo (MB)
        allowed_extensions: Extensões aceitas (minúsculas, sem ponto)
        upload_tmp_dir: Diretório local de staging
    """

    service_account_json_path: str = ""
    root_folder_id: str = ""
    staging_folder_id: str = ""

    max_upload_mb: int = DEFAULT_MAX_UPLOAD_MB
    allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS
    upload_tmp_dir: Path = field(default_factory=_default_tmp_dir)

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @property
    def configured(self) -> bool:
        """Mesmo critério do health check: key + raiz + staging."""
        return bool(
            self.service_account_json_path and self.root_folder_id and self.staging_folder_id
        )

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.max_upload_mb <= 0:
            errors.append("MAX_UPLOAD_MB deve ser > 0")

        if not self.allowed_extensions:
            errors.append("ALLOWED_EXTENSIONS não pode ser vazio")

        if self.service_account_json_path and not Path(self.service_account_json_path).is_file():
            errors.append("GOOGLE_SERVICE_ACCOUNT_JSON_PATH não encontrado")

        return errors


def _parse_extensions(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_EXTENSIONS
    items = (item.strip().lower().lstrip(".") for item in raw.split(","))
    return tuple(dict.fromkeys(item for item in items if item))


def _load_from_env() -> DriveSettings:
    """Carrega DriveSettings de variáveis de ambiente."""
    tmp_dir = os.getenv("UPLOAD_TMP_DIR")
    return DriveSettings(
        service_account_json_path=os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON_PATH", "").strip(),
        root_folder_id=os.getenv("GOOGLE_DRIVE_ROOT_FOLDER_ID", "").strip(),
        staging_folder_id=os.getenv("DRIVE_STAGING_FOLDER_ID", "").strip(),
        max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", str(DEFAULT_MAX_UPLOAD_MB))),
        allowed_extensions=_parse_extensions(os.getenv("ALLOWED_EXTENSIONS")),
        upload_tmp_dir=Path(tmp_dir) if tmp_dir else _default_tmp_dir(),
    )


@lru_cache(maxsize=1)
def get_drive_settings() -> DriveSettings:
    """Retorna instância cacheada de DriveSettings."""
    return _load_from_env()
