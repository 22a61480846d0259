"""Endpoint de upload de arquivos para o Google Drive.

Ordem das checagens: pasta de staging configurada, arquivo presente,
extensão permitida, tamanho máximo durante o staging local.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from api.routes.replies import error_reply, internal_error_reply
from api.validators import validate_upload_filename
from app.bootstrap.dependencies import get_upload_use_case
from app.observability import get_correlation_id
from app.use_cases.files import UploadFileToStorageUseCase
from config.settings import DriveSettings, get_drive_settings
from utils.errors import RelayError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload")
async def upload_file(
    file: UploadFile | None = File(default=None),
    use_case: UploadFileToStorageUseCase = Depends(get_upload_use_case),
    settings: DriveSettings = Depends(get_drive_settings),
) -> JSONResponse:
    """Recebe o campo multipart `file` e envia à pasta de staging."""
    try:
        use_case.require_staging_folder()
        file_name = validate_upload_filename(
            file.filename if file is not None else None,
            settings.allowed_extensions,
        )
        drive_file = await use_case.execute(
            file_name=file_name,
            stream=file.file,
            content_type=file.content_type,
        )
    except RelayError as exc:
        logger.warning(
            "upload_rejected",
            extra={
                "error_kind": exc.kind,
                "status_code": exc.status_code,
                "correlation_id": get_correlation_id(),
            },
        )
        return error_reply(exc)
    except Exception as exc:
        logger.exception("upload_route_failed", extra={"correlation_id": get_correlation_id()})
        return internal_error_reply("Upload failed", details=str(exc))
    finally:
        if file is not None:
            await file.close()

    logger.info(
        "upload_completed",
        extra={"drive_file_id": drive_file.id, "correlation_id": get_correlation_id()},
    )
    return JSONResponse(
        content={
            "ok": True,
            "driveFileId": drive_file.id,
            "webViewLink": drive_file.web_view_link,
            "name": drive_file.name,
            "mimeType": drive_file.mime_type,
            "size": drive_file.size,
        }
    )
