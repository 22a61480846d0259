"""Use cases de arquivos (upload para o Drive)."""

from .upload_file import UploadFileToStorageUseCase, guess_mime_type

__all__ = ["UploadFileToStorageUseCase", "guess_mime_type"]
