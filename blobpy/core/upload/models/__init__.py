"""Upload models."""
from .upload_models import (
    UploadOptions,
    FileInput,
    AddedFile,
    UploadProgress,
    ProgressCallback
)

__all__ = [
    'UploadOptions',
    'FileInput',
    'AddedFile',
    'UploadProgress',
    'ProgressCallback'
]
