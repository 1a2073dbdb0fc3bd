"""
blobpy - Async Python client for adding files to content-addressed storage.

Usage:
    >>> from blobpy import BlobClient, FileInput, UploadOptions
    >>> 
    >>> async with BlobClient("http://127.0.0.1:5001/api/v0/") as client:
    ...     added = await client.put(FileInput(b"hello", 0, "hello.txt"))
    ...     print(added.cid)
"""
import logging
from .client import BlobClient

# Configuration and transport
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    FetchResponse
)

# Upload
from .core.upload import (
    BlobService,
    UploadOptions,
    FileInput,
    AddedFile,
    UploadProgress
)

# Errors
from .core.exceptions import (
    BlobException,
    RequestFailed,
    RequestAborted,
    MalformedResponse,
    InvalidSize,
    InvalidIdentifier,
    EmptyResult
)

from .core.logging import LOGGER_NAMES

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for blobpy modules.
    
    Sets the level on every blobpy logger and makes sure they propagate
    to the root logger.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    for logger_name in LOGGER_NAMES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'BlobClient',
    'BlobService',
    'UploadOptions',
    'FileInput',
    'AddedFile',
    'UploadProgress',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'FetchResponse',
    'BlobException',
    'RequestFailed',
    'RequestAborted',
    'MalformedResponse',
    'InvalidSize',
    'InvalidIdentifier',
    'EmptyResult',
    'setup_logging',
]
