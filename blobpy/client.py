"""
BlobClient - High-level async client for a content-addressed storage service.

Example:
    >>> async with BlobClient("http://127.0.0.1:5001/api/v0/") as client:
    ...     added = await client.put_paths(["photo.jpg"], UploadOptions(pin=True))
    ...     for entry in added:
    ...         print(entry.cid, entry.path, entry.size)
"""
from dataclasses import replace
from pathlib import Path
from typing import Optional, List, Sequence, Union

from .core.api import AsyncAPIClient, APIConfig
from .core.logging import get_logger
from .core.upload import BlobService, UploadOptions, FileInput, AddedFile


class BlobClient:
    """
    High-level async client.
    
    Owns one AsyncAPIClient (and its connection pool) and exposes the blob
    upload operations on it.
    
    With a bare endpoint:
        >>> client = BlobClient("http://node:5001/api/v0/")
    
    With custom configuration:
        >>> config = APIConfig.insecure(endpoint="https://node/api/v0/")
        >>> client = BlobClient(config=config)
    """
    
    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        config: Optional[APIConfig] = None
    ):
        """
        Initialize client.
        
        Args:
            endpoint: Service API base URL (overrides ``config.endpoint``)
            config: Optional API configuration
        """
        config = config or APIConfig.default()
        if endpoint:
            config = replace(config, endpoint=endpoint)
        
        self._config = config
        self._logger = get_logger('blobpy.client')
        self._api = AsyncAPIClient(config)
        self._blobs = BlobService(self._api, chunk_size=config.chunk_size)
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    @property
    def api(self) -> AsyncAPIClient:
        """Underlying transport."""
        return self._api
    
    @property
    def blobs(self) -> BlobService:
        return self._blobs
    
    async def __aenter__(self) -> 'BlobClient':
        await self._api.__aenter__()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._api.close()
    
    async def put(
        self,
        file: FileInput,
        options: Optional[UploadOptions] = None
    ) -> AddedFile:
        """Add one file. See BlobService.put."""
        return await self._blobs.put(file, options)
    
    async def put_all(
        self,
        files: Sequence[FileInput],
        options: Optional[UploadOptions] = None
    ) -> List[AddedFile]:
        """Add several files in one request. See BlobService.put_all."""
        return await self._blobs.put_all(files, options)
    
    async def put_paths(
        self,
        paths: Sequence[Union[str, Path]],
        options: Optional[UploadOptions] = None
    ) -> List[AddedFile]:
        """
        Add local files by path.
        
        Files are sent under their base names and keep their modification
        times.
        
        Raises:
            FileNotFoundError: If a path doesn't exist
            ValueError: If a path is not a regular file
        """
        files = [FileInput.from_path(path) for path in paths]
        self._logger.debug(f"Adding paths: {[str(p) for p in paths]}")
        return await self._blobs.put_all(files, options)
