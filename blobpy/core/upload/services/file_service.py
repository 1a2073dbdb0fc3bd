"""
File validation and reading services.

Single Responsibility: Each class handles one specific task.
"""
from pathlib import Path
from typing import Tuple, Union, AsyncIterator
import logging
import aiofiles


class FileValidator:
    """
    Validates local files before upload.
    
    Responsibilities:
    - Check file existence
    - Verify file is not a directory
    - Get file size
    """
    
    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.
        
        Args:
            file_path: Path to the file
            
        Returns:
            Tuple of (validated Path, file size in bytes)
            
        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path
        
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
        
        file_size = path.stat().st_size
        
        return path, file_size


class AsyncFileReader:
    """
    Asynchronous chunked file reader.
    
    Uses aiofiles for non-blocking I/O so file contents are streamed into the
    request body instead of being loaded into memory.
    """
    
    DEFAULT_CHUNK_SIZE = 256 * 1024
    
    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size
        self._logger = logging.getLogger('blobpy.upload.file')
    
    @property
    def chunk_size(self) -> int:
        return self._chunk_size
    
    async def iter_chunks(self, file_path: Path) -> AsyncIterator[bytes]:
        """
        Yield the file's contents in ``chunk_size`` pieces.
        
        Raises:
            OSError: If the file cannot be opened or read
        """
        self._logger.debug(f"Streaming {file_path} in {self._chunk_size} byte chunks")
        async with aiofiles.open(file_path, 'rb') as f:
            while True:
                data = await f.read(self._chunk_size)
                if not data:
                    break
                yield data
    