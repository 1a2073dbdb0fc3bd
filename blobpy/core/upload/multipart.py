"""
Multipart request body for the add endpoint.

Each file becomes one ``form-data`` part named ``file``, decorated with
``mtime``/``mtime-nsecs`` headers. File contents are streamed when the
transport sends the body, so large local files are never held in memory.
"""
from typing import Dict, List, Optional, Sequence, Tuple, AsyncIterator

import aiohttp

from ..logging import get_logger
from .models import FileInput, UploadProgress, ProgressCallback
from .services import AsyncFileReader

FILE_FIELD = 'file'

logger = get_logger('blobpy.upload.body')


def last_modified_headers(last_modified: int) -> Dict[str, str]:
    """
    Build the modification-time headers for a part.
    
    Args:
        last_modified: Milliseconds since epoch, must be >= 0
        
    Returns:
        ``{'mtime': seconds, 'mtime-nsecs': sub-second remainder}``
        
    Example:
        >>> last_modified_headers(1500)
        {'mtime': '1', 'mtime-nsecs': '500000'}
    """
    if last_modified < 0:
        raise ValueError(f"last_modified must be >= 0, got {last_modified}")
    secs = last_modified // 1000
    nsecs = (last_modified - secs * 1000) * 1000
    return {
        'mtime': str(secs),
        'mtime-nsecs': str(nsecs),
    }


class _ProgressTracker:
    """Accumulates sent byte counts and reports them to a callback."""
    
    def __init__(self, total: Optional[int], callback: ProgressCallback):
        self._total = total
        self._loaded = 0
        self._callback = callback
    
    def advance(self, count: int) -> None:
        self._loaded += count
        self._callback(UploadProgress(loaded=self._loaded, total=self._total))


class MultipartData:
    """
    Ordered multipart/form-data body.
    
    Entries are kept in insertion order; the service relies on that order
    when it emits its result records.
    
    Example:
        >>> body = MultipartData()
        >>> body.append('file', FileInput(b'hi', 0, 'a.txt'), {'mtime': '0'})
        >>> writer = body.to_writer()
    """
    
    def __init__(self, chunk_size: int = AsyncFileReader.DEFAULT_CHUNK_SIZE):
        self._entries: List[Tuple[str, FileInput, Dict[str, str]]] = []
        self._reader = AsyncFileReader(chunk_size)
    
    def __len__(self) -> int:
        return len(self._entries)
    
    @property
    def entries(self) -> List[Tuple[str, FileInput, Dict[str, str]]]:
        """Copy of the (field name, file, headers) entries."""
        return list(self._entries)
    
    @property
    def total_size(self) -> int:
        """Total content bytes across all entries."""
        return sum(file.size for _, file, _ in self._entries)
    
    def append(
        self,
        name: str,
        file: FileInput,
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        """Add a file under field ``name`` with extra part headers."""
        self._entries.append((name, file, dict(headers or {})))
    
    def to_writer(
        self,
        progress: Optional[ProgressCallback] = None
    ) -> aiohttp.MultipartWriter:
        """
        Produce an aiohttp writer that streams this body.
        
        The writer can be sent once; each call creates fresh streams.
        
        Args:
            progress: Called with UploadProgress as content is consumed
        """
        tracker = _ProgressTracker(self.total_size, progress) if progress else None
        writer = aiohttp.MultipartWriter('form-data')
        
        for name, file, headers in self._entries:
            part = writer.append(self._stream(file, tracker), headers)
            part.set_content_disposition('form-data', name=name, filename=file.name)
        
        logger.debug(f"Multipart body with {len(self._entries)} parts")
        return writer
    
    async def _stream(
        self,
        file: FileInput,
        tracker: Optional[_ProgressTracker]
    ) -> AsyncIterator[bytes]:
        if file.is_local:
            chunks = self._reader.iter_chunks(file.content)
        else:
            chunks = self._iter_bytes(file.content)
        
        async for chunk in chunks:
            yield chunk
            if tracker:
                tracker.advance(len(chunk))
    
    async def _iter_bytes(self, data: bytes) -> AsyncIterator[bytes]:
        size = self._reader.chunk_size
        for start in range(0, len(data), size):
            yield data[start:start + size]


def build_body(
    files: Sequence[FileInput],
    chunk_size: int = AsyncFileReader.DEFAULT_CHUNK_SIZE
) -> MultipartData:
    """Attach every file under the ``file`` field, in input order."""
    body = MultipartData(chunk_size)
    for file in files:
        body.append(FILE_FIELD, file, last_modified_headers(file.last_modified))
    return body
