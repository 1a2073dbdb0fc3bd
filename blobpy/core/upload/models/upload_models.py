"""
Data models for upload module.

Uses dataclasses for immutable, type-safe data structures.
"""
import asyncio
from dataclasses import dataclass
from typing import Optional, Union, Callable, Any
from pathlib import Path

from multiformats import CID

from ..services.file_service import FileValidator


@dataclass
class UploadProgress:
    """
    Upload progress information.
    
    Attributes:
        loaded: Bytes of file content sent so far
        total: Total bytes of file content, or None when unknown
    """
    loaded: int = 0
    total: Optional[int] = None
    
    @property
    def percentage(self) -> float:
        """Returns upload progress as percentage."""
        if not self.total:
            return 0.0
        return (self.loaded / self.total) * 100
    
    @property
    def is_complete(self) -> bool:
        """Returns True if all known bytes were sent."""
        return self.total is not None and self.loaded >= self.total


ProgressCallback = Callable[[UploadProgress], Any]


@dataclass(frozen=True)
class UploadOptions:
    """
    Options for an add request.
    
    Every field is optional; unset fields are left out of the request so the
    service applies its own defaults.
    
    Attributes:
        chunker: Chunking algorithm, e.g. ``size-262144`` or ``rabin``
        cid_version: Content identifier version (0 or 1)
        enable_sharding_experiment: Accepted for compatibility, not sent
        hash_alg: Hash function name, e.g. ``sha2-256``
        only_hash: Compute identifiers without storing content
        pin: Pin added content
        raw_leaves: Use raw blocks for leaf nodes
        shard_split_threshold: Accepted for compatibility, not sent
        trickle: Use trickle-dag layout
        wrap_with_directory: Wrap the added files in a directory
        timeout: Request timeout in seconds
        signal: Event that aborts the request when set
        progress: Called with UploadProgress while the body is sent
    """
    chunker: Optional[str] = None
    cid_version: Optional[int] = None
    enable_sharding_experiment: Optional[bool] = None
    hash_alg: Optional[str] = None
    only_hash: Optional[bool] = None
    pin: Optional[bool] = None
    raw_leaves: Optional[bool] = None
    shard_split_threshold: Optional[bool] = None
    trickle: Optional[bool] = None
    wrap_with_directory: Optional[bool] = None
    timeout: Optional[float] = None
    signal: Optional[asyncio.Event] = None
    progress: Optional[ProgressCallback] = None
    
    def __post_init__(self):
        if self.cid_version is not None and self.cid_version not in (0, 1):
            raise ValueError(f"cid_version must be 0 or 1, got {self.cid_version!r}")


@dataclass(frozen=True)
class FileInput:
    """
    A file to add.
    
    The content is either in-memory bytes or a local path that is streamed
    when the request body is sent. The caller keeps ownership; nothing here
    is mutated or retained after the call.
    
    Attributes:
        content: Raw bytes or path to a local file
        last_modified: Modification time in milliseconds since epoch (>= 0)
        path: Optional virtual path sent as the multipart filename
    
    Example:
        >>> FileInput(b"hello", last_modified=1701532800000, path="docs/a.txt").name
        'docs/a.txt'
    """
    content: Union[bytes, Path]
    last_modified: int = 0
    path: Optional[str] = None
    
    def __post_init__(self):
        if isinstance(self.content, str):
            object.__setattr__(self, 'content', Path(self.content))
        if self.last_modified < 0:
            raise ValueError(f"last_modified must be >= 0, got {self.last_modified}")
    
    @classmethod
    def from_path(
        cls,
        file_path: Union[str, Path],
        name: Optional[str] = None
    ) -> 'FileInput':
        """
        Create a FileInput for a local file, using its mtime.
        
        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the path is not a regular file
        """
        path, _ = FileValidator().validate(file_path)
        mtime_ms = path.stat().st_mtime_ns // 1_000_000
        return cls(content=path, last_modified=max(mtime_ms, 0), path=name)
    
    @property
    def is_local(self) -> bool:
        """True when the content is read from disk."""
        return isinstance(self.content, Path)
    
    @property
    def name(self) -> str:
        """Filename sent to the service."""
        if self.path:
            return self.path
        if isinstance(self.content, Path):
            return self.content.name
        return 'blob'
    
    @property
    def size(self) -> int:
        """Size of the content in bytes."""
        if isinstance(self.content, Path):
            return self.content.stat().st_size
        return len(self.content)


@dataclass(frozen=True)
class AddedFile:
    """
    An entry reported by the service after adding content.
    
    Attributes:
        cid: Content identifier
        path: Logical path (the record's Name)
        size: Size in bytes as reported by the service
    """
    cid: CID
    path: str
    size: int
