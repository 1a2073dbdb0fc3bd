"""
Blob service.

Adds files to the storage service in one ``add`` request and decodes the
streamed result records.
"""
from typing import List, Optional, Sequence

from ..exceptions import RequestFailed, EmptyResult
from ..logging import get_logger
from .decoder import decode_add_response
from .models import UploadOptions, FileInput, AddedFile
from .multipart import build_body
from .options import encode_options
from .protocols import TransportProtocol
from .services import AsyncFileReader

ADD_RESOURCE = 'add'

logger = get_logger('blobpy.upload')


class BlobService:
    """
    Uploads files and returns the identifiers the service assigned.
    
    The service keeps no per-call state; concurrent calls on one instance
    are independent.
    
    Example:
        >>> service = BlobService(api_client)
        >>> added = await service.put(FileInput(b"hello", 0, "hello.txt"))
        >>> str(added.cid), added.path, added.size
    """
    
    def __init__(
        self,
        client: TransportProtocol,
        chunk_size: int = AsyncFileReader.DEFAULT_CHUNK_SIZE
    ):
        """
        Initialize blob service.
        
        Args:
            client: Transport used to reach the ``add`` resource
            chunk_size: Read size for streaming file contents
        """
        self._client = client
        self._chunk_size = chunk_size
    
    async def put(
        self,
        file: FileInput,
        options: Optional[UploadOptions] = None
    ) -> AddedFile:
        """
        Add a single file.
        
        Returns:
            The first entry reported by the service
            
        Raises:
            EmptyResult: If the service reported no entry with a Hash
            RequestFailed, MalformedResponse, InvalidSize, InvalidIdentifier:
                As for put_all
        """
        added = await self.put_all([file], options)
        if not added:
            raise EmptyResult(f"No entry was added for {file.name!r}")
        return added[0]
    
    async def put_all(
        self,
        files: Sequence[FileInput],
        options: Optional[UploadOptions] = None
    ) -> List[AddedFile]:
        """
        Add several files in one request.
        
        Args:
            files: Files to add, in order
            options: Upload options
            
        Returns:
            Entries reported by the service, in emission order. With
            ``wrap_with_directory`` this includes the wrapping directory.
            
        Raises:
            RequestFailed: If the service answers with a non-success status
            RequestAborted: If ``options.signal`` fires while in flight
            MalformedResponse: If a response line is not a JSON object
            InvalidSize: If an entry's Size is not a non-negative integer
            InvalidIdentifier: If an entry's Hash is not a valid CID
        """
        options = options or UploadOptions()
        search_params = encode_options(options)
        body = build_body(files, self._chunk_size)
        
        logger.info(f"Adding {len(files)} file(s)")
        
        response = await self._client.fetch(
            ADD_RESOURCE,
            method='POST',
            body=body,
            search_params=search_params,
            timeout=options.timeout,
            signal=options.signal,
            progress=options.progress,
        )
        
        if not response.ok:
            response.release()
            raise RequestFailed(response.status_text, getattr(response, 'status', None))
        
        text = await response.text()
        added = decode_add_response(text)
        
        logger.info(f"Service reported {len(added)} added entr{'y' if len(added) == 1 else 'ies'}")
        return added
