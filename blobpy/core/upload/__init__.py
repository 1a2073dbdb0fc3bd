"""
Upload module for adding files to the storage service.

Builds the ``add`` request (query parameters and multipart body), sends it
through an injected transport and decodes the newline-delimited result.
"""
from .service import BlobService
from .models import UploadOptions, FileInput, AddedFile, UploadProgress
from .options import encode_options
from .multipart import MultipartData, build_body, last_modified_headers
from .decoder import decode_add_response, parse_cid, parse_size
from .protocols import TransportProtocol, ResponseProtocol

__all__ = [
    # Main classes
    'BlobService',
    
    # Models
    'UploadOptions',
    'FileInput',
    'AddedFile',
    'UploadProgress',
    
    # Wire encoding/decoding
    'encode_options',
    'MultipartData',
    'build_body',
    'last_modified_headers',
    'decode_add_response',
    'parse_cid',
    'parse_size',
    
    # Protocols
    'TransportProtocol',
    'ResponseProtocol',
]
