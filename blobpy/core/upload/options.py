"""
Option encoding for the add endpoint.

Translates UploadOptions into the query parameters the service expects.
"""
from typing import Dict, Optional

from .models import UploadOptions


def _bool_param(value: bool) -> str:
    return 'true' if value else 'false'


def encode_options(options: Optional[UploadOptions] = None) -> Dict[str, str]:
    """
    Build the query parameters for an add request.
    
    Only options that are set appear in the result; ``False`` is sent as
    ``"false"``, ``None`` is left out. ``stream-channels`` is always
    requested so the service streams one JSON record per line.
    
    Args:
        options: Upload options (defaults to no options)
        
    Returns:
        Ordered mapping of wire parameter name to string value
        
    Example:
        >>> encode_options(UploadOptions(pin=False, cid_version=1))
        {'stream-channels': 'true', 'pin': 'false', 'cid-version': '1'}
    """
    options = options or UploadOptions()
    params = {'stream-channels': 'true'}
    
    if options.progress is not None:
        params['progress'] = 'true'
    
    if options.trickle is not None:
        params['trickle'] = _bool_param(options.trickle)
    
    if options.only_hash is not None:
        params['only-hash'] = _bool_param(options.only_hash)
    
    if options.wrap_with_directory is not None:
        params['wrap-with-directory'] = _bool_param(options.wrap_with_directory)
    
    if options.chunker:
        params['chunker'] = options.chunker
    
    if options.pin is not None:
        params['pin'] = _bool_param(options.pin)
    
    if options.raw_leaves is not None:
        params['raw-leaves'] = _bool_param(options.raw_leaves)
    
    if options.cid_version is not None:
        params['cid-version'] = str(options.cid_version)
    
    if options.hash_alg:
        params['hashAlg'] = options.hash_alg
    
    return params
