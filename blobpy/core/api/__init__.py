"""Storage service API module."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, DEFAULT_ENDPOINT
from .async_client import AsyncAPIClient, FetchResponse

__all__ = [
    # Async client
    'AsyncAPIClient',
    'FetchResponse',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_ENDPOINT',
]
