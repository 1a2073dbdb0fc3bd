"""
Protocol definitions for upload module.

Defines the transport interface BlobService depends on, so any client with
a compatible ``fetch`` (including test doubles) can be injected.
"""
import asyncio
from typing import Protocol, Dict, Any, Optional, Callable


class ResponseProtocol(Protocol):
    """Protocol for transport responses."""
    
    @property
    def ok(self) -> bool:
        """True when the service reported success."""
        ...
    
    @property
    def status_text(self) -> str:
        """Status description."""
        ...
    
    async def text(self) -> str:
        """Read the full body as text."""
        ...
    
    def release(self) -> None:
        """Release the connection without reading the body."""
        ...


class TransportProtocol(Protocol):
    """Protocol for the HTTP transport."""
    
    async def fetch(
        self,
        resource: str,
        *,
        method: str = 'POST',
        body: Any = None,
        search_params: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        signal: Optional[asyncio.Event] = None,
        progress: Optional[Callable[..., Any]] = None
    ) -> ResponseProtocol:
        """
        Send one request.
        
        Args:
            resource: Resource name relative to the service endpoint
            method: HTTP method
            body: Request body
            search_params: Query string parameters
            timeout: Request timeout in seconds
            signal: Cancellation event
            progress: Upload progress callback
            
        Returns:
            Response, whatever its status
        """
        ...
