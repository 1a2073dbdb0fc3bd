"""
Async storage service API client.

Thin transport over aiohttp: one call, one HTTP request, no retries.
"""
import asyncio
import logging
from typing import Dict, Optional, Any, Callable, Awaitable

import aiohttp

from .config import APIConfig
from ..exceptions import BlobException, RequestAborted
from ..logging import get_logger


class FetchResponse:
    """
    Response of a fetch call.
    
    Wraps the aiohttp response; the body is read with ``text()``, which also
    releases the connection. Use ``release()`` when the body is not needed.
    """
    
    def __init__(self, response: aiohttp.ClientResponse):
        self._response = response
    
    @property
    def ok(self) -> bool:
        """True for 1xx-3xx statuses."""
        return self._response.ok
    
    @property
    def status(self) -> int:
        return self._response.status
    
    @property
    def status_text(self) -> str:
        """Reason phrase, falling back to the numeric status."""
        return self._response.reason or str(self._response.status)
    
    @property
    def headers(self):
        return self._response.headers
    
    async def text(self) -> str:
        """Read the full body as text and release the connection."""
        try:
            return await self._response.text()
        finally:
            self._response.release()
    
    def release(self) -> None:
        self._response.release()
    
    async def __aenter__(self) -> 'FetchResponse':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.release()


class AsyncAPIClient:
    """
    Asynchronous storage service API client.
    
    Features:
    - Full async/await support
    - Configurable endpoint, proxy, SSL, timeouts
    - Connection pooling through a shared aiohttp session
    - Per-request timeout, cancellation signal and upload progress
    
    The client holds no per-call state, so concurrent fetches are
    independent.
    
    Example:
        >>> config = APIConfig(endpoint="http://127.0.0.1:5001/api/v0/")
        >>> async with AsyncAPIClient(config) as client:
        ...     response = await client.fetch("add", body=body)
    """
    
    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize async API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False
        
        self._logger = get_logger('blobpy.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        self._closed = True
        
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
        
        if self._connector and not self._connector.closed:
            await self._connector.close()
            self._connector = None
    
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
    ) -> FetchResponse:
        """
        Send one request to ``resource`` under the configured endpoint.
        
        Args:
            resource: Resource name, e.g. ``add``
            method: HTTP method
            body: Request body; objects with ``to_writer(progress)`` (such as
                MultipartData) are streamed, anything else goes to aiohttp as is
            search_params: Query string parameters
            timeout: Total timeout in seconds for this request
            signal: Event that aborts the request when set
            progress: Upload progress callback, wired into the body stream
            
        Returns:
            FetchResponse, whatever its status
            
        Raises:
            RequestAborted: If ``signal`` is set before a response arrives
            BlobException: If the client is closed
            aiohttp.ClientError, asyncio.TimeoutError: On transport failures
        """
        if self._closed:
            raise BlobException("Client is closed")
        
        if signal is not None and signal.is_set():
            raise RequestAborted()
        
        session = await self._ensure_session()
        url = self._config.resource_url(resource)
        
        to_writer = getattr(body, 'to_writer', None)
        data = to_writer(progress) if to_writer is not None else body
        
        kwargs: Dict[str, Any] = {}
        if timeout is not None:
            kwargs['timeout'] = aiohttp.ClientTimeout(total=timeout)
        if self._config.proxy:
            kwargs['proxy'] = self._config.proxy.to_aiohttp_proxy()
        
        self._logger.debug(f"{method} {url} params={search_params}")
        
        response = await self._abortable(
            session.request(method, url, params=search_params, data=data, **kwargs),
            signal
        )
        
        self._logger.debug(f"{method} {url} -> {response.status} {response.reason}")
        return FetchResponse(response)
    
    async def _abortable(
        self,
        request: Awaitable[aiohttp.ClientResponse],
        signal: Optional[asyncio.Event]
    ) -> aiohttp.ClientResponse:
        """Await ``request`` unless ``signal`` is set first."""
        if signal is None:
            return await request
        
        request_task = asyncio.ensure_future(request)
        abort_task = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, abort_task},
                return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            request_task.cancel()
            raise
        finally:
            abort_task.cancel()
        
        if request_task in done:
            return request_task.result()
        
        request_task.cancel()
        try:
            late_response = await request_task
        except asyncio.CancelledError:
            pass
        else:
            late_response.release()
        self._logger.debug("Request aborted by signal")
        raise RequestAborted()
