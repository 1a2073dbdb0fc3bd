"""
API configuration module.

Provides the configuration for the storage service HTTP client.
Configurations are frozen: a client's settings never change mid-flight.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union
import ssl

import aiohttp


DEFAULT_ENDPOINT = 'http://127.0.0.1:5001/api/v0/'


@dataclass(frozen=True)
class ProxyConfig:
    """
    Proxy configuration.
    
    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    
    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None
        
        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"
        
        return self.url


@dataclass(frozen=True)
class SSLConfig:
    """
    SSL/TLS configuration.
    
    Allows customization of SSL behavior for security requirements.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False
        
        context = ssl.create_default_context()
        
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        
        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )
        
        context.check_hostname = self.check_hostname
        
        return context


@dataclass(frozen=True)
class TimeoutConfig:
    """
    Session-wide timeout configuration.
    
    A per-request ``timeout`` in UploadOptions overrides ``total``.
    """
    total: Optional[float] = None  # Uploads can be arbitrarily long
    connect: float = 30.0
    sock_read: Optional[float] = None
    sock_connect: float = 30.0
    
    def to_aiohttp_timeout(self) -> aiohttp.ClientTimeout:
        """Convert to aiohttp ClientTimeout."""
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass(frozen=True)
class APIConfig:
    """
    Complete API configuration.
    
    Attributes:
        endpoint: Base URL of the service API; resources are joined onto it
        user_agent: User-Agent header sent with every request
        proxy: Optional proxy settings
        ssl: TLS settings
        timeout: Session-wide timeouts
        extra_headers: Additional headers sent with every request
        log_level: Level applied to the api logger when logging is unconfigured
        limit: Connection pool size
        limit_per_host: Connection pool size per host
        chunk_size: Read size used when streaming file contents
    """
    endpoint: str = DEFAULT_ENDPOINT
    user_agent: str = 'blobpy/1.0.0'
    
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    log_level: int = 20  # logging.INFO
    
    limit_per_host: int = 10
    limit: int = 100
    
    chunk_size: int = 256 * 1024
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )
    
    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )
    
    def resource_url(self, resource: str) -> str:
        """Join a resource name (e.g. ``add``) onto the endpoint."""
        return f"{self.endpoint.rstrip('/')}/{resource.lstrip('/')}"
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }
        
        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
