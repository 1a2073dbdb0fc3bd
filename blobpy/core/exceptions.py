"""
Custom exceptions for blob upload operations.

Every error raised by the add/put path derives from BlobException so callers
can catch the whole family at once.
"""
from typing import Optional, Any


class BlobException(Exception):
    """Base exception for all blobpy errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class RequestFailed(BlobException):
    """The service answered with a non-success status."""
    
    def __init__(self, status_text: str, status: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            status_text: Status description reported by the transport
            status: HTTP status code (if available)
        """
        self.status_text = status_text
        self.status = status
        super().__init__(status_text, status)


class RequestAborted(BlobException):
    """The caller's cancellation signal fired while the request was in flight."""
    
    def __init__(self, message: str = "Request aborted") -> None:
        super().__init__(message)


class MalformedResponse(BlobException):
    """A response line could not be parsed as a JSON object."""
    
    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            line: The offending raw line
            line_number: 1-based index of the line in the response body
        """
        self.line = line
        self.line_number = line_number
        super().__init__(message)


class InvalidSize(BlobException):
    """A record's Size field is missing, non-numeric or negative."""
    
    def __init__(self, value: Any, name: Optional[str] = None) -> None:
        self.value = value
        self.name = name
        super().__init__(f"Invalid size {value!r} for entry {name!r}")


class InvalidIdentifier(BlobException):
    """A record's Hash field is not a valid content identifier."""
    
    def __init__(self, value: Any, reason: Optional[str] = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid content identifier {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyResult(BlobException):
    """A single-file put produced no added entry."""
    pass
