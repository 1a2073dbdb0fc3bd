"""Logging utilities for blobpy modules."""

import logging


LOGGER_NAMES = (
    'blobpy',
    'blobpy.client',
    'blobpy.api',
    'blobpy.upload',
    'blobpy.upload.body',
    'blobpy.upload.file',
)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.
    
    The logger propagates to the root logger and only gets a default
    level when the root logger has no handlers (i.e. ``basicConfig()``
    has not been called yet).
    
    Args:
        name: Logger name (typically one of ``LOGGER_NAMES``)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)
    
    return logger
