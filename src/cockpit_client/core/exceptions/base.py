"""Base exceptions for cockpit-client.

This module defines the base exception hierarchy for the cockpit-client library.
All exceptions inherit from CockpitError and include error codes and details
for structured error reporting.
"""

from typing import Any, Dict, Optional


class CockpitError(Exception):
    """Base exception for all cockpit-client errors.
    
    All exceptions in the cockpit-client library inherit from this base class
    and include structured error information for better debugging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(CockpitError):
    """Raised when the client configuration is incomplete or invalid."""
    pass


class ValidationError(CockpitError):
    """Raised when a required call parameter is missing or empty."""
    pass


def create_error_response(exception: CockpitError) -> Dict[str, Any]:
    """Create standardized error payload from exception.
    
    Args:
        exception: The cockpit-client exception
        
    Returns:
        Error payload dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
