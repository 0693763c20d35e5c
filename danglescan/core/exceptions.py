"""Custom exceptions for DANGLESCAN.

This module defines the exception hierarchy used throughout the DANGLESCAN application.
All exceptions inherit from the base DanglescanError class so callers can catch
everything raised by the scanner in one place.
"""


class DanglescanError(Exception):
    """Base exception for all DANGLESCAN errors."""
    pass


class ValidationError(DanglescanError):
    """Raised when input validation fails.
    
    This exception is raised when user input fails validation, such as an empty
    batch on the command line or a malformed request payload.
    """
    pass


class ConfigurationError(DanglescanError):
    """Raised when configuration is invalid.
    
    This exception is raised when option values are out of range or incompatible,
    such as a negative timeout.
    """
    pass


class NetworkError(DanglescanError):
    """Raised when network operations fail.
    
    Base class for the per-probe failures. A probe never lets these escape; they
    are recorded on the probe result instead.
    """
    pass


class DnsLookupError(NetworkError):
    """Raised when the CNAME lookup for a host fails."""
    pass


class HttpRequestError(NetworkError):
    """Raised when an HTTP request cannot be completed.
    
    Covers connection refusals, timeouts, TLS failures and malformed URLs, i.e.
    every failure that happens before a status line is received.
    """
    pass


class BodyReadError(NetworkError):
    """Raised when the response body cannot be read after the status was received.

    Attributes:
        status_code: HTTP status code received before the read failed
    """

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
