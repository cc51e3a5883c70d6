"""
Custom error types
"""

from typing import Optional


class PhotoSearchError(Exception):
    """Base exception for every failure of an upstream exchange"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class TransportError(PhotoSearchError):
    """Exception raised when the HTTP exchange itself fails (DNS, connection, reset)"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, "TRANSPORT_ERROR")
        self.url = url


class UpstreamStatusError(PhotoSearchError):
    """Exception raised when the API answers with a non-success status
    Args:
        message (str): Error message
        status (int): HTTP status code returned by the API
        url (Optional[str]): Requested URL
    Example:
        raise UpstreamStatusError("Unauthorized", status=401)
    """

    def __init__(self, message: str, status: int, url: Optional[str] = None):
        super().__init__(message, "UPSTREAM_STATUS_ERROR")
        self.status = status
        self.url = url


class PayloadError(PhotoSearchError):
    """Exception raised when the response body is not the expected JSON shape"""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message, "PAYLOAD_ERROR")
        self.payload = payload
