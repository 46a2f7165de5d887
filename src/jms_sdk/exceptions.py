"""
Exception classes for the JumpServer Python SDK
"""

from typing import Optional, Dict, Any


class JmsSDKError(Exception):
    """Base exception for all JumpServer SDK errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(JmsSDKError):
    """Exception raised for validation failures"""

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConfigMissingError(JmsSDKError):
    """Exception raised when a required environment variable or file is absent"""

    def __init__(self, message: str, error_code: str = "CONFIG_MISSING", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class EncodeError(JmsSDKError):
    """Exception raised when a request body cannot be serialized"""

    def __init__(self, message: str, error_code: str = "ENCODE_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class SignError(JmsSDKError):
    """Exception raised when a request cannot be authenticated"""

    def __init__(self, message: str, error_code: str = "SIGN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class MissingHeaderError(SignError):
    """Exception raised when a header named for signing is absent from the request"""

    def __init__(self, message: str, error_code: str = "MISSING_HEADER", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class CredentialError(SignError):
    """Exception raised when access/secret keys cannot be fetched"""

    def __init__(self, message: str, error_code: str = "CREDENTIAL_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class TransportError(JmsSDKError):
    """Exception raised for network failures while performing a request"""

    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ReadError(JmsSDKError):
    """Exception raised when a response body cannot be read"""

    def __init__(self, message: str, error_code: str = "READ_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ServerError(JmsSDKError):
    """Exception raised when the server answers outside the 2xx/3xx range"""

    def __init__(
        self,
        status_code: int,
        body: str,
        details: Optional[Dict[str, Any]] = None,
        raw_body: Optional[bytes] = None
    ):
        message = f"server response code is not ok, code:{status_code}, content:{body}"
        super().__init__(message, "SERVER_ERROR", details)
        self.status_code = status_code
        self.body = body
        self.raw_body = raw_body if raw_body is not None else body.encode('utf-8')


class DecodeError(JmsSDKError):
    """Exception raised when a response body cannot be decoded into the result"""

    def __init__(self, message: str, error_code: str = "DECODE_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
