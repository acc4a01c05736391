"""Custom exceptions for solcver.

Provides structured error handling with categorized exceptions
and standardized error response format.
"""

from typing import Optional, Dict, Any


class SolcVerException(Exception):
    """Base exception for all solcver errors.

    Provides structured error response format with:
    - error_code: Machine-readable error identifier
    - message: Human-readable error description
    - details: Optional additional context
    """

    error_code: str = "SOLCVER_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Return structured error response dict."""
        response = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


# ============ Validation Errors (4xx) ============


class ValidationError(SolcVerException):
    """Input validation failed."""

    error_code = "VALIDATION_ERROR"
    status_code = 400


class ParseError(ValidationError):
    """Short version text is not a major.minor.patch triple."""

    error_code = "INVALID_VERSION"

    def __init__(self, text: str, reason: str = "Expected major.minor.patch"):
        super().__init__(f"{reason}: {text!r}", details={"version": text, "reason": reason})


# ============ Metadata Decode Signals ============


class MetadataDecodeSignal(SolcVerException):
    """Raised by a metadata decoder to classify an undecodable compiler version.

    These are not failures from the inference point of view; ``infer`` turns
    them into heuristic version ranges.
    """

    error_code = "METADATA_DECODE_SIGNAL"
    status_code = 422


class VersionFieldAbsent(MetadataDecodeSignal):
    """The metadata block decoded but carries no compiler version."""

    error_code = "VERSION_FIELD_ABSENT"

    def __init__(self, message: str = "Metadata block has no compiler version"):
        super().__init__(message)


class MetadataBlockAbsent(MetadataDecodeSignal):
    """No metadata block could be decoded from the bytecode."""

    error_code = "METADATA_BLOCK_ABSENT"

    def __init__(self, message: str = "Could not decode a metadata block"):
        super().__init__(message)


# ============ Catalog Errors ============


class VersionNotFound(SolcVerException):
    """Requested compiler version is not in the release catalog."""

    error_code = "VERSION_NOT_FOUND"
    status_code = 404

    def __init__(self, version: str):
        super().__init__("Given solc version doesn't exist", details={"version": version})


class CatalogFetchFailure(SolcVerException):
    """Release catalog could not be retrieved."""

    error_code = "CATALOG_FETCH_FAILED"
    status_code = 502

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        url: Optional[str] = None,
    ):
        details: Dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        if body is not None:
            details["body"] = body
        if url:
            details["url"] = url
        super().__init__(f"Failed to obtain list of solc versions. Reason: {reason}", details=details)


# ============ Configuration Errors ============


class ConfigurationError(SolcVerException):
    """Configuration issue."""

    error_code = "CONFIGURATION_ERROR"

    def __init__(self, setting: str, message: str):
        super().__init__(f"Configuration error for {setting}: {message}", details={"setting": setting})


# ============ Utility Functions ============


def error_response(exception: SolcVerException) -> tuple:
    """Create Flask JSON response from exception.

    Returns:
        Tuple of (response_dict, status_code) ready for jsonify
    """
    return exception.to_dict(), exception.status_code
