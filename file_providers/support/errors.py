"""
Error model shared by every file provider.

Every failure that crosses the FileProvider boundary is a FileProviderError.
The subclasses only refine the category of the failure, so callers that do
not care can catch FileProviderError and handle everything at once.

Backend errors (OSError, botocore errors) are converted here and chained with
``raise ... from`` so the original traceback stays available for debugging.
"""
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError


class FileProviderError(Exception):
    """Base exception for all file provider failures."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class FileProviderNotFoundError(FileProviderError):
    """Raised when a file, key or bucket does not exist."""
    pass


class FileProviderPermissionError(FileProviderError):
    """Raised when access to a file, key or bucket is denied."""
    pass


class FileProviderServiceError(FileProviderError):
    """Raised on transport, remote service or unexpected OS failures."""
    pass


class InvalidPathError(FileProviderError):
    """Raised when a caller supplies a malformed path argument."""
    pass


class UnsupportedOperationError(FileProviderError):
    """Raised when a backend does not implement an operation."""
    pass


NOT_FOUND_ERROR_CODES = {"NoSuchKey", "NoSuchBucket", "NotFound", "404"}
PERMISSION_ERROR_CODES = {"AccessDenied", "AllAccessDisabled", "Forbidden", "403"}


def from_os_error(error: OSError, action: str, path: str) -> FileProviderError:
    """
    Convert an OSError into the matching FileProviderError.

    :param error: The error raised by the operating system
    :param action: Short description of what was attempted, e.g. "File opening"
    :param path: The resolved path the operation was applied to
    :return: A FileProviderError carrying the OS message and the path
    """
    message = f"{action} error: {error.strerror or error}\nPath: {path}"

    if isinstance(error, FileNotFoundError):
        return FileProviderNotFoundError(message, path)
    if isinstance(error, PermissionError):
        return FileProviderPermissionError(message, path)
    return FileProviderServiceError(message, path)


def from_boto_error(error: Exception, action: str, location: str) -> FileProviderError:
    """
    Convert a botocore ClientError or BotoCoreError into a FileProviderError.

    :param error: The error raised by the S3 client
    :param action: Short description of what was attempted, e.g. "Object reading"
    :param location: ``bucket/key`` the operation was applied to
    :return: A FileProviderError carrying the service message and the location
    """
    message = f"{action} error: {error}\nLocation: {location}"

    if isinstance(error, ClientError):
        code = str(error.response.get("Error", {}).get("Code", ""))
        if code in NOT_FOUND_ERROR_CODES:
            return FileProviderNotFoundError(message, location)
        if code in PERMISSION_ERROR_CODES:
            return FileProviderPermissionError(message, location)
        return FileProviderServiceError(message, location)

    if isinstance(error, BotoCoreError):
        return FileProviderServiceError(message, location)

    return FileProviderError(message, location)
