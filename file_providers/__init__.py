"""
Storage-agnostic file access.

A single FileProvider interface with a local filesystem backend and an AWS S3
backend, so calling code can read, write, list, move and delete files without
knowing where they live.
"""

from file_providers.cloud_storages.aws_s3_file_provider import AwsS3FileProvider
from file_providers.contracts.file_entry import FileEntry
from file_providers.interfaces.file_provider_interface import FileProvider
from file_providers.local_storages.local_file_provider import LocalFileProvider
from file_providers.registry import (
    create_file_provider_from_env,
    get_file_provider,
    register_file_provider,
)
from file_providers.support.errors import (
    FileProviderError,
    FileProviderNotFoundError,
    FileProviderPermissionError,
    FileProviderServiceError,
    InvalidPathError,
    UnsupportedOperationError,
)

__all__ = [
    "AwsS3FileProvider",
    "FileEntry",
    "FileProvider",
    "FileProviderError",
    "FileProviderNotFoundError",
    "FileProviderPermissionError",
    "FileProviderServiceError",
    "InvalidPathError",
    "LocalFileProvider",
    "UnsupportedOperationError",
    "create_file_provider_from_env",
    "get_file_provider",
    "register_file_provider",
]
