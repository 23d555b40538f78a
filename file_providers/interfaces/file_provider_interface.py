"""
Abstraction layer for file access.

This module provides the interface for:
- FileProvider: Abstracts reading, writing, listing, moving and deleting files
  (local filesystem or cloud object store).

Usage:
- Use LocalFileProvider for a directory tree on disk.
- Use AwsS3FileProvider for an S3 bucket.
- Depend on FileProvider in calling code so either can be passed in.

Classes:
- FileProvider (ABC): Interface for file operations.

Example:
    file_provider = LocalFileProvider("./storage")

    await file_provider.write_file("/report.csv", b"a,b\\n1,2\\n")
    with await file_provider.read_file_buffer("/report.csv") as stream:
        content = stream.read()

    entries = await file_provider.read_dir("/")
"""
from abc import ABC, abstractmethod
from typing import BinaryIO, List

from file_providers.contracts.file_entry import FileEntry
from file_providers.support.errors import UnsupportedOperationError


class FileProvider(ABC):
    """
    Abstract base class for file access operations.
    Implementations provide local or cloud storage (e.g., filesystem, S3).

    Every operation raises FileProviderError (or one of its subclasses) on
    failure. Paths are relative to the provider's base location unless stated
    otherwise.
    """

    async def write(self, path: str, content: str) -> None:
        """
        Write text content to the given path, replacing any existing file.
        """
        raise self._unsupported("write", path)

    @abstractmethod
    async def write_file(self, path: str, contents: bytes) -> None:
        """
        Write raw bytes to the given path, replacing any existing file.
        """

    @abstractmethod
    async def read_file_buffer(self, path: str) -> BinaryIO:
        """
        Open the file at the given path for reading.
        Returns a binary stream that is read lazily; the caller must close it.
        """

    async def delete_file(self, path: str) -> None:
        """
        Delete the file at the given path. Fails if it does not exist.
        """
        raise self._unsupported("delete_file", path)

    @abstractmethod
    async def read_dir(self, path: str) -> List[FileEntry]:
        """
        List the members of a directory (or key prefix) with their sizes,
        ordered by name.
        """

    @abstractmethod
    async def list_dir(self, path: str) -> List[str]:
        """
        List the members of a directory (or key prefix) as fully qualified
        strings, prefixed with the provider's base location.
        """

    async def create_dir(self, path: str) -> None:
        """
        Create a directory. Calling it for an existing directory is not an error.
        """
        raise self._unsupported("create_dir", path)

    @abstractmethod
    async def move_file(self, file_path: str, ending_path: str, delete: bool) -> None:
        """
        Copy file_path to the fully qualified ending_path.
        If delete is True the source is removed afterwards, making it a move.
        """

    @abstractmethod
    def get_base_path(self) -> str:
        """
        Return the base location (root directory or bucket name) of the provider.
        """

    def _unsupported(self, operation: str, path: str) -> UnsupportedOperationError:
        return UnsupportedOperationError(
            f"{type(self).__name__} does not support {operation}", path
        )
