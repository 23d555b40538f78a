"""
This module provides the local implementation of:
- FileProvider: Abstracts file reading, writing, listing and moving (local or cloud).

Usage:
- Use LocalFileProvider for local development or on-disk data (stores files under a base path).

Classes:
- LocalFileProvider: Local disk implementation of FileProvider.

Example:
    file_provider = LocalFileProvider("/data")

    await file_provider.write_file("/a.txt", b"hello")
    await file_provider.move_file("/a.txt", "/archive/a.txt", delete=True)
"""
import os
import shutil
import asyncio
import logging
from typing import BinaryIO, List

from file_providers.contracts.file_entry import FileEntry
from file_providers.interfaces.file_provider_interface import FileProvider
from file_providers.support.constants import APP_NAME
from file_providers.support.errors import InvalidPathError, from_os_error
from file_providers.support.path_utils import join_path

logger = logging.getLogger(APP_NAME)


class LocalFileProvider(FileProvider):
    """
    Local disk implementation of FileProvider.
    Resolves every relative path against a base directory on the local filesystem.
    Blocking calls run in a worker thread so the event loop is never blocked.
    """

    def __init__(self, base: str):
        self.base = base

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self.base!r})"

    def get_base_path(self) -> str:
        return self.base

    def _resolve(self, path: str) -> str:
        return join_path(self.base, path)

    async def read_file_buffer(self, path: str) -> BinaryIO:
        """
        Open the resolved file for buffered binary reading.
        """
        resolved = self._resolve(path)
        logger.debug("Opening file for reading: %s", resolved)

        try:
            return await asyncio.to_thread(open, resolved, "rb")
        except OSError as e:
            raise from_os_error(e, "File opening", resolved) from e

    async def write_file(self, path: str, contents: bytes) -> None:
        """
        Write bytes to the resolved path, replacing any existing file.
        """
        resolved = self._resolve(path)

        def write_file_sync():
            with open(resolved, "wb") as out:
                out.write(contents)

        try:
            await asyncio.to_thread(write_file_sync)
        except OSError as e:
            raise from_os_error(e, "File writing", resolved) from e
        logger.info("Wrote %d bytes to %s", len(contents), resolved)

    async def write(self, path: str, content: str) -> None:
        """
        Write UTF-8 text to the resolved path, replacing any existing file.
        """
        await self.write_file(path, content.encode("utf-8"))

    async def delete_file(self, path: str) -> None:
        resolved = self._resolve(path)

        try:
            await asyncio.to_thread(os.remove, resolved)
        except OSError as e:
            raise from_os_error(e, "File removing", resolved) from e
        logger.info("Deleted %s", resolved)

    async def read_dir(self, path: str) -> List[FileEntry]:
        """
        List the direct children of the resolved directory with their sizes.

        A child whose metadata cannot be read (for example because it was
        removed while the directory was being listed) is skipped with a warning.
        """
        resolved = self._resolve(path)
        logger.debug("Reading directory: %s", resolved)

        def read_dir_sync():
            entries = []
            with os.scandir(resolved) as iterator:
                for dir_entry in iterator:
                    try:
                        size = dir_entry.stat().st_size
                    except OSError as e:
                        logger.warning(
                            "Skipping %s in %s: metadata lookup failed: %s",
                            dir_entry.name,
                            resolved,
                            e,
                        )
                        continue
                    entries.append(FileEntry(name=dir_entry.name, size=size))
            return sorted(entries, key=lambda entry: entry.name)

        try:
            return await asyncio.to_thread(read_dir_sync)
        except OSError as e:
            raise from_os_error(e, "Directory reading", resolved) from e

    async def list_dir(self, path: str) -> List[str]:
        entries = await self.read_dir(path)
        return [join_path(self.base, path, entry.name) for entry in entries]

    async def create_dir(self, path: str) -> None:
        """
        Create a single directory level. An existing directory is not an error,
        an existing file of the same name is.

        :raises InvalidPathError: If a non-directory already exists at the path
        """
        location = self._resolve(path)
        logger.info("Creating dir at %s", location)

        def create_dir_sync():
            try:
                os.mkdir(location)
            except FileExistsError:
                if not os.path.isdir(location):
                    raise
                logger.debug("Directory already exists: %s", location)

        try:
            await asyncio.to_thread(create_dir_sync)
        except FileExistsError as e:
            raise InvalidPathError(
                f"Directory creation error: {e.strerror or e}, not a directory\nPath: {location}",
                location,
            ) from e
        except OSError as e:
            raise from_os_error(e, "Directory creation", location) from e

    async def move_file(self, file_path: str, ending_path: str, delete: bool) -> None:
        """
        Copy the resolved source to ending_path, which is taken as given
        (absolute, not relative to the base). The source is removed afterwards
        only when delete is set and the copy succeeded.
        """
        source = self._resolve(file_path)
        logger.info("Moving file from %s to %s (delete=%s)", source, ending_path, delete)

        try:
            await asyncio.to_thread(shutil.copy2, source, ending_path)
        except OSError as e:
            raise from_os_error(e, "File copying", f"{source} -> {ending_path}") from e

        if delete:
            try:
                await asyncio.to_thread(os.remove, source)
            except OSError as e:
                raise from_os_error(e, "File removing", source) from e
