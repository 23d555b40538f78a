"""
This module provides the AWS S3 implementation of:
- FileProvider: Abstracts file reading, writing, listing and moving (local or cloud).

S3 has no directories: a "directory" is a key prefix and every path argument
is turned into a key by dropping leading separators ("/a.txt" -> "a.txt").

Classes:
- AwsS3FileProvider: S3 bucket implementation of FileProvider.

Example:
    file_provider = AwsS3FileProvider("my-raw-bucket")

    await file_provider.write_file("uploads/a.pdf", pdf_bytes)
    await file_provider.move_file("uploads/a.pdf", "my-processed-bucket/a.pdf", delete=True)
"""
import asyncio
import logging
from typing import Any, BinaryIO, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from file_providers.cloud_management.cloud_manager import CloudManager
from file_providers.contracts.file_entry import FileEntry
from file_providers.interfaces.file_provider_interface import FileProvider
from file_providers.support.constants import APP_NAME
from file_providers.support.errors import from_boto_error
from file_providers.support.path_utils import join_path, key_prefix, split_bucket_location

logger = logging.getLogger(APP_NAME)

BOTO_ERRORS = (ClientError, BotoCoreError)


class AwsS3FileProvider(FileProvider):
    """
    S3 implementation of FileProvider, scoped to a single bucket.

    The boto3 client is shared by all calls of the instance; boto3 low-level
    clients are thread safe, so concurrent calls may run in parallel worker
    threads.
    """

    def __init__(self, bucket: str, s3_client: Optional[Any] = None):
        self.bucket = bucket
        if s3_client is None:
            s3_client = CloudManager().s3_client
        self.client = s3_client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bucket={self.bucket!r})"

    def get_base_path(self) -> str:
        return self.bucket

    def _location(self, key: str, bucket: Optional[str] = None) -> str:
        return f"{bucket or self.bucket}/{key}"

    async def read_file_buffer(self, path: str) -> BinaryIO:
        """
        Fetch the object and return its body, a stream read lazily from the network.
        """
        key = join_path("", path)
        logger.debug("Reading object %s", self._location(key))

        try:
            response = await asyncio.to_thread(
                self.client.get_object, Bucket=self.bucket, Key=key
            )
        except BOTO_ERRORS as e:
            logger.error(
                "Failure reading the file buffer: %s, Bucket: %s, Key: %s", e, self.bucket, key
            )
            raise from_boto_error(e, "Object reading", self._location(key)) from e

        return response["Body"]

    async def write_file(self, path: str, contents: bytes) -> None:
        """
        Upload the bytes under the key. A failed upload is raised to the caller.
        """
        key = join_path("", path)

        try:
            await asyncio.to_thread(
                self.client.put_object, Bucket=self.bucket, Key=key, Body=contents
            )
        except BOTO_ERRORS as e:
            logger.error("%s upload failed: %s", key, e)
            raise from_boto_error(e, "Object upload", self._location(key)) from e
        logger.info("%s uploaded to %s", key, self.bucket)

    async def write(self, path: str, content: str) -> None:
        await self.write_file(path, content.encode("utf-8"))

    async def delete_file(self, path: str) -> None:
        """
        Delete the object. S3 deletes of missing keys succeed silently, so the key
        is checked first to report a missing file the same way the local provider does.
        """
        key = join_path("", path)

        def delete_file_sync():
            self.client.head_object(Bucket=self.bucket, Key=key)
            self.client.delete_object(Bucket=self.bucket, Key=key)

        try:
            await asyncio.to_thread(delete_file_sync)
        except BOTO_ERRORS as e:
            raise from_boto_error(e, "Object deletion", self._location(key)) from e
        logger.info("Deleted %s", self._location(key))

    async def read_dir(self, path: str) -> List[FileEntry]:
        """
        List every object whose key starts with the given prefix.
        Entry names are the full object keys. A trailing "/" is kept, so
        "reports/" only matches keys inside that prefix.
        """
        prefix = key_prefix(path)
        logger.debug("Listing objects in %s with prefix %r", self.bucket, prefix)

        def read_dir_sync():
            entries = []
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                # Pages for an empty prefix carry no "Contents" at all
                for item in page.get("Contents", []):
                    entries.append(FileEntry(name=item["Key"], size=item.get("Size", 0)))
            return sorted(entries, key=lambda entry: entry.name)

        try:
            return await asyncio.to_thread(read_dir_sync)
        except BOTO_ERRORS as e:
            raise from_boto_error(e, "Object listing", self._location(prefix)) from e

    async def list_dir(self, path: str) -> List[str]:
        """
        Return ``{bucket}/{key}`` for every object under the prefix.

        Unlike the first version of this provider, which ignored path and always
        listed the whole bucket, path is used as a prefix the same way read_dir
        uses it. Pass "" or "/" to list the whole bucket.
        """
        entries = await self.read_dir(path)
        return [self._location(entry.name) for entry in entries]

    async def create_dir(self, path: str) -> None:
        """
        Nothing to create: the key namespace is flat, so any prefix already "exists".
        """
        logger.debug("create_dir(%r) is a no-op for bucket %s", path, self.bucket)

    async def move_file(self, file_path: str, ending_path: str, delete: bool) -> None:
        """
        Copy the object to another bucket with a server-side copy.

        ending_path is ``{bucket}/{file_name}``; only the bucket part is used and
        the copy keeps the original key. The source object is deleted afterwards
        when delete is set.

        :raises InvalidPathError: If ending_path has no bucket part
        """
        key = join_path("", file_path)
        ending_bucket, remainder = split_bucket_location(ending_path)
        if remainder and join_path("", remainder) != key:
            logger.debug(
                "Ignoring destination key %r, the copy keeps the key %r", remainder, key
            )

        logger.info("Moving file from %s to %s", self._location(key), ending_path)

        try:
            await asyncio.to_thread(
                self.client.copy_object,
                CopySource={"Bucket": self.bucket, "Key": key},
                Bucket=ending_bucket,
                Key=key,
            )
        except BOTO_ERRORS as e:
            raise from_boto_error(
                e, "Object copying", f"{self._location(key)} -> {ending_bucket}/{key}"
            ) from e

        if delete:
            try:
                await asyncio.to_thread(
                    self.client.delete_object, Bucket=self.bucket, Key=key
                )
            except BOTO_ERRORS as e:
                raise from_boto_error(e, "Object deletion", self._location(key)) from e
