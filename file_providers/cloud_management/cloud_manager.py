"""
Contains the CloudManager class responsible for creating and holding AWS clients.
"""
import logging
from typing import Optional

import boto3

from file_providers.support.constants import (
    APP_NAME,
    AWS_ACCESS_KEY_ID,
    AWS_SECRET_ACCESS_KEY,
    AWS_REGION,
    AWS_ENDPOINT_URL,
)

logger = logging.getLogger(APP_NAME)


class CloudManager:
    """Manages Cloud interactions and holds the clients shared by the cloud providers."""

    def __init__(self):
        self._s3_client = None

    @property
    def s3_client(self):
        """The S3 client, created from the environment settings on first use."""
        if self._s3_client is None:
            self.create_s3_client(
                access_key_id=AWS_ACCESS_KEY_ID,
                secret_access_key=AWS_SECRET_ACCESS_KEY,
                region=AWS_REGION,
                endpoint_url=AWS_ENDPOINT_URL,
            )
        return self._s3_client

    def create_s3_client(
            self,
            access_key_id: str,
            secret_access_key: str,
            region: str,
            endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Create an S3 client using Boto3.
        Empty credentials are left out so boto3 falls back to its default chain
        (environment, shared config, instance role).
        """
        client_kwargs = {"region_name": region or None}
        if access_key_id and secret_access_key:
            client_kwargs["aws_access_key_id"] = access_key_id
            client_kwargs["aws_secret_access_key"] = secret_access_key
        if endpoint_url:
            client_kwargs["endpoint_url"] = endpoint_url

        logger.debug(
            "Creating S3 client (region=%s, endpoint=%s)", region, endpoint_url or "default"
        )
        self._s3_client = boto3.client("s3", **client_kwargs)
