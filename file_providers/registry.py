"""
File provider registry.

Maps backend names to FileProvider implementations so applications can pick a
backend from configuration instead of importing a concrete class.
"""
import logging
from typing import Dict, Type

from file_providers.cloud_storages.aws_s3_file_provider import AwsS3FileProvider
from file_providers.interfaces.file_provider_interface import FileProvider
from file_providers.local_storages.local_file_provider import LocalFileProvider
from file_providers.logging_management.logging_manager import LoggingManager
from file_providers.support import constants
from file_providers.support.constants import APP_NAME

LOCAL_PROVIDER = "local"
AWS_S3_PROVIDER = "aws-s3"

_FILE_PROVIDER_REGISTRY: Dict[str, Type[FileProvider]] = {}
logger = logging.getLogger(APP_NAME)


def register_file_provider(name: str, provider_class: Type[FileProvider]) -> None:
    """
    Register a file provider implementation.

    Args:
        name: The name the implementation is looked up by
        provider_class: A FileProvider subclass
    """
    logger.debug("Registering file provider: %s", name)
    _FILE_PROVIDER_REGISTRY[name] = provider_class


def get_file_provider(name: str, **kwargs) -> FileProvider:
    """
    Get a file provider implementation by name.

    Args:
        name: The name of the file provider implementation
        **kwargs: Arguments passed to the provider constructor

    Returns:
        An instance of the requested file provider

    Raises:
        ValueError: If no implementation is registered under the name
    """
    logger.debug("Getting file provider: %s", name)

    if name not in _FILE_PROVIDER_REGISTRY:
        raise ValueError(f"File provider not registered: {name}")

    provider_class = _FILE_PROVIDER_REGISTRY[name]
    return provider_class(**kwargs)


def create_file_provider_from_env(setup_logging: bool = False) -> FileProvider:
    """
    Build the provider selected by USE_AWS: an S3 provider for S3_BUCKET_NAME,
    otherwise a local provider rooted at STORAGE_ROOT.

    Args:
        setup_logging: Also configure console and LOG_FILE_PATH logging first,
            for applications that have no logging setup of their own
    """
    if setup_logging:
        LoggingManager.setup_logging(log_file_path=constants.LOG_FILE_PATH)

    if constants.USE_AWS:
        if not constants.S3_BUCKET_NAME:
            raise ValueError("USE_AWS is set but S3_BUCKET_NAME is empty")
        logger.info("Using S3 bucket: %s", constants.S3_BUCKET_NAME)
        return get_file_provider(AWS_S3_PROVIDER, bucket=constants.S3_BUCKET_NAME)

    logger.info("Using local storage root: %s", constants.STORAGE_ROOT)
    return get_file_provider(LOCAL_PROVIDER, base=constants.STORAGE_ROOT)


register_file_provider(LOCAL_PROVIDER, LocalFileProvider)
register_file_provider(AWS_S3_PROVIDER, AwsS3FileProvider)
