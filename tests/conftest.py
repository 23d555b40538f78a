import logging

import boto3
import pytest
from moto import mock_aws

from file_providers.cloud_storages.aws_s3_file_provider import AwsS3FileProvider
from file_providers.local_storages.local_file_provider import LocalFileProvider
from file_providers.logging_management.logging_manager import NOISY_LOGGERS
from file_providers.support.constants import APP_NAME
from tests.consts import TEST_BUCKET_NAME, TEST_DESTINATION_BUCKET_NAME, TEST_REGION


# Logging -----------------------------------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def setup_test_logging():
    """Let every provider log line reach caplog, keep the AWS libraries quiet."""
    logging.getLogger(APP_NAME).setLevel(logging.DEBUG)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@pytest.fixture
def caplog(caplog):
    """Enhanced caplog fixture that captures the provider logger."""
    caplog.set_level(logging.DEBUG, logger=APP_NAME)
    return caplog


def close_all_log_handlers():
    """Close all root logging handlers to release file handles."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if hasattr(handler, "close"):
            handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    close_all_log_handlers()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


# LOCAL FIXTURES ----------------------------------------------------------------------------------------------
@pytest.fixture
def base_dir(tmp_path):
    """Root directory of the local provider."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def other_dir(tmp_path):
    """A directory outside the provider root, used as a move destination."""
    path = tmp_path / "other"
    path.mkdir()
    return path


@pytest.fixture
def local_provider(base_dir):
    return LocalFileProvider(str(base_dir))


# AWS FIXTURES ------------------------------------------------------------------------------------------------
@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can ever reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def mocked_aws(aws_credentials):
    """Mock all AWS services for the duration of the test."""
    with mock_aws():
        yield


@pytest.fixture
def s3_client(mocked_aws):
    """S3 client with the source and destination buckets created."""
    client = boto3.client("s3", region_name=TEST_REGION)
    client.create_bucket(Bucket=TEST_BUCKET_NAME)
    client.create_bucket(Bucket=TEST_DESTINATION_BUCKET_NAME)
    return client


@pytest.fixture
def s3_provider(s3_client):
    return AwsS3FileProvider(TEST_BUCKET_NAME, s3_client=s3_client)
