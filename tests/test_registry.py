import logging
from logging.handlers import RotatingFileHandler

import pytest

from file_providers import registry
from file_providers.cloud_storages.aws_s3_file_provider import AwsS3FileProvider
from file_providers.local_storages.local_file_provider import LocalFileProvider
from file_providers.registry import (
    create_file_provider_from_env,
    get_file_provider,
    register_file_provider,
)
from file_providers.support import constants
from tests.consts import TEST_BUCKET_NAME


def test_get_local_file_provider(tmp_path):
    provider = get_file_provider("local", base=str(tmp_path))

    assert isinstance(provider, LocalFileProvider)
    assert provider.get_base_path() == str(tmp_path)


def test_get_aws_s3_file_provider(s3_client):
    provider = get_file_provider("aws-s3", bucket=TEST_BUCKET_NAME, s3_client=s3_client)

    assert isinstance(provider, AwsS3FileProvider)
    assert provider.get_base_path() == TEST_BUCKET_NAME


def test_get_unknown_file_provider_raises():
    with pytest.raises(ValueError, match="not registered"):
        get_file_provider("ftp")


def test_register_file_provider(monkeypatch, tmp_path):
    monkeypatch.setattr(registry, "_FILE_PROVIDER_REGISTRY", dict(registry._FILE_PROVIDER_REGISTRY))

    class ScratchFileProvider(LocalFileProvider):
        pass

    register_file_provider("scratch", ScratchFileProvider)

    assert isinstance(get_file_provider("scratch", base=str(tmp_path)), ScratchFileProvider)


def test_create_file_provider_from_env_defaults_to_local(monkeypatch, tmp_path):
    monkeypatch.setattr(constants, "USE_AWS", False)
    monkeypatch.setattr(constants, "STORAGE_ROOT", str(tmp_path))

    provider = create_file_provider_from_env()

    assert isinstance(provider, LocalFileProvider)
    assert provider.get_base_path() == str(tmp_path)


def test_create_file_provider_from_env_uses_s3_when_enabled(monkeypatch, s3_client):
    monkeypatch.setattr(constants, "USE_AWS", True)
    monkeypatch.setattr(constants, "S3_BUCKET_NAME", TEST_BUCKET_NAME)

    provider = create_file_provider_from_env()

    assert isinstance(provider, AwsS3FileProvider)
    assert provider.get_base_path() == TEST_BUCKET_NAME


def test_create_file_provider_from_env_requires_bucket(monkeypatch):
    monkeypatch.setattr(constants, "USE_AWS", True)
    monkeypatch.setattr(constants, "S3_BUCKET_NAME", "")

    with pytest.raises(ValueError, match="S3_BUCKET_NAME"):
        create_file_provider_from_env()


def test_create_file_provider_from_env_can_set_up_logging(monkeypatch, tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "file_providers.log"
    monkeypatch.setattr(constants, "USE_AWS", False)
    monkeypatch.setattr(constants, "STORAGE_ROOT", str(tmp_path))
    monkeypatch.setattr(constants, "LOG_FILE_PATH", str(log_file))

    create_file_provider_from_env(setup_logging=True)
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers)
    assert f"Using local storage root: {tmp_path}" in log_file.read_text(encoding="utf-8")
