import os

from dotenv import load_dotenv

load_dotenv()


APP_NAME = "file-providers"

USE_AWS = os.getenv("USE_AWS", "false").lower() == "true"

STORAGE_ROOT = os.getenv(
    "STORAGE_ROOT", os.path.abspath(os.path.join(os.getcwd(), "storage"))
)  # Base path of the local provider

S3_BUCKET_NAME = os.getenv("S3_BUCKET_NAME", "")
AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID", "")
AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY", "")
AWS_REGION = os.getenv("AWS_REGION_NAME", "us-east-1")
AWS_ENDPOINT_URL = os.getenv("AWS_ENDPOINT_URL") or None  # MinIO, moto server, ...

LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", os.path.join("logs", "file_providers.log"))
