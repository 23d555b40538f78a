"""
Listing contract shared by all file providers
---------------------------------------------
Defines the Pydantic model returned by FileProvider.read_dir.
Both the local and the S3 provider build the same model so callers never
need to know which backend produced a listing.
"""
from pydantic import BaseModel, ConfigDict, Field


class FileEntry(BaseModel):
    """
    One member of a directory (local) or of a key prefix (S3).
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="File name (local) or full object key (S3)")
    size: int = Field(ge=0, description="Size in bytes")
