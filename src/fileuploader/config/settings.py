"""Settings for the file uploader delegate and its bundled handlers."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FileUploaderSettings(BaseSettings):
    """Environment driven settings (prefix ``FILEUPLOADER_``)."""

    model_config = SettingsConfigDict(
        env_prefix="FILEUPLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registry
    delegate_name: str = Field(default="CoreFileUploaderDelegate")
    feature_prefix: str = Field(default="CoreFileUploaderDelegate_")

    # Picker defaults passed to handler actions
    default_max_size: int = Field(default=-1, ge=-1)  # -1 means no limit
    allow_offline: bool = Field(default=False)

    # Remote URL handler
    remote_download_timeout: float = Field(default=30.0, gt=0)
    remote_verify_ssl: bool = Field(default=True)


@lru_cache()
def get_settings() -> FileUploaderSettings:
    """Get cached settings instance."""
    return FileUploaderSettings()
