"""
Configuration settings for the customer importer.

Uses Pydantic Settings to load environment variables (or a `.env` file) for
the default email column, skip flags, CSV dialect and logging. CLI options
override these values per invocation.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from customer_importer.domain.models import ImportOptions


class Settings(BaseSettings):
    # Import
    email_field: str = Field("email", alias="IMPORTER_EMAIL_FIELD")
    skip_invalid_emails: bool = Field(False, alias="IMPORTER_SKIP_INVALID")
    skip_duplicate_emails: bool = Field(False, alias="IMPORTER_SKIP_DUPLICATES")

    # CSV input
    csv_delimiter: str = Field(",", alias="IMPORTER_DELIMITER", min_length=1, max_length=1)
    input_encoding: str = Field("utf-8", alias="IMPORTER_ENCODING")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def import_options(self) -> ImportOptions:
        """Build the skip-flag record used by the aggregator."""
        return ImportOptions(
            skip_invalid_emails=self.skip_invalid_emails,
            skip_duplicate_emails=self.skip_duplicate_emails,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
