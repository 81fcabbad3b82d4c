"""
Configuration settings for the dbbench config generator.

Uses Pydantic Settings to load environment variables for the Qserv source tree
location, the integration-test case to extract, output paths and logging.
Command-line flags override these values.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Inputs
    qserv_src_path: Path = Field(Path.home() / "src" / "qserv", alias="QSERV_SRC_PATH")
    case_id: str = Field("case01", alias="CASE_ID")

    # Outputs
    dbbench_conf: Path = Field(Path("/tmp/dbbench.ini"), alias="DBBENCH_CONF")
    results_dir: Path = Field(Path("/tmp/dbbench"), alias="DBBENCH_RESULTS_DIR")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
