from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    data_dir: Path = Field(default=Path("data"))
    document_name: str = Field(default="heart-of-darkness.txt")
    # preset name; "none" disables domain keyword augmentation
    domain: str = Field(default="heart-of-darkness")
    # JSON mapping file, takes precedence over ``domain`` when set
    mapping_file: Path | None = Field(default=None)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="PASSAGE_KB_",  # PASSAGE_KB_DATA_DIR, PASSAGE_KB_DOMAIN, ...
    )

    @field_validator("domain", "log_level", mode="before")
    @classmethod
    def _strip(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("mapping_file", mode="before")
    @classmethod
    def _empty_to_none(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
