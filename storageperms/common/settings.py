# storageperms/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from storageperms.common.strings.splitters import csv_to_list
from storageperms.common.uris import sqlite_url


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"


class DeviceConfig(BaseModel):
    # Stand-ins for the platform's Build.VERSION.RELEASE / SDK_INT and the app's targetSdkVersion
    release: str = "13"
    sdk_int: int = Field(33, ge=1)
    target_sdk: int = Field(33, ge=1)


class PermissionsConfig(BaseModel):
    granular_requires_target_sdk: bool = True
    # Permissions the in-memory requester answers "granted" for
    auto_grant: Annotated[List[str], NoDecode] = Field(default_factory=list)

    @field_validator("granular_requires_target_sdk", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)

    @field_validator("auto_grant", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class LibraryConfig(BaseModel):
    content_uri: str = "content://media/external/file"
    query_limit: int = Field(500, ge=1, le=10_000)
    query_workers: int = Field(1, ge=1, le=16)
    # Default directory for POST {prefix}/library/index when the request names none
    scan_root: Optional[Path] = None


class MediaIndexConfig(BaseModel):
    # Optional single URL (if set, it takes precedence over data_root/media_index.db)
    url: Optional[str] = None
    echo: bool = False


class PreferencesConfig(BaseModel):
    url: Optional[str] = None
    echo: bool = False


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "storageperms"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Paths --------
    data_root: Path = Path(".storageperms")

    # -------- Allowed extensions --------
    video_exts: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["mp4", "mov", "mkv", "webm", "3gp"])
    image_exts: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["jpg", "jpeg", "png", "gif", "webp", "heic"])

    @field_validator("video_exts", "image_exts", mode="before")
    @classmethod
    def _split_exts(cls, v):
        return csv_to_list(v, normalize=lambda s: s.lower().lstrip("."))

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    device: DeviceConfig = DeviceConfig()
    permissions: PermissionsConfig = PermissionsConfig()
    library: LibraryConfig = LibraryConfig()
    media_index: MediaIndexConfig = MediaIndexConfig()
    preferences: PreferencesConfig = PreferencesConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Derived URLs =====
    @computed_field  # type: ignore[misc]
    @property
    def media_index_url(self) -> str:
        if self.media_index.url:
            return self.media_index.url
        return sqlite_url(self.data_root / "media_index.db")

    @computed_field  # type: ignore[misc]
    @property
    def preferences_url(self) -> str:
        if self.preferences.url:
            return self.preferences.url
        return sqlite_url(self.data_root / "settings.db")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from storageperms.common.settings import get_settings
        cfg = get_settings()
    """
    s = Settings()  # pydantic_settings will read from .env automatically
    if s.app_env in ("development", "test"):
        s.data_root.mkdir(parents=True, exist_ok=True)
    return s
