# filmgraph/common/settings.py
from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class StoreConfig(BaseModel):
    # first identifier handed out by each allocator
    film_id_start: int = Field(1, ge=0)
    user_id_start: int = Field(1, ge=0)


class RankingConfig(BaseModel):
    default_count: int = Field(10, ge=1, description="Fallback for popular() when count is missing or <= 0")


class RelationsConfig(BaseModel):
    strict_references: bool = Field(
        False,
        description="Raise NotFound on dangling friend ids instead of skipping them",
    )


class ValidationConfig(BaseModel):
    min_release_date: date = date(1895, 12, 28)
    title_max_length: int = 100
    description_max_length: int = 200

    login_min_length: int = 4
    login_max_length: int = 20
    login_pattern: str = r"^\w+$"

    name_default_from_login: bool = True
    require_mpa: bool = False

    @field_validator("login_max_length")
    @classmethod
    def _max_not_below_min(cls, v, info):
        lo = info.data.get("login_min_length", 1)
        if v < lo:
            raise ValueError("login_max_length must be >= login_min_length")
        return v


class MessagesConfig(BaseModel):
    film_not_found: str = "Film with id {id} not found"
    film_duplicate: str = "Film with title '{title}' and release year {year} already exists"
    user_not_found: str = "User with id {id} not found"
    email_duplicate: str = "User with email {email} already exists"
    login_duplicate: str = "User with login {login} already exists"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "filmgraph"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    store: StoreConfig = StoreConfig()
    ranking: RankingConfig = RankingConfig()
    relations: RelationsConfig = RelationsConfig()
    validation: ValidationConfig = ValidationConfig()
    messages: MessagesConfig = MessagesConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from filmgraph.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
