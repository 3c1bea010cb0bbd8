from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    API_NAME: str = "GitHub Comments"
    API_SUMMARY: str = "Embeds a GitHub issue comment thread into documentation pages"
    VERSION: str = "v0.1.x"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    USER_AGENT: str = "gh-comments"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # GitHub
    GITHUB_TOKEN: str | None = None
    GITHUB_API_VERSION: str = "2022-11-28"
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_REPO_OWNER: str = "kidscancode"
    GITHUB_REPO_NAME: str = "godot_recipes"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
