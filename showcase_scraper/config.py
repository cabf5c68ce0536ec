from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    USER_AGENT: str = "showcase-scraper"
    MAX_CONCURRENT_REQUESTS: int = 10

    # GitHub
    GITHUB_TOKEN: str | None = None
    GITHUB_GRAPHQL_URL: str = "https://api.github.com/graphql"

    # Showcase discussion
    SHOWCASE_ORGANIZATION: str = "withastro"
    SHOWCASE_REPOSITORY: str = "starlight"
    SHOWCASE_DISCUSSION_NUMBER: int | None = None
    SHOWCASE_CONTENT_DIR: str = "src/content/showcase"
    COMMENTS_PAGE_SIZE: int = 100

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("COMMENTS_PAGE_SIZE")
    def validate_page_size(cls, v: int):
        # GraphQL connections accept at most 100 nodes per page
        if not 1 <= v <= 100:
            raise ValueError("COMMENTS_PAGE_SIZE must be between 1 and 100")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
