from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Notion
    NOTION_TOKEN: str = ""
    NOTION_DATABASE_ID: str = ""

    # Slug lookups skip the published filter unless this is enabled
    SLUG_QUERY_REQUIRES_PUBLISHED: bool = False

    # Site
    SITE_TITLE: str = "Blog"
    BUILD_DIR: str = "out"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def build_path(self) -> Path:
        return Path(self.BUILD_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
