from pathlib import Path
from typing import Literal, Optional

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

    # Storage
    STORAGE_BACKEND: Literal["filesystem", "s3"] = "filesystem"
    CONTENT_ROOT: str = "content"
    STORAGE_RETRY_ATTEMPTS: int = 3
    STORAGE_RETRY_BACKOFF: float = 0.2

    # Blog
    POSTS_PREFIX: str = "posts/"
    POST_EXTENSION: str = ".mdx"
    TOP_POSTS_KEY: str = "posts/top/topPosts.json"

    # S3
    S3_BUCKET_NAME: str = ""
    S3_ENDPOINT_URL: Optional[str] = None
    S3_MAX_ITEMS: int = 5
    AWS_REGION: str = ""
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""

    # Contact
    SEND_MESSAGE_FUNCTION_NAME: str = ""

    # Localization
    DEFAULT_LOCALE: str = "en"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    ALBERTONET_API_KEY: str = ""

    @property
    def aws_client_kwargs(self) -> dict:
        kwargs = {"region_name": self.AWS_REGION or None}
        if self.AWS_ACCESS_KEY_ID and self.AWS_SECRET_ACCESS_KEY:
            kwargs["aws_access_key_id"] = self.AWS_ACCESS_KEY_ID
            kwargs["aws_secret_access_key"] = self.AWS_SECRET_ACCESS_KEY
        return kwargs


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
