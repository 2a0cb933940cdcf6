from functools import lru_cache
from pathlib import Path
from typing import Optional, cast

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CRAWLER_SIGNATURES: tuple[str, ...] = (
    "facebookexternalhit",
    "Facebot",
    "WhatsApp",
    "Twitterbot",
    "LinkedInBot",
    "Pinterest",
    "Slackbot",
    "TelegramBot",
    "Discordbot",
    "Googlebot",
    "bingbot",
    "Embedly",
    "Quora Link Preview",
    "Showyoubot",
    "outbrain",
    "vkShare",
    "W3C_Validator",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(default="Post Preview", description="Application name")

    api_base_url: AnyHttpUrl = Field(
        default=cast(AnyHttpUrl, "https://api.duocortex.com"),
        description="Base URL of the posts API",
    )
    site_base_url: AnyHttpUrl = Field(
        default=cast(AnyHttpUrl, "https://duocortex.in"),
        description="Public site URL used for canonical post links",
    )

    site_name: str = "DuoCortex"
    twitter_site: str = "@duocortex"
    default_image_url: str = "https://duocortex.in/assets/img/logo-1.png"
    favicon_url: str = "https://duocortex.in/assets/img/logo-1.png"
    fallback_title: str = "DuoCortex Post"
    fallback_description: str = (
        "View this post on DuoCortex - Every Medico's Digital Campus"
    )
    fallback_author: str = "DuoCortex User"

    title_max_length: int = Field(default=60, gt=3)
    description_max_length: int = Field(default=160, gt=3)
    image_width: int = 1200
    image_height: int = 630
    cache_max_age: int = Field(default=300, ge=0, description="Seconds")

    fetch_timeout: float = Field(
        default=5.0, gt=0, description="Timeout in seconds for the posts API"
    )

    preview_path_prefix: str = "/post/"
    crawler_signatures: tuple[str, ...] = DEFAULT_CRAWLER_SIGNATURES

    spa_index_path: Optional[Path] = Field(
        default=None,
        description="Entry document of the client app, served when not previewing",
    )
    static_dir: Optional[Path] = None

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def api_base(self) -> str:
        return str(self.api_base_url).rstrip("/")

    @property
    def site_base(self) -> str:
        return str(self.site_base_url).rstrip("/")

    @property
    def spa_entry_document(self) -> Optional[Path]:
        """Entry document served on delegation; defaults to the static index."""
        if self.spa_index_path is not None:
            return self.spa_index_path
        if self.static_dir is not None:
            return self.static_dir / "index.html"
        return None


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
