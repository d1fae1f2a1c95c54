"""Application settings with environment variable support."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SBS_",  # SBS_SITE_BASE_URL, SBS_PRIMARY_FEED_URL, etc.
    )

    # Feeds
    primary_feed_url: str = "https://0666sbs.podcaster.de/spooky-bitch-show.rss"
    secondary_feed_url: Optional[str] = None  # Cross-promotion feed, disabled when empty
    external_title_marker: str = "spooky bitch show"

    # Site
    site_base_url: str = ""  # Must be set per deployment; empty gives root-relative links
    show_title: str = "Spooky Bitch Show"
    show_description: str = "Der Grusel und Mystery Podcast"
    display_timezone: str = "Europe/Berlin"

    # Parsing
    use_structured_parser: bool = True  # False selects the regex extractor
    keep_image_urls: bool = False

    # Ingestion
    fetch_timeout_seconds: int = 30
    user_agent: str = "SpookyFeedBot/1.0"


settings = Settings()
