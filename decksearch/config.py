from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from decksearch.clients.tofulearn import TOFULEARN_DECK_TEMPLATE


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="DECKSEARCH_", env_file=".env", extra="ignore")

    # Deck to fetch and the substring to look for in its words
    deck_id: str = "57a5f40fe02107451d3d3c81"
    query: str = "je"

    # One cache file per deck lives under this directory
    cache_dir: Path = Path("cache")

    base_url: str = TOFULEARN_DECK_TEMPLATE

    # Safety cap on pagination in case the end-of-data sentinel never arrives
    max_pages: int = Field(default=1000, ge=1)

    request_timeout: float = Field(default=30.0, gt=0)

