from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="FEED_", extra="ignore")

    # per-source page size of the upstream API, used only to guess end of data
    page_size: int = Field(default=20, gt=0)
    log_level: str = "INFO"
