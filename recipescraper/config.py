"""Global settings for recipescraper."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    impersonate: str = "chrome120"
    timeout: Optional[int] = None
    parse_chunk_size: int = 4096
    default_encoding: str = "utf-8"


settings = Settings()
