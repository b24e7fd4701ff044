from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.search.tuning import SearchTuning


class Settings(BaseSettings):
    offers_path: str = Field(default="data/offers_seed.json", alias="OFFERS_PATH")
    synonyms_path: str = Field(default="", alias="SYNONYMS_PATH")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    query_debounce_ms: int = Field(default=150, alias="QUERY_DEBOUNCE_MS")

    search_tuning: SearchTuning = Field(default_factory=SearchTuning, alias="SEARCH_TUNING")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def query_debounce_sec(self) -> float:
        return max(self.query_debounce_ms, 0) / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
