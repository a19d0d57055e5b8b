"""Application configuration loaded from environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    # Storage
    STORAGE_BACKEND: str = "sql"  # "sql" or "redis"
    DATABASE_URL: str = "sqlite:///./wildtrail.db"
    REDIS_URL: str = "redis://localhost:6379/0"
    SESSION_RECORD_KEY: str = "game_state"
    COLLECTION_RECORD_KEY: str = "collection_state"

    # Session rules
    MAX_STAMINA: int = 5
    STARTING_CURRENCY: int = 0  # balance of a never-saved session
    RESET_CURRENCY: int = 100  # balance granted when a new run starts
    INVENTORY_ENABLED: bool = False
    RNG_SEED: int | None = None

    # Content
    CONTENT_DIR: Path = PACKAGE_DIR / "data"
    EVENTS_FILE: str = "events.csv"
    COLLECTIONS_FILE: str = "collections.csv"
    ARTWORK_DIR: Path | None = None
    START_EVENT_ID: int | None = None  # None = lowest event id

    # LLM (journey review)
    DASHSCOPE_API_KEY: str = ""
    LLM_MODEL: str = "qwen-plus"
    LLM_TEMPERATURE: float = 0.8
    LLM_MAX_TOKENS: int = 800

    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
