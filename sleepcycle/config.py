from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")
    DATABASE_URL: str = "sqlite:///./sleepcycle.db"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CLOCK_TZ: str = "Europe/Amsterdam"

    DEFAULT_SLEEP_DELAY: int = 15
    MIN_SLEEP_DELAY: int = 5
    MAX_SLEEP_DELAY: int = 30

settings = Settings()
