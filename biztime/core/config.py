from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Relative SQLite file by default; point at Postgres in production
    DATABASE_URL: str = "sqlite:///./biztime.db"

    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
