"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "VoltShare"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Saved bills and rentals; set DATABASE_URL to move them off the working directory
    DATABASE_URL: str = "sqlite:///./voltshare.db"

    # JWT Authentication
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Billing defaults
    DEFAULT_RATE_PER_UNIT: float = 12.0
    CURRENCY_SYMBOL: str = "P"
    UNIT_LABEL: str = "kWh"
    DEFAULT_ROOM_NAME: str = "Room"


settings = Settings()
