"""
MongoDB configuration for the seed loader.

Reads connection settings from environment variables and .env files,
with sensible defaults for local development. APP_ENV (from the process
environment or the base .env) selects an overlay file, .env.<APP_ENV>,
whose values take priority over the base file.
"""

from enum import Enum
from typing import Optional
from urllib.parse import quote_plus

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Deployment environment, selects the overlay .env file."""

    LOCAL = "local"
    DEV = "dev"
    PROD = "prod"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Environment":
        for env in cls:
            if value and env.value == value.lower():
                return env
        return cls.LOCAL


class Settings(BaseSettings):
    """Seed loader settings including MongoDB connection and collection names."""

    APP_ENV: Environment = Environment.LOCAL

    # Full connection string, overrides the individual parts below
    MONGO_URL: Optional[str] = None

    MONGO_USERNAME: Optional[str] = None
    MONGO_PASSWORD: Optional[str] = None
    MONGO_HOST: str = "localhost"
    MONGO_PORT: int = 27017
    MONGO_DATABASE: str = "metrics"
    MONGO_TIMEOUT_MS: int = 5000

    # Collections read by the enrichment and view duplication stages
    METADATA_COLLECTION: str = "metadata"
    DUPLICATION_COLLECTION: str = "duplication"

    @field_validator("APP_ENV", mode="before")
    @classmethod
    def parse_app_env(cls, v):
        """Unknown environments fall back to local."""
        return v if isinstance(v, Environment) else Environment.from_string(v)

    @model_validator(mode="after")
    def check_credentials(self) -> "Settings":
        if self.MONGO_PASSWORD and not self.MONGO_USERNAME and not self.MONGO_URL:
            raise ValueError("MONGO_PASSWORD is set but MONGO_USERNAME is not")
        return self

    @property
    def mongo_uri(self) -> str:
        if self.MONGO_URL:
            return self.MONGO_URL
        auth = ""
        if self.MONGO_USERNAME:
            auth = quote_plus(self.MONGO_USERNAME)
            if self.MONGO_PASSWORD:
                auth += ":" + quote_plus(self.MONGO_PASSWORD)
            auth += "@"
        return f"mongodb://{auth}{self.MONGO_HOST}:{self.MONGO_PORT}"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def load_settings(env_file: str = ".env") -> Settings:
    """
    Load settings from the base env file and its environment overlay.

    Args:
        env_file: Path of the base env file

    Returns:
        Settings with .env.<APP_ENV> applied over the base file
    """
    base = Settings(_env_file=env_file)
    # Later files take priority
    return Settings(_env_file=(env_file, f"{env_file}.{base.APP_ENV.value}"))


# Global settings instance
settings = load_settings()
