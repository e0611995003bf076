"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for MONGO_URI (module-level so validators can use it).
VALID_MONGO_URI_PREFIXES = (
    "mongodb://",
    "mongodb+srv://",
)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "https://careconnect-frontend-il7i.onrender.com",
]


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    LOG_LEVEL: str = "INFO"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGINS: list[str] = DEFAULT_CORS_ORIGINS

    # MongoDB: accounts live in the "users" collection of MONGO_DB_NAME
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "careconnect"

    # OpenAI: optional; only POST /chat needs it
    OPENAI_API_KEY: SecretStr | None = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_SYSTEM_PROMPT: str = "You are a helpful assistant."

    # JWT authentication
    JWT_SECRET: SecretStr = SecretStr("change-me-in-production")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60

    # Password hashing cost factor
    BCRYPT_ROUNDS: int = 10

    @field_validator("MONGO_URI")
    @classmethod
    def validate_mongo_uri(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGO_URI must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_MONGO_URI_PREFIXES):
            raise ValueError(
                "MONGO_URI must be a MongoDB URL (e.g. mongodb:// or mongodb+srv://)"
            )
        return v.strip()

    @field_validator("MONGO_DB_NAME")
    @classmethod
    def validate_mongo_db_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGO_DB_NAME must be set and non-empty")
        return v.strip()

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def validate_openai_api_key(cls, v: SecretStr | None) -> SecretStr | None:
        if v is None or not v.get_secret_value().strip():
            return None
        return v

    @field_validator("OPENAI_MODEL")
    @classmethod
    def validate_openai_model(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("OPENAI_MODEL must be set and non-empty")
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt.gensalt accepts 4..31
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
