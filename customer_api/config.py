# customer_api/config.py

import os
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict


DEFAULT_DATABASE_URL = "sqlite:///./data/app.db"


class ConfigError(RuntimeError):
    pass


class Settings(BaseModel):
    """
    Process-wide configuration.
    Built once at startup and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    database_url: str = DEFAULT_DATABASE_URL
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10
    port: int = 8000
    log_level: str = "INFO"
    request_timeout_seconds: float = 30.0
    report_missing_customers: bool = False
    cors_origins: tuple[str, ...] = ("*",)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("DB_HOST")
    if not host:
        return DEFAULT_DATABASE_URL

    user = os.getenv("DB_USER", "")
    password = os.getenv("DB_PASSWORD", "")
    name = os.getenv("DB_NAME", "")
    port = os.getenv("DB_PORT", "3306")
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"


def load_settings(env_file: str | None = None) -> Settings:
    load_dotenv(env_file or find_dotenv(usecwd=True))

    secret = os.getenv("JWT_SECRET") or os.getenv("JWT_SECRET_KEY")
    if not secret:
        raise ConfigError("JWT_SECRET must be set")

    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        database_url=_database_url(),
        jwt_secret=secret,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        request_timeout_seconds=float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30")),
        report_missing_customers=_env_bool("REPORT_MISSING_CUSTOMERS"),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
    )
