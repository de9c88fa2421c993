import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv()

basedir = Path(__file__).resolve().parent


def _env_flag(name: str, default: bool = False) -> bool:
    """Interpret typical truthy strings from environment variables."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "fallback-dev-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{basedir / 'instance' / 'dailytiers.sqlite'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"  # adjust to Strict if needed
    # Default to secure cookies only when explicitly requested so local dev/tests keep working.
    SESSION_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE", default=False)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    TIERS_MAX_ATTEMPTS = int(os.getenv("TIERS_MAX_ATTEMPTS", "3"))
    # Raise on authored trueTier mismatches instead of correcting them.
    TIERS_CATALOG_STRICT = _env_flag("TIERS_CATALOG_STRICT", default=False)
    TIERS_ENABLE_ROLLOVER = _env_flag("TIERS_ENABLE_ROLLOVER", default=True)
