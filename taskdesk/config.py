import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# .env is optional; real environment variables win
load_dotenv(override=False)


def _env(*names, default=None):
    """Return the first non-empty value among the given env var names."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default


def _database_url() -> str:
    url = os.environ.get("DATABASE_URL")
    if url:
        return url

    host = _env("DB_HOST", "REACT_APP_DB_HOST")
    if not host:
        # Default to local SQLite for dev
        return "sqlite:///./taskdesk.db"

    return URL.create(
        "postgresql+psycopg2",
        username=_env("DB_USER", "REACT_APP_DB_USER"),
        password=_env("DB_PASSWORD", "REACT_APP_DB_PASSWORD"),
        host=host,
        port=int(_env("DB_PORT", "REACT_APP_DB_PORT", default=5432)),
        database=_env("DB_NAME", "REACT_APP_DB_NAME"),
    ).render_as_string(hide_password=False)


DATABASE_URL = _database_url()


def _frontend_origins() -> list:
    raw = os.environ.get("FRONTEND_ORIGIN", "http://localhost:3000,http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


FRONTEND_ORIGINS = _frontend_origins()

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 5000))

BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 10))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
