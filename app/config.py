import datetime as dt
import os


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///app.db")
    if DATABASE_URL.startswith("postgres://"):
        DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    # missing translation keys are logged only in development
    I18N_DEBUG = _flag("I18N_DEBUG", os.getenv("FLASK_DEBUG", "0"))

    # the session cookie doubles as the per-device preference store
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "patente_session")
    PERMANENT_SESSION_LIFETIME = dt.timedelta(days=int(os.getenv("PERMANENT_SESSION_DAYS", "365")))
