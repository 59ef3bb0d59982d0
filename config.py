"""Configuration module for Flask application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', '1') == '1'
    ENV = os.getenv('FLASK_ENV', 'development')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Database - Support multiple environment variable naming conventions
    # Priority: DATABASE_URL > DB_* > POSTGRES_*
    DATABASE_URL = os.getenv('DATABASE_URL')

    if not DATABASE_URL:
        # Try DB_* variables (Docker style)
        DB_HOST = os.getenv('DB_HOST') or os.getenv('POSTGRES_HOST', 'localhost')
        DB_PORT = os.getenv('DB_PORT') or os.getenv('POSTGRES_PORT', '5432')
        DB_NAME = os.getenv('DB_NAME') or os.getenv('POSTGRES_DB', 'lettings')
        DB_USER = os.getenv('DB_USER') or os.getenv('POSTGRES_USER', 'lettings')
        DB_PASSWORD = os.getenv('DB_PASSWORD') or os.getenv('POSTGRES_PASSWORD', 'lettings')

        DATABASE_URL = (
            f"postgresql://{DB_USER}:{DB_PASSWORD}"
            f"@{DB_HOST}:{DB_PORT}/{DB_NAME}"
        )

    # SQLAlchemy
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_ECHO = os.getenv('SQLALCHEMY_ECHO', 'false').lower() == 'true'
    DB_CREATE_ALL = os.getenv('DB_CREATE_ALL', 'false').lower() == 'true'

    # Domain events over Redis pub/sub
    REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/0')
    EVENTS_ENABLED = os.getenv('EVENTS_ENABLED', 'true').lower() == 'true'
    EVENTS_CHANNEL_PREFIX = os.getenv('EVENTS_CHANNEL_PREFIX', '')
    EVENTS_MAX_WORKERS = int(os.getenv('EVENTS_MAX_WORKERS', '2'))

    # Listener worker (flask listen-tenant-events)
    EVENTS_CONNECT_RETRIES = int(os.getenv('EVENTS_CONNECT_RETRIES', '5'))
    EVENTS_RETRY_DELAY = float(os.getenv('EVENTS_RETRY_DELAY', '2'))

    # Error tracking
    SENTRY_DSN = os.getenv('SENTRY_DSN')
