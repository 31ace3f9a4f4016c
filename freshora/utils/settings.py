# freshora/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", 3001))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./freshora.db")
FRONTEND_URL = os.getenv("FRONTEND_URL", "*")

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
CELERY_TASK_ALWAYS_EAGER = os.getenv("CELERY_TASK_ALWAYS_EAGER", "false").lower() == "true"

SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = int(os.getenv("SMTP_PORT", 587))
SMTP_USERNAME = os.getenv("SMTP_USERNAME")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
SMTP_FROM_EMAIL = os.getenv("SMTP_FROM_EMAIL", "noreply@freshora.com")
SMTP_FROM_NAME = os.getenv("SMTP_FROM_NAME", "Freshora Laundry")

DEFAULT_SESSION_ID = os.getenv("DEFAULT_SESSION_ID", "default")
ORDER_LIST_DEFAULT_LIMIT = int(os.getenv("ORDER_LIST_DEFAULT_LIMIT", 50))
ORDER_LIST_MAX_LIMIT = 100

# "X per Y" as understood by slowapi, applied per client address
RATE_LIMIT = os.getenv("RATE_LIMIT", "100 per 15 minutes")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"


def is_development() -> bool:
    return ENVIRONMENT.lower() == "development"
