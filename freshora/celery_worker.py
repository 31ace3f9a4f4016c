# freshora/celery_worker.py
from celery import Celery

from freshora.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    CELERY_TASK_ALWAYS_EAGER,
)

celery_app = Celery(
    "freshora",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# tasks must be imported explicitly so the worker registers them
celery_app.conf.imports = (
    "freshora.services.notification_service",
)

celery_app.conf.task_always_eager = CELERY_TASK_ALWAYS_EAGER
# publishing is fire-and-forget: an unreachable broker fails fast instead of blocking the request
celery_app.conf.task_publish_retry = False
celery_app.conf.task_ignore_result = True
celery_app.conf.timezone = "UTC"
