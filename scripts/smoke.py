import httpx

from app.client import run
from app.core.config import settings
from app.core.logging import setup_logging

setup_logging(settings.LOG_LEVEL)

with httpx.Client(base_url=settings.SMOKE_BASE_URL, timeout=10.0) as http:
    run(http, settings.SMOKE_ACCOUNT)
