"""ASGI entry point: ``uvicorn finance_tracker.main:app``."""

import logging

from finance_tracker.core.app import create_app
from finance_tracker.settings.app import AppSettings

logging.basicConfig(
    level=AppSettings().log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = create_app()
