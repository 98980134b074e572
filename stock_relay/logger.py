"""Logging setup shared by the whole service."""
import logging

from .config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(module)s - %(message)s",
    handlers=[logging.StreamHandler()]
)

logger = logging.getLogger("stock_relay")
