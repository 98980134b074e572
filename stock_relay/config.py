"""Application configuration settings."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings:
    """Application settings loaded from environment variables."""

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))
    # Development default, tighten for production
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "*")

    # Provider Configuration
    TWSE_BASE_URL: str = os.getenv("TWSE_BASE_URL", "https://www.twse.com.tw")
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "5.0"))
    MARKET_TIMEZONE: str = os.getenv("MARKET_TIMEZONE", "Asia/Taipei")

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def allowed_origins(self) -> list:
        """Return CORS origins as a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def stock_day_url(self) -> str:
        """Return the daily trading report endpoint."""
        return f"{self.TWSE_BASE_URL.rstrip('/')}/exchangeReport/STOCK_DAY"


settings = Settings()
