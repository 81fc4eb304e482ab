from dotenv import load_dotenv
import os
from typing import Final # So that my variables are immutable

# Load environment variables from .env file
load_dotenv(dotenv_path=".env")

# Database configuration
DATABASE_URL: Final[str] = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./products.db")

# Application metadata
APP_TITLE: Final[str] = os.getenv("APP_TITLE", "Product Catalog API")
APP_VERSION: Final[str] = os.getenv("APP_VERSION", "0.1.0")
GREETING: Final[str] = os.getenv("GREETING", "Welcome")

# CORS, comma separated list of origins
CORS_ORIGINS: Final[list[str]] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# Logging
LANG: Final[str] = os.getenv("LANG_CODE", "en")
LOGLEVEL: Final[str] = os.getenv("LOGLEVEL", "INFO").upper()
DEBUG: Final[bool] = os.getenv("DEBUG", "False").lower() in ("true", "1", "t")  # Convert to boolean
