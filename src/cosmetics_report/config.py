# src/cosmetics_report/config.py

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Table layout
PADDING = 4
RULE_WIDTH = 130

SHOP_TITLE = "COSMETICS SHOP DATABASE - PostgreSQL"
SHOP_SUBTITLE = "10 SQL Queries + 3 SQL Injection Examples"

# libpq keyword string; a SQLAlchemy URL works too
DEFAULT_DSN = "dbname=cosmetics_shop user=cosmetics_admin password=Cosmetics2025! host=localhost"

load_dotenv(dotenv_path=Path.cwd() / ".env")


class Settings:
    """Runtime settings sourced from environment variables (and .env)."""

    def __init__(self) -> None:
        self.dsn: str = os.getenv("COSMETICS_DSN", DEFAULT_DSN)
        self.log_level: str = os.getenv("COSMETICS_LOG_LEVEL", "warning")


def load_settings() -> Settings:
    return Settings()
