"""Central configuration for the storefront.

Values come from the environment (optionally a ``.env`` file in the
working directory) and are read once, at import time.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _split(raw: str | None) -> tuple[str, ...] | None:
    if not raw:
        return None
    return tuple(part.strip() for part in raw.split(",") if part.strip())


class Settings:
    """Central configuration for the storefront."""

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parents[3]
    DATA_DIR: Path = Path(os.getenv("STOREFRONT_DATA_DIR", BASE_DIR / "data"))
    LOGS_DIR: Path = Path(os.getenv("STOREFRONT_LOGS_DIR", BASE_DIR / "logs"))

    # --- Catalog ---
    # Collation language: bg or en (see domain.service.collation)
    LOCALE: str = os.getenv("STOREFRONT_LOCALE", "bg")
    PRODUCT_TYPES: tuple[str, ...] | None = _split(os.getenv("STOREFRONT_PRODUCT_TYPES"))
    CATALOG_PATH: str = "/products"

    # --- Money ---
    CURRENCY: str = os.getenv("STOREFRONT_CURRENCY", "EUR")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper()
