from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv

from paydash.core.constants import CARD_BRANDS, DECLINE_REASON_CODES, STATUSES

BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(BASE_DIR / ".env")

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _resolve_data_file(raw: str) -> Path:
    path = Path(raw)
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


class Settings:
    """Runtime settings shared across the backend application."""

    def __init__(self) -> None:
        self.title: str = os.getenv("PAYDASH_TITLE", "Merchant Transaction Dashboard API")
        self.version: str = os.getenv("PAYDASH_VERSION", "1.0.0")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3001"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: List[str] = _split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
        self.transactions_file: Path = _resolve_data_file(os.getenv("TRANSACTIONS_FILE", "data/transactions.json"))
        # Static filter options shown in the dashboard dropdowns.
        self.filter_options: Dict[str, List[str]] = {
            "cardBrands": list(CARD_BRANDS),
            "statuses": list(STATUSES),
            "declineReasonCodes": list(DECLINE_REASON_CODES),
        }


settings = Settings()
