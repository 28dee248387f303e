import os
from datetime import date
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from repo root (one directory up from this package)
load_dotenv(Path(__file__).resolve().parents[1] / ".env", override=False)

def _getenv_int(name, default):
    v = os.getenv(name)
    try:
        return int(v) if v is not None else default
    except ValueError:
        return default

def _getenv_str(name, default):
    v = os.getenv(name)
    return v if v is not None else default

def _getenv_date(name, default_iso: Optional[str] = None) -> Optional[date]:
    v = os.getenv(name)
    if v:
        return date.fromisoformat(v)
    return date.fromisoformat(default_iso) if default_iso else None


DEFAULT_SEED = 1

SEED = _getenv_int("BAKERY_SEED", DEFAULT_SEED)
YEARS_TO_INCLUDE = _getenv_int("BAKERY_YEARS_TO_INCLUDE", 2)
ORDER_PRODUCTS = _getenv_int("BAKERY_ORDER_PRODUCTS", 8)
DELETABLE_PRODUCTS = _getenv_int("BAKERY_DELETABLE_PRODUCTS", 4)
TODAY = _getenv_date("BAKERY_TODAY")  # None -> date.today() at generation time
ASSETS_DIR = Path(_getenv_str("BAKERY_ASSETS_DIR", str(Path(__file__).resolve().parents[1] / "assets")))

API_HOST = _getenv_str("API_HOST", "0.0.0.0")
API_PORT = _getenv_int("API_PORT", 8080)
