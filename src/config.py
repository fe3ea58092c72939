"""
Configuration Module for the Deribit Trading Client.

This module handles loading API credentials from environment variables,
selecting testnet vs production endpoints, and defining trading constants.
Client credentials are never hardcoded. They are read from a .env file
(or the process environment) at runtime.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from .env file
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# API Credentials (client-credentials grant)
# ---------------------------------------------------------------------------
DERIBIT_CLIENT_ID: str = os.getenv("DERIBIT_CLIENT_ID", "")
DERIBIT_CLIENT_SECRET: str = os.getenv("DERIBIT_CLIENT_SECRET", "")

# Toggle between the test environment and production
# Set USE_TESTNET=False in .env to trade on the live exchange (use with caution!)
USE_TESTNET: bool = os.getenv("USE_TESTNET", "True").lower() in ("true", "1", "yes")

if not DERIBIT_CLIENT_ID or DERIBIT_CLIENT_ID == "your_client_id_here":
    print("⚠️  WARNING: DERIBIT_CLIENT_ID is not set. Please configure your .env file.")
    print("   Copy .env.example to .env and add your API credentials.")

if not DERIBIT_CLIENT_SECRET or DERIBIT_CLIENT_SECRET == "your_client_secret_here":
    print("⚠️  WARNING: DERIBIT_CLIENT_SECRET is not set. Please configure your .env file.")
    print("   Copy .env.example to .env and add your API credentials.")

# ---------------------------------------------------------------------------
# Deribit API Endpoints
# ---------------------------------------------------------------------------
TESTNET_HOST: str = "https://test.deribit.com"
PRODUCTION_HOST: str = "https://www.deribit.com"

HOST: str = TESTNET_HOST if USE_TESTNET else PRODUCTION_HOST
API_BASE_URL: str = HOST + "/api/v2"


def _read_timeout() -> Optional[float]:
    raw = os.getenv("REQUEST_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        print(f"⚠️  WARNING: REQUEST_TIMEOUT '{raw}' is not a number; no timeout will be used.")
        return None


# Seconds to wait for a response. None (the default) waits indefinitely.
REQUEST_TIMEOUT: Optional[float] = _read_timeout()

# ---------------------------------------------------------------------------
# Trading Constants
# ---------------------------------------------------------------------------
DEFAULT_INSTRUMENT: str = "BTC-PERPETUAL"

# Deribit exposes one private endpoint per side: private/buy and private/sell
VALID_SIDES: tuple = ("buy", "sell")

# ---------------------------------------------------------------------------
# Logging Configuration Constants
# ---------------------------------------------------------------------------
LOG_FILE: str = os.getenv("LOG_FILE", "bot.log")
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def print_config() -> None:
    """Print the current configuration to the console (masks credentials)."""
    masked_id = DERIBIT_CLIENT_ID[:4] + "****" if len(DERIBIT_CLIENT_ID) > 4 else "NOT SET"
    env_mode = "TESTNET" if USE_TESTNET else "⚠️  PRODUCTION"
    timeout = f"{REQUEST_TIMEOUT}s" if REQUEST_TIMEOUT else "none"

    print("=" * 60)
    print("  Deribit Trading Client — Configuration")
    print("=" * 60)
    print(f"  Environment : {env_mode}")
    print(f"  Client ID   : {masked_id}")
    print(f"  Base URL    : {API_BASE_URL}")
    print(f"  Timeout     : {timeout}")
    print(f"  Log File    : {LOG_FILE}")
    print("=" * 60)


if __name__ == "__main__":
    print_config()
