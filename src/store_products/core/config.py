"""
Configuration for the billing product integration.
Handles environment variable loading and validation.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Billing API Configuration
# =============================================================================

# Public billing API base URL (products endpoint lives under it)
BILLING_API_URL: str = os.getenv("BILLING_API_URL", "http://localhost:8080/api")
BILLING_API_KEY: Optional[str] = os.getenv("BILLING_API_KEY")

# Reseller whose catalog is served to the storefront
BILLING_RESELLER_ID: Optional[str] = os.getenv("BILLING_RESELLER_ID")

# Request timeout in seconds
BILLING_API_TIMEOUT: float = float(os.getenv("BILLING_API_TIMEOUT", "30"))


# =============================================================================
# Storefront Preference Defaults
# =============================================================================

# Language as "<primary>-<region>", e.g. en-US, sv-SE
STORE_DEFAULT_LANGUAGE: str = os.getenv("STORE_DEFAULT_LANGUAGE", "en-US")

# ISO 4217 code; prices are selected, never converted
STORE_DEFAULT_CURRENCY: str = os.getenv("STORE_DEFAULT_CURRENCY", "USD")

STORE_PRICES_INCLUDE_VAT: bool = _env_bool("STORE_PRICES_INCLUDE_VAT", False)


# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# =============================================================================
# Validation
# =============================================================================

def validate_config() -> List[str]:
    """
    Validate the current configuration values.

    Returns:
        List of human-readable problems (empty when the configuration is usable)
    """
    errors = []

    if not BILLING_API_URL:
        errors.append("BILLING_API_URL environment variable is required")
    elif not BILLING_API_URL.startswith(("http://", "https://")):
        errors.append(f"BILLING_API_URL must be an http(s) URL, got '{BILLING_API_URL}'")

    if BILLING_API_TIMEOUT <= 0:
        errors.append("BILLING_API_TIMEOUT must be a positive number of seconds")

    if not STORE_DEFAULT_CURRENCY or len(STORE_DEFAULT_CURRENCY) != 3:
        errors.append(f"STORE_DEFAULT_CURRENCY must be a 3-letter currency code, got '{STORE_DEFAULT_CURRENCY}'")

    if not STORE_DEFAULT_LANGUAGE:
        errors.append("STORE_DEFAULT_LANGUAGE environment variable is required")

    return errors


def get_config_summary() -> str:
    """
    Get a summary of the current configuration (for logging).
    Sensitive values are masked.
    """
    api_key_status = "Configured" if BILLING_API_KEY else "Not configured"
    vat_mode = "including VAT" if STORE_PRICES_INCLUDE_VAT else "excluding VAT"

    return f"""
Billing Product Integration Configuration:
  Billing API:
    - URL: {BILLING_API_URL}
    - API Key: {api_key_status}
    - Reseller ID: {BILLING_RESELLER_ID or "(default)"}
    - Timeout: {BILLING_API_TIMEOUT}s

  Storefront Defaults:
    - Language: {STORE_DEFAULT_LANGUAGE}
    - Currency: {STORE_DEFAULT_CURRENCY}
    - Prices: {vat_mode}

  Logging:
    - Level: {LOG_LEVEL}
"""


if __name__ == "__main__":
    problems = validate_config()
    if problems:
        print("Configuration Error(s):")
        for problem in problems:
            print(f"  - {problem}")
    else:
        print("Configuration is valid!")
    print(get_config_summary())
