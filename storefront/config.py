"""Runtime configuration defaults for the storefront client."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

CART_DB_PATH = "data/storefront.db"
CART_STORAGE_KEY = "restaurant-cart-storage"

SUPPORTED_LOCALES = ("en", "ru", "kz")
DEFAULT_LOCALE = "kz"

DEBUG_LOG_PATH = "/tmp/storefront-debug.log"
CURRENCY_SYMBOL = "₸"

_CART_DB_ENV = "STOREFRONT_CART_DB"
_LOCALE_ENV = "STOREFRONT_LOCALE"
_DEBUG_LOG_ENV = "STOREFRONT_DEBUG_LOG"


def resolve_cart_db_path() -> str:
    """Return the cart database path, honoring STOREFRONT_CART_DB."""
    override = os.environ.get(_CART_DB_ENV, "").strip()
    return override or CART_DB_PATH


def resolve_debug_log_path() -> str:
    override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return override or DEBUG_LOG_PATH


def resolve_locale(requested: str | None = None) -> str:
    """
    Pick the active locale.

    Resolution order:
    1. explicit ``requested`` value
    2. STOREFRONT_LOCALE
    3. DEFAULT_LOCALE

    Unknown values fall back to DEFAULT_LOCALE with a warning.
    """
    candidate = (requested or os.environ.get(_LOCALE_ENV, "")).strip().lower()
    if not candidate:
        return DEFAULT_LOCALE
    if candidate not in SUPPORTED_LOCALES:
        logger.warning("Unsupported locale %r, using %r", candidate, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return candidate
