"""Platform access tokens kept in the OS keychain, one per platform URL."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_SERVICE_NAME = "ArtiSum"
_AVAILABLE = False

try:
    import keyring

    _AVAILABLE = True
except Exception:
    logger.warning("keyring not available; access tokens will not be remembered")


def _account(platform_url: str) -> str:
    return platform_url.strip().rstrip("/").lower()


def is_available() -> bool:
    """Return True if the OS keychain is usable."""
    return _AVAILABLE


def load(platform_url: str) -> str | None:
    """Return the saved token for *platform_url*, or None."""
    if not _AVAILABLE or not platform_url:
        return None
    try:
        return keyring.get_password(_SERVICE_NAME, _account(platform_url))
    except Exception:
        logger.warning("Failed to read access token for %s", platform_url)
        return None


def save(platform_url: str, token: str) -> bool:
    """Save *token* for *platform_url*. Returns True on success."""
    if not _AVAILABLE or not platform_url or not token:
        return False
    try:
        keyring.set_password(_SERVICE_NAME, _account(platform_url), token)
        return True
    except Exception:
        logger.warning("Failed to save access token for %s", platform_url)
        return False


def delete(platform_url: str) -> bool:
    """Forget the token for *platform_url*. Returns True on success."""
    if not _AVAILABLE or not platform_url:
        return False
    try:
        keyring.delete_password(_SERVICE_NAME, _account(platform_url))
        return True
    except Exception:
        return False
