"""
validation.py - Gramps Web server URL and API version checks.

Pure string checks used by a client before it talks to a server; nothing here
performs network I/O.

Module: gramps_tree.validation
"""
__all__ = [
    'ValidationResult',
    'CompatibilityResult',
    'validate_server_url',
    'check_api_compatibility',
    'normalize_server_url',
    'MIN_API_MAJOR_VERSION',
]

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

MIN_API_MAJOR_VERSION = 2
LOCAL_HOSTNAMES = ('localhost', '127.0.0.1', '::1')


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class CompatibilityResult:
    compatible: bool
    reason: Optional[str] = None


def is_local_host(hostname: str) -> bool:
    """True for loopback names and mDNS '.local' hosts."""
    hostname = (hostname or '').lower()
    return hostname in LOCAL_HOSTNAMES or hostname.endswith('.local')


def validate_server_url(url: str) -> ValidationResult:
    """
    Check that url is an HTTPS URL, or HTTP on a local host.

    Args:
        url (str): Server base URL, e.g. 'https://gramps.example.com'.

    Returns:
        ValidationResult: valid flag and, when invalid, a human-readable error.
    """
    try:
        parsed = urlsplit(url or '')
        hostname = parsed.hostname
    except ValueError:
        return ValidationResult(False, "Invalid URL format")
    if not parsed.scheme or not hostname:
        return ValidationResult(False, "Invalid URL format")
    if parsed.scheme.lower() != 'https' and not is_local_host(hostname):
        return ValidationResult(False, "Server URL must use HTTPS (HTTP is only allowed for localhost)")
    return ValidationResult(True)


def normalize_server_url(url: str) -> str:
    """Drop a single trailing slash so API paths can be appended."""
    return url[:-1] if url.endswith('/') else url


def _major_version(version: str) -> int:
    head = (version or '').strip().split('.')[0]
    try:
        return int(head)
    except ValueError:
        logger.debug(f"Unparsable API version: {version!r}")
        return 0


def check_api_compatibility(version: str) -> CompatibilityResult:
    """
    Check a Gramps Web API version string against the minimum supported major version.

    Args:
        version (str): Version reported by the server's metadata endpoint, e.g. '2.1.0'.

    Returns:
        CompatibilityResult
    """
    if _major_version(version) < MIN_API_MAJOR_VERSION:
        return CompatibilityResult(
            False,
            f"Gramps Web API version {version} is not supported. Minimum required: {MIN_API_MAJOR_VERSION}.0.0",
        )
    return CompatibilityResult(True)
