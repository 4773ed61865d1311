"""WebDriver locator parsing.

Selenium logs element targets in its diagnostic form::

    [[ChromeDriver: chrome on mac (5f1c...)] -> css selector: #login > button]

The parser extracts the ``<kind>: <value>`` part and maps it onto a
``Locator`` through an ordered rule table. Adding a locator kind is a
single entry in ``LOCATOR_RULES``.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from .models import Locator, LocatorKind


DRIVER_LOCATOR_PATTERN = re.compile(r"\[\[.*?\] -> (.+?)\]")

# Evaluated in order; first matching prefix wins.
LOCATOR_RULES: tuple[tuple[str, LocatorKind], ...] = (
    ("name: ", LocatorKind.BY_NAME),
    ("css selector: ", LocatorKind.BY_CSS),
    ("xpath: ", LocatorKind.BY_XPATH),
    ("tag name: ", LocatorKind.BY_TAG_NAME),
    ("id: ", LocatorKind.BY_ID),
    ("class: ", LocatorKind.BY_CLASS),
)

DEFAULT_PORTS = {"http": 80, "https": 443}


def parse_locator(raw: Optional[str]) -> Locator:
    """Parse a raw trace target into a Locator.

    Args:
        raw: Target string from the trace (may be None)

    Returns:
        Locator; unknown dialects fall back to ``LocatorKind.OPAQUE``
    """
    if not raw:
        return Locator(LocatorKind.OPAQUE, "")

    match = DRIVER_LOCATOR_PATTERN.search(raw)
    if match:
        locator_part = match.group(1)
        for prefix, kind in LOCATOR_RULES:
            if locator_part.startswith(prefix):
                return Locator(kind, locator_part[len(prefix):])
        return Locator(LocatorKind.OPAQUE, locator_part)

    if raw.startswith("http") or raw.startswith("[http"):
        return Locator(LocatorKind.RAW_URL, raw.replace("[", "").replace("]", ""))

    return Locator(LocatorKind.OPAQUE, raw)


def render_selector(raw: Optional[str]) -> str:
    """Parse a raw target and render it as a selector string."""
    return parse_locator(raw).render()


def escape_double_quotes(value: Optional[str]) -> str:
    """Escape ``"`` for embedding inside a double-quoted string literal.

    No other characters are touched.
    """
    if not value:
        return ""
    return value.replace('"', '\\"')


def extract_origin(url: Optional[str]) -> Optional[str]:
    """Return ``scheme://host[:port]`` for an absolute URL.

    Default ports are omitted. Returns None when the URL has no scheme or host.
    """
    if not url:
        return None
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None

    if not parts.scheme or not parts.hostname:
        return None

    host = parts.hostname
    if port is not None and DEFAULT_PORTS.get(parts.scheme.lower()) != port:
        host = f"{host}:{port}"
    return f"{parts.scheme.lower()}://{host}"
