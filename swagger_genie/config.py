"""Configuration constants and .env loading.

WHY: Centralizes every tunable value — log level, HTTP bind address,
the diagnostic source label editors show, and whether unknown tags are
expanded — so they are easy to find and override without touching
logic.

HOW: python-dotenv loads the .env file on import. Constants are
module-level values read from the environment with defaults. Parsing
helpers raise ValueError with a clear message on bad input.

RULES:
- All defaults can be overridden via SWAGGER_GENIE_* environment variables
- Boolean variables accept true/false/1/0/yes/no (case-insensitive)
- load_port() raises ValueError for a non-integer or out-of-range port
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the tool is run from)
load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    RULES:
    - Missing or empty → default
    - Unrecognized text raises ValueError naming the variable
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(
        "{} must be one of true/false/1/0/yes/no, got {!r}.".format(name, raw)
    )


# ---------------------------------------------------------------------------
# Transcoder behaviour
# ---------------------------------------------------------------------------

PASSTHROUGH_UNKNOWN_TAGS = env_flag("SWAGGER_GENIE_PASSTHROUGH_UNKNOWN", True)
"""Expand unknown call-form tags (e.g. ``@title(My API)``) as space-joined text."""

DIAGNOSTIC_SOURCE = os.getenv("SWAGGER_GENIE_DIAGNOSTIC_SOURCE", "go-swagger-genie")
"""Label attached to diagnostics so editors can group them."""

# ---------------------------------------------------------------------------
# Logging and HTTP API defaults
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("SWAGGER_GENIE_LOG_LEVEL", "INFO").upper()
API_HOST = os.getenv("SWAGGER_GENIE_HOST", "127.0.0.1")


def load_port() -> int:
    """Read the HTTP API port from SWAGGER_GENIE_PORT (default 8765).

    RULES:
    - Raises ValueError if the value is not an integer in 1..65535
    """
    raw = os.getenv("SWAGGER_GENIE_PORT", "8765").strip()
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(
            "SWAGGER_GENIE_PORT must be an integer, got {!r}.".format(raw)
        ) from None
    if not 1 <= port <= 65535:
        raise ValueError("SWAGGER_GENIE_PORT must be between 1 and 65535, got {}.".format(port))
    return port
