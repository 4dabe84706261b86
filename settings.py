# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-09
# Updated: 2026-01-18
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import List


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


def _env_list(name: str, default: List[str]) -> List[str]:
    """Comma-separated list; blank entries are dropped."""
    v = _env(name, "")
    if v == "":
        return list(default)
    return [part.strip() for part in v.split(",") if part.strip()]


# -----------------------------------------------------------------------------
# Text normalisation
# -----------------------------------------------------------------------------
MIN_TEXT_LENGTH = _env_int("QVS_MIN_TEXT_LENGTH", 3)

# Max characters of cleaned question text stored as metadata
SNIPPET_MAX_CHARS = _env_int("QVS_SNIPPET_MAX_CHARS", 500)


# -----------------------------------------------------------------------------
# Bulk ingestion (migration) defaults
# -----------------------------------------------------------------------------
DEFAULT_BATCH_SIZE = _env_int("QVS_DEFAULT_BATCH_SIZE", 50)

# Pause after each batch upsert
BATCH_PAUSE_SECONDS = _env_float("QVS_BATCH_PAUSE_SECONDS", 1.0)

# Shorter pause after every N successfully processed records
RECORD_PAUSE_EVERY = _env_int("QVS_RECORD_PAUSE_EVERY", 5)
RECORD_PAUSE_SECONDS = _env_float("QVS_RECORD_PAUSE_SECONDS", 0.2)


# -----------------------------------------------------------------------------
# Source discovery
# -----------------------------------------------------------------------------
# Empty means "current working directory at call time"
SOURCE_BASE_DIR = _env("QVS_SOURCE_BASE_DIR", "")

SOURCE_CANDIDATES = _env_list(
    "QVS_SOURCE_CANDIDATES",
    [
        "questions.json",
        "data/questions.json",
        "public/data/questions.json",
    ],
)


# -----------------------------------------------------------------------------
# Search defaults
# -----------------------------------------------------------------------------
DEFAULT_TOP_K = _env_int("QVS_DEFAULT_TOP_K", 10)

# Include stack traces in 500 responses (development only)
DEBUG_ERRORS = _env_bool("QVS_DEBUG_ERRORS", False)


# -----------------------------------------------------------------------------
# Health
# -----------------------------------------------------------------------------
# 0 disables the dimension check
EXPECTED_EMBEDDING_DIM = _env_int("QVS_EXPECTED_EMBEDDING_DIM", 0)


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = _env("QVS_LOG_LEVEL", "INFO").upper()

# Console only unless enabled
LOG_TO_FILE = _env_bool("QVS_LOG_TO_FILE", False)
LOG_FILE = _env("QVS_LOG_FILE", "./logs/qvs.log")
LOG_MAX_BYTES = _env_int("QVS_LOG_MAX_BYTES", 5 * 1024 * 1024)
LOG_BACKUP_COUNT = _env_int("QVS_LOG_BACKUP_COUNT", 5)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if MIN_TEXT_LENGTH < 1:
    raise RuntimeError("MIN_TEXT_LENGTH must be >= 1")

if DEFAULT_BATCH_SIZE < 1:
    raise RuntimeError("DEFAULT_BATCH_SIZE must be >= 1")

if RECORD_PAUSE_EVERY < 1:
    raise RuntimeError("RECORD_PAUSE_EVERY must be >= 1")

if not SOURCE_CANDIDATES:
    raise RuntimeError("SOURCE_CANDIDATES resolved to empty list")
