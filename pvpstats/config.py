# pvpstats/config.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)

DEFAULT_STATS_PATH = "data/stats.json"
DEFAULT_CHAR_DIR = "data/char"
DEFAULT_LOG_LEVEL = "INFO"

PROJECT_ROOT = Path(__file__).resolve().parents[1]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    stats_source: str
    char_dir: Path
    character_case_sensitive: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def is_url(source: str) -> bool:
    return str(source or "").lower().startswith(("http://", "https://"))


def resolve_path(raw: str) -> Path:
    """Resolve a relative path against the project root."""
    path = Path(raw)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def parse_bool(raw: str | None, default: bool, name: str = "") -> bool:
    if raw is None or not raw.strip():
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    LOGGER.warning("Unrecognized boolean %r for %s; using default %s.", raw, name or "setting", default)
    return default


def load_settings() -> Settings:
    """Build settings from PVPSTATS_* environment variables."""
    stats_raw = os.getenv("PVPSTATS_STATS_PATH", "").strip() or DEFAULT_STATS_PATH
    stats_source = stats_raw if is_url(stats_raw) else str(resolve_path(stats_raw))
    char_dir = resolve_path(os.getenv("PVPSTATS_CHAR_DIR", "").strip() or DEFAULT_CHAR_DIR)
    case_sensitive = parse_bool(
        os.getenv("PVPSTATS_CHARACTER_CASE_SENSITIVE"),
        default=True,
        name="PVPSTATS_CHARACTER_CASE_SENSITIVE",
    )
    log_level = (os.getenv("PVPSTATS_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper()
    return Settings(
        stats_source=stats_source,
        char_dir=char_dir,
        character_case_sensitive=case_sensitive,
        log_level=log_level,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
