# pvpstats/records.py

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.request import Request, urlopen

from pvpstats.config import is_url

LOGGER = logging.getLogger(__name__)

PASSTHROUGH_KEYS = ("gamenumber", "map", "finalscore")


class RecordFormatError(ValueError):
    """Raised when the stats document is not a JSON array of match objects."""


@dataclass(frozen=True)
class MatchRecord:
    nickname: str
    character: str
    kills: int = 0
    deaths: int = 0
    win: int = 0
    tier: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # read-only view over the pass-through fields
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def is_win(self) -> bool:
        return self.win == 1

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "nickname": self.nickname,
            "character": self.character,
            "kill": self.kills,
            "death": self.deaths,
            "win": self.win,
            "tier": self.tier,
        }
        data.update(self.extra)
        return data


def _to_count(value: Any, key: str, index: int) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        LOGGER.warning("Record %d: non-numeric %s %r; counting as 0.", index, key, value)
        return 0
    if count < 0:
        LOGGER.warning("Record %d: negative %s %r; counting as 0.", index, key, value)
        return 0
    return count


def _to_win(value: Any) -> int:
    # Only an explicit 1/true is a win.
    if value is True:
        return 1
    if isinstance(value, (int, float)) and value == 1:
        return 1
    return 0


def _first_present(raw: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def parse_record(raw: Any, index: int = 0) -> Optional[MatchRecord]:
    """Normalize one raw match object, or return None if it is unusable."""
    if not isinstance(raw, dict):
        LOGGER.warning("Record %d is not an object; skipping.", index)
        return None

    nickname = str(raw.get("nickname") or "").strip()
    if not nickname:
        LOGGER.warning("Record %d has no nickname; skipping.", index)
        return None

    tier = raw.get("tier")
    return MatchRecord(
        nickname=nickname,
        character=str(raw.get("character") or ""),
        kills=_to_count(_first_present(raw, "kill", "kills"), "kill", index),
        deaths=_to_count(_first_present(raw, "death", "deaths"), "death", index),
        win=_to_win(raw.get("win")),
        tier=str(tier) if tier is not None else "",
        extra={key: raw[key] for key in PASSTHROUGH_KEYS if key in raw},
    )


def parse_records(payload: Any) -> List[MatchRecord]:
    """
    Normalize a decoded stats document.

    Args:
        payload: Decoded JSON; must be a list of match objects

    Returns:
        Match records in document order

    Raises:
        RecordFormatError: If the payload is not a list
    """
    if not isinstance(payload, list):
        raise RecordFormatError(
            f"Stats document must be a JSON array, got {type(payload).__name__}"
        )

    records = []
    for index, raw in enumerate(payload):
        record = parse_record(raw, index)
        if record is not None:
            records.append(record)

    skipped = len(payload) - len(records)
    if skipped:
        LOGGER.warning("Skipped %d of %d match records.", skipped, len(payload))
    return records


def _read_source(source: str, timeout_seconds: int) -> str:
    if is_url(source):
        req = Request(source, headers={"Accept": "application/json"}, method="GET")
        with urlopen(req, timeout=timeout_seconds) as resp:
            return resp.read().decode("utf-8")
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def load_records(source: str, timeout_seconds: int = 20) -> List[MatchRecord]:
    """Load and normalize match records from a file path or http(s) URL."""
    try:
        text = _read_source(str(source), timeout_seconds)
    except UnicodeDecodeError as exc:
        raise RecordFormatError(f"Stats document {source} is not UTF-8: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordFormatError(f"Invalid JSON in {source}: {exc}") from exc

    records = parse_records(payload)
    LOGGER.info("Loaded %d match records from %s", len(records), source)
    return records


def list_characters(records: Iterable[MatchRecord]) -> List[str]:
    """Distinct characters in first-seen order."""
    seen: Dict[str, None] = {}
    for record in records:
        if record.character and record.character not in seen:
            seen[record.character] = None
    return list(seen)


def filter_by_nickname(records: Iterable[MatchRecord], nickname: str) -> List[MatchRecord]:
    wanted = str(nickname or "").lower()
    return [r for r in records if r.nickname.lower() == wanted]


def player_history(records: Iterable[MatchRecord], nickname: str) -> List[MatchRecord]:
    """A player's games, most recent first."""
    games = filter_by_nickname(records, nickname)
    games.reverse()
    return games
