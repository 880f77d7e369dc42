"""
pvpstats/characters.py
======================
Per-character performance and the "mastery" ranking of players on a character.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pvpstats.calculator import StatsCalculator
from pvpstats.records import MatchRecord

LOGGER = logging.getLogger(__name__)


class CharacterGuideError(ValueError):
    """Raised when a character guide file exists but cannot be used."""


class CharacterStatsAnalyzer:
    def __init__(self, case_sensitive: bool = True):
        self.case_sensitive = case_sensitive

    def _matches(self, record: MatchRecord, character_name: str) -> bool:
        if self.case_sensitive:
            return record.character == character_name
        return record.character.lower() == character_name.lower()

    def analyze(self, records: Iterable[MatchRecord], character_name: str) -> dict | None:
        name = str(character_name or "")
        games = [r for r in records if self._matches(r, name)]
        if not games:
            return None

        total_games = len(games)
        total_wins = sum(1 for g in games if g.is_win)
        total_kills = sum(g.kills for g in games)
        total_deaths = sum(g.deaths for g in games)

        return {
            "character": games[0].character,
            "total_games": total_games,
            "total_wins": total_wins,
            "total_kills": total_kills,
            "total_deaths": total_deaths,
            "win_rate": StatsCalculator.calc_win_rate(total_wins, total_games),
            "kd_ratio": StatsCalculator.calc_kd_ratio(total_kills, total_deaths),
            "players": self._aggregate_players(games),
        }

    @staticmethod
    def _aggregate_players(games: list[MatchRecord]) -> list[dict]:
        agg: dict[str, dict] = {}

        for game in games:
            if game.nickname not in agg:
                agg[game.nickname] = {"games": 0, "wins": 0, "kills": 0, "deaths": 0}
            item = agg[game.nickname]
            item["games"] += 1
            item["kills"] += game.kills
            item["deaths"] += game.deaths
            if game.is_win:
                item["wins"] += 1

        results = []
        for nickname, item in agg.items():
            results.append(
                {
                    "nickname": nickname,
                    "games": item["games"],
                    "wins": item["wins"],
                    "kills": item["kills"],
                    "deaths": item["deaths"],
                    "win_rate": StatsCalculator.calc_win_rate(item["wins"], item["games"]),
                    "kd_ratio": StatsCalculator.calc_kd_ratio(item["kills"], item["deaths"]),
                }
            )

        # stable: equal game counts keep first-seen order
        results.sort(key=lambda x: -x["games"])
        return results


def aggregate_by_character(
    records: Iterable[MatchRecord], character_name: str, case_sensitive: bool = True
) -> dict | None:
    """CharacterStats for a character, or None if nobody played it."""
    return CharacterStatsAnalyzer(case_sensitive=case_sensitive).analyze(records, character_name)


def _is_safe_name(name: str) -> bool:
    if not name or name.startswith("."):
        return False
    return "/" not in name and "\\" not in name


def load_character_guide(char_dir: str | Path, name: str) -> dict | None:
    """
    Load <char_dir>/<name>.json describing a character's skills and gadget.

    Returns None when the name is unsafe or no guide exists.

    Raises:
        CharacterGuideError: If the file is not a JSON object
    """
    name = str(name or "").strip()
    if not _is_safe_name(name):
        LOGGER.warning("Rejected character guide name %r", name)
        return None

    path = Path(char_dir) / f"{name}.json"
    if not path.is_file():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CharacterGuideError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CharacterGuideError(f"Character guide {path} must be a JSON object")

    skills = data.get("skills")
    if not isinstance(skills, list):
        skills = []

    return {
        "name": str(data.get("name") or name),
        "difficulty": str(data.get("difficulty") or ""),
        "skills": [
            {
                "type": str(skill.get("type") or ""),
                "name": str(skill.get("name") or ""),
                "desc": str(skill.get("desc") or ""),
                "detail": str(skill.get("detail") or ""),
            }
            for skill in skills
            if isinstance(skill, dict)
        ],
        "gadget": str(data.get("gadget") or ""),
    }
