# pvpstats/search.py

from typing import Any, Dict, List, Optional
import logging

from pvpstats.calculator import StatsCalculator
from pvpstats.characters import aggregate_by_character
from pvpstats.records import MatchRecord, player_history

LOGGER = logging.getLogger(__name__)


def search(
    records: List[MatchRecord],
    query: str,
    character_case_sensitive: bool = True,
) -> Optional[Dict[str, Any]]:
    """
    Resolve a search box query to a player or a character.

    A nickname match (case-insensitive) takes precedence over a character
    match. Returns None for a blank query or when nothing matches.
    """
    query = str(query or '').strip()
    if not query:
        return None

    stats = StatsCalculator().aggregate_by_player(records, query)
    if stats is not None:
        return {
            'kind': 'player',
            'query': query,
            'stats': stats,
            'history': [game.to_dict() for game in player_history(records, query)],
        }

    character_stats = aggregate_by_character(records, query, case_sensitive=character_case_sensitive)
    if character_stats is not None:
        return {
            'kind': 'character',
            'query': query,
            'stats': character_stats,
        }

    LOGGER.info("No nickname or character matches %r", query)
    return None
