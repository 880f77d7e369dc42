# pvpstats/__init__.py
"""
Match record stats: per-player and per-character aggregates and leaderboards.
"""

from .calculator import StatsCalculator, aggregate_by_player
from .characters import aggregate_by_character, load_character_guide
from .ranking import PlayerRanker, rank_by_tier_then_win_rate, rank_by_win_rate
from .records import MatchRecord, load_records, parse_records
from .search import search

__all__ = [
    'StatsCalculator',
    'aggregate_by_player',
    'aggregate_by_character',
    'load_character_guide',
    'PlayerRanker',
    'rank_by_win_rate',
    'rank_by_tier_then_win_rate',
    'MatchRecord',
    'load_records',
    'parse_records',
    'search',
]
