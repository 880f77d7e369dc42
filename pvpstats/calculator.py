# pvpstats/calculator.py

from collections import Counter
from typing import Any, Dict, Iterable, List, Optional
import logging

from pvpstats.records import MatchRecord, filter_by_nickname

LOGGER = logging.getLogger(__name__)

KD_INFINITY = '∞'
NOT_AVAILABLE = 'N/A'


class StatsCalculator:
    """Aggregate match records into per-player stats."""

    @staticmethod
    def format_2dp(value: float) -> str:
        return f'{value:.2f}'

    @classmethod
    def calc_kd_ratio(cls, kills: int, deaths: int) -> str:
        """K/D as a 2-decimal string, or KD_INFINITY with no deaths."""
        if deaths == 0:
            return KD_INFINITY
        return cls.format_2dp(kills / deaths)

    @classmethod
    def calc_win_rate(cls, wins: int, games: int) -> str:
        """Win percentage as a 2-decimal string. Caller guarantees games > 0."""
        return cls.format_2dp(wins / games * 100)

    @staticmethod
    def most_played_character(games: Iterable[MatchRecord]) -> str:
        counts = Counter(game.character for game in games)
        if not counts:
            return NOT_AVAILABLE
        # max() keeps the first maximal entry, so ties go to the first-seen character
        return max(counts.items(), key=lambda item: item[1])[0] or NOT_AVAILABLE

    @staticmethod
    def current_tier(games: List[MatchRecord]) -> str:
        if not games:
            return NOT_AVAILABLE
        return games[-1].tier or NOT_AVAILABLE

    def calculate_stats(self, games: List[MatchRecord]) -> Optional[Dict[str, Any]]:
        """
        Calculate aggregate stats for an already-filtered list of games.

        Args:
            games: Match records belonging to one player, in input order

        Returns:
            PlayerStats dictionary, or None if there are no games
        """
        total_games = len(games)
        if total_games == 0:
            return None

        total_kills = sum(game.kills for game in games)
        total_deaths = sum(game.deaths for game in games)
        total_wins = sum(1 for game in games if game.is_win)

        return {
            'total_games': total_games,
            'total_kills': total_kills,
            'avg_kills': self.format_2dp(total_kills / total_games),
            'total_deaths': total_deaths,
            'avg_deaths': self.format_2dp(total_deaths / total_games),
            'total_wins': total_wins,
            'total_losses': total_games - total_wins,
            'win_rate': self.calc_win_rate(total_wins, total_games),
            'kd_ratio': self.calc_kd_ratio(total_kills, total_deaths),
            'most_played_character': self.most_played_character(games),
            'current_tier': self.current_tier(games),
        }

    def aggregate_by_player(self, records: Iterable[MatchRecord], nickname: str) -> Optional[Dict[str, Any]]:
        """PlayerStats for a nickname (case-insensitive), or None if not found."""
        games = filter_by_nickname(records, nickname)
        if not games:
            LOGGER.debug("No games found for nickname %r", nickname)
            return None
        stats = self.calculate_stats(games)
        stats['nickname'] = games[0].nickname
        return stats

    @staticmethod
    def group_by_nickname(records: Iterable[MatchRecord]) -> Dict[str, List[MatchRecord]]:
        """Group records by exact nickname, preserving first-seen order."""
        groups: Dict[str, List[MatchRecord]] = {}
        for record in records:
            groups.setdefault(record.nickname, []).append(record)
        return groups


def aggregate_by_player(records: Iterable[MatchRecord], nickname: str) -> Optional[Dict[str, Any]]:
    return StatsCalculator().aggregate_by_player(records, nickname)
