# pvpstats/ranking.py

from typing import List, Dict, Any, Iterable

from pvpstats.calculator import StatsCalculator
from pvpstats.records import MatchRecord
from pvpstats.tiers import parse_tier, tier_sort_key

RANK_BY_WIN_RATE = 'winrate'
RANK_BY_TIER = 'tier'
RANK_MODES = (RANK_BY_WIN_RATE, RANK_BY_TIER)


class PlayerRanker:
    """Build leaderboards over all players."""

    def __init__(self, calculator: StatsCalculator = None):
        self.calculator = calculator or StatsCalculator()

    def summarize(self, records: Iterable[MatchRecord]) -> List[Dict[str, Any]]:
        """
        One summary row per nickname, in first-seen order.

        Args:
            records: All match records

        Returns:
            Rows with nickname, total_games, win_rate (float), kd_ratio,
            current_tier, tier_code and grade
        """
        rows = []
        for nickname, games in self.calculator.group_by_nickname(records).items():
            stats = self.calculator.calculate_stats(games)
            tier_code, grade = parse_tier(stats['current_tier'])
            rows.append({
                'nickname': nickname,
                'total_games': stats['total_games'],
                'win_rate': float(stats['win_rate']),
                'kd_ratio': stats['kd_ratio'],
                'current_tier': stats['current_tier'],
                'tier_code': tier_code,
                'grade': grade,
            })
        return rows

    @staticmethod
    def _number(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        for position, row in enumerate(rows, start=1):
            row['rank'] = position
        return rows

    def rank_by_win_rate(self, records: Iterable[MatchRecord]) -> List[Dict[str, Any]]:
        rows = self.summarize(records)
        rows.sort(key=lambda row: -row['win_rate'])
        return self._number(rows)

    def rank_by_tier_then_win_rate(self, records: Iterable[MatchRecord]) -> List[Dict[str, Any]]:
        """Tier priority, then grade, then win rate descending, as one stable sort."""
        rows = self.summarize(records)
        rows.sort(key=lambda row: (*tier_sort_key(row['current_tier']), -row['win_rate']))
        return self._number(rows)

    def rank(self, records: Iterable[MatchRecord], by: str = RANK_BY_WIN_RATE) -> List[Dict[str, Any]]:
        if by == RANK_BY_WIN_RATE:
            return self.rank_by_win_rate(records)
        if by == RANK_BY_TIER:
            return self.rank_by_tier_then_win_rate(records)
        raise ValueError(f"Unknown ranking mode '{by}'. Expected one of: {', '.join(RANK_MODES)}")


def rank_by_win_rate(records: Iterable[MatchRecord]) -> List[Dict[str, Any]]:
    return PlayerRanker().rank_by_win_rate(records)


def rank_by_tier_then_win_rate(records: Iterable[MatchRecord]) -> List[Dict[str, Any]]:
    return PlayerRanker().rank_by_tier_then_win_rate(records)
