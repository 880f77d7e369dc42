# pvpstats/ui.py

from typing import List, Dict, Any


def _safe_print(message: str = "") -> None:
    """Print with ASCII fallback for terminals that cannot encode the K/D glyph."""
    try:
        print(message)
    except UnicodeEncodeError:
        print(message.replace("∞", "inf").encode("ascii", "replace").decode("ascii"))


class TerminalUI:
    """Plain-text views over query results."""

    def show_error(self, message: str):
        """Display error message."""
        _safe_print(f"\nERROR: {message}\n")

    def show_not_found(self, query: str):
        _safe_print(f"\nNo nickname or character named \"{query}\" was found.\n")

    def show_player(self, stats: Dict[str, Any], history: List[Dict[str, Any]] = None):
        """Display player summary followed by the match list, most recent first."""
        _safe_print("\n" + "="*50)
        _safe_print(f"PLAYER: {stats.get('nickname', '')}")
        _safe_print("="*50)
        _safe_print(f"Current Tier:     {stats['current_tier']}")
        _safe_print(f"Games:            {stats['total_games']}")
        _safe_print(f"Kills:            {stats['total_kills']} (avg {stats['avg_kills']})")
        _safe_print(f"Deaths:           {stats['total_deaths']} (avg {stats['avg_deaths']})")
        _safe_print(f"K/D:              {stats['kd_ratio']}")
        _safe_print(f"Wins:             {stats['total_wins']} ({stats['win_rate']}%)")
        _safe_print(f"Most Played:      {stats['most_played_character']}")

        if history:
            _safe_print("\n" + "-"*50)
            _safe_print("MATCHES")
            _safe_print("-"*50)
            for game in history:
                result = "WIN " if game.get('win') == 1 else "LOSS"
                _safe_print(
                    f"  {game.get('character', ''):<14} {game.get('kill', 0):>3}/{game.get('death', 0):<3} "
                    f"{result}  {game.get('tier', '')}"
                )
        _safe_print("="*50)

    def show_character(self, stats: Dict[str, Any]):
        """Display character summary and its mastery ranking."""
        _safe_print("\n" + "="*50)
        _safe_print(f"CHARACTER: {stats['character']}")
        _safe_print("="*50)
        _safe_print(
            f"Games: {stats['total_games']} | Win %: {stats['win_rate']} | K/D: {stats['kd_ratio']}"
        )
        _safe_print("\n" + "-"*50)
        _safe_print(f"{'#':<4}{'Nickname':<20}{'Games':>6}{'Win %':>9}{'K/D':>8}")
        _safe_print("-"*50)
        for i, player in enumerate(stats['players'], 1):
            _safe_print(
                f"{i:<4}{player['nickname']:<20}{player['games']:>6}"
                f"{player['win_rate']:>9}{player['kd_ratio']:>8}"
            )
        _safe_print("="*50)

    def show_ranking(self, rows: List[Dict[str, Any]], title: str = "WIN RATE RANKING"):
        _safe_print("\n" + "="*60)
        _safe_print(title)
        _safe_print("="*60)
        _safe_print(f"{'Rank':<6}{'Nickname':<20}{'Win %':>8}{'K/D':>8}{'Games':>7}  Tier")
        _safe_print("-"*60)
        for row in rows:
            _safe_print(
                f"{row['rank']:<6}{row['nickname']:<20}{row['win_rate']:>8.2f}"
                f"{row['kd_ratio']:>8}{row['total_games']:>7}  {row['current_tier']}"
            )
        _safe_print("="*60)

    def show_characters(self, characters: List[str]):
        _safe_print("\n" + "="*50)
        _safe_print("Characters:")
        _safe_print("="*50)
        for i, name in enumerate(characters, 1):
            _safe_print(f"{i}. {name}")
        _safe_print("="*50)

    def show_character_guide(self, guide: Dict[str, Any]):
        _safe_print("\n" + "="*50)
        header = guide['name']
        if guide.get('difficulty'):
            header += f" ({guide['difficulty']})"
        _safe_print(header)
        _safe_print("="*50)
        _safe_print("SKILLS")
        for skill in guide['skills']:
            _safe_print(f"  [{skill['type']}] {skill['name']}")
            if skill['desc']:
                _safe_print(f"    {skill['desc']}")
            if skill['detail']:
                _safe_print(f"    {skill['detail']}")
        _safe_print("\nGADGET")
        _safe_print(f"  {guide['gadget'] or 'N/A'}")
        _safe_print("="*50)
