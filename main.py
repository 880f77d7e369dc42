# main.py
"""Command-line access to match stats.

Run:
    python main.py search Alice
    python main.py ranking --by tier --limit 10
    python main.py characters
    python main.py guide Knight
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from urllib.error import URLError

from pvpstats.characters import CharacterGuideError, load_character_guide
from pvpstats.config import configure_logging, is_url, load_settings, resolve_path
from pvpstats.ranking import RANK_BY_TIER, RANK_BY_WIN_RATE, RANK_MODES, PlayerRanker
from pvpstats.records import RecordFormatError, list_characters, load_records
from pvpstats.search import search
from pvpstats.ui import TerminalUI

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Match record stats and leaderboards")
    parser.add_argument("--data", help="Stats JSON path or http(s) URL (default: PVPSTATS_STATS_PATH)")
    parser.add_argument("--char-dir", help="Character guide directory (default: PVPSTATS_CHAR_DIR)")
    parser.add_argument(
        "--ignore-character-case",
        action="store_true",
        help="Match character names case-insensitively",
    )
    parser.add_argument("--json", action="store_true", help="Print structured output as JSON")
    parser.add_argument("--log-level", help="Logging level (default: PVPSTATS_LOG_LEVEL)")

    sub = parser.add_subparsers(dest="command", required=True)

    search_cmd = sub.add_parser("search", help="Look up a nickname, then a character")
    search_cmd.add_argument("query")

    ranking_cmd = sub.add_parser("ranking", help="Show a leaderboard")
    ranking_cmd.add_argument("--by", choices=RANK_MODES, default=RANK_BY_WIN_RATE)
    ranking_cmd.add_argument("--limit", type=int, default=None)

    sub.add_parser("characters", help="List characters seen in the records")

    guide_cmd = sub.add_parser("guide", help="Show a character's skill guide")
    guide_cmd.add_argument("name")

    return parser


def _dump(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    ui = TerminalUI()
    case_sensitive = settings.character_case_sensitive and not args.ignore_character_case

    if args.command == "guide":
        char_dir = resolve_path(args.char_dir) if args.char_dir else settings.char_dir
        try:
            guide = load_character_guide(char_dir, args.name)
        except CharacterGuideError as e:
            ui.show_error(str(e))
            return EXIT_LOAD_ERROR
        if guide is None:
            ui.show_error(f"No guide found for character '{args.name}'")
            return EXIT_NOT_FOUND
        if args.json:
            _dump(guide)
        else:
            ui.show_character_guide(guide)
        return EXIT_OK

    source = settings.stats_source
    if args.data:
        source = args.data if is_url(args.data) else str(resolve_path(args.data))

    try:
        records = load_records(source)
    except (OSError, URLError, RecordFormatError) as e:
        ui.show_error(f"Failed to load match records from {source}: {e}")
        return EXIT_LOAD_ERROR

    if args.command == "search":
        result = search(records, args.query, character_case_sensitive=case_sensitive)
        if result is None:
            if args.json:
                _dump({"query": args.query, "found": False})
            else:
                ui.show_not_found(args.query)
            return EXIT_NOT_FOUND
        if args.json:
            _dump(result)
        elif result["kind"] == "player":
            ui.show_player(result["stats"], result["history"])
        else:
            ui.show_character(result["stats"])
        return EXIT_OK

    if args.command == "ranking":
        rows = PlayerRanker().rank(records, by=args.by)
        if args.limit is not None:
            rows = rows[:max(0, args.limit)]
        if args.json:
            _dump({"by": args.by, "rows": rows, "count": len(rows)})
        else:
            title = "TIER RANKING" if args.by == RANK_BY_TIER else "WIN RATE RANKING"
            ui.show_ranking(rows, title=title)
        return EXIT_OK

    characters = list_characters(records)
    if args.json:
        _dump({"characters": characters, "count": len(characters)})
    else:
        ui.show_characters(characters)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
