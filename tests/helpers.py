# tests/helpers.py

import json
import os

from pvpstats.records import MatchRecord


def make_record(nickname: str = 'Alice', character: str = 'Knight', kills: int = 0,
                deaths: int = 0, win: int = 0, tier: str = 'GOLD I') -> MatchRecord:
    """Build a normalized match record."""
    return MatchRecord(
        nickname=nickname,
        character=character,
        kills=kills,
        deaths=deaths,
        win=win,
        tier=tier,
    )


def sample_payload() -> list:
    """Raw stats document as it appears on disk."""
    return [
        {'gamenumber': 1, 'map': 'Canyon', 'nickname': 'Alice', 'character': 'Knight',
         'kill': 7, 'death': 2, 'win': 1, 'tier': 'GOLD II', 'finalscore': '5:3'},
        {'gamenumber': 1, 'map': 'Canyon', 'nickname': 'Bob', 'character': 'Archer',
         'kill': 3, 'death': 5, 'win': 0, 'tier': 'SILV I', 'finalscore': '5:3'},
        {'gamenumber': 2, 'map': 'Harbor', 'nickname': 'Alice', 'character': 'Archer',
         'kill': 4, 'death': 4, 'win': 0, 'tier': 'GOLD II', 'finalscore': '2:5'},
        {'gamenumber': 2, 'map': 'Harbor', 'nickname': 'Cara', 'character': 'Knight',
         'kill': 9, 'death': 0, 'win': 1, 'tier': 'DIA 3', 'finalscore': '2:5'},
        {'gamenumber': 3, 'map': 'Ruins', 'nickname': 'Bob', 'character': 'Knight',
         'kill': 6, 'death': 3, 'win': 1, 'tier': 'SILV I', 'finalscore': '5:4'},
        {'gamenumber': 3, 'map': 'Ruins', 'nickname': 'Alice', 'character': 'Knight',
         'kill': 5, 'death': 1, 'win': 1, 'tier': 'GOLD I', 'finalscore': '5:4'},
    ]


def write_stats_file(directory, payload=None) -> str:
    path = os.path.join(str(directory), 'stats.json')
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(sample_payload() if payload is None else payload, f)
    return path


def write_guide(directory, name: str, data) -> str:
    os.makedirs(str(directory), exist_ok=True)
    path = os.path.join(str(directory), f'{name}.json')
    with open(path, 'w', encoding='utf-8') as f:
        if isinstance(data, str):
            f.write(data)
        else:
            json.dump(data, f)
    return path
