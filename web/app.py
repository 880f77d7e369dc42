from fastapi import FastAPI, HTTPException
import logging
import os
import sys
from urllib.error import URLError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pvpstats.calculator import StatsCalculator
from pvpstats.characters import CharacterGuideError, aggregate_by_character, load_character_guide
from pvpstats.config import Settings, configure_logging, load_settings
from pvpstats.ranking import RANK_MODES, PlayerRanker
from pvpstats.records import MatchRecord, RecordFormatError, list_characters, load_records, player_history
from pvpstats.search import search as search_records

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="pvpstats")


def get_settings() -> Settings:
    return load_settings()


def _load(settings: Settings) -> list[MatchRecord]:
    # Re-read per request; stats are recomputed on every query.
    try:
        return load_records(settings.stats_source)
    except (OSError, URLError, RecordFormatError) as e:
        LOGGER.error("Failed to load match records from %s: %s", settings.stats_source, e)
        raise HTTPException(status_code=500, detail=f"Failed to load match records: {str(e)}")


@app.get("/api/search")
async def search(q: str = "") -> dict:
    query = q.strip()
    if not query:
        raise HTTPException(status_code=400, detail="q is required")
    settings = get_settings()
    records = _load(settings)
    result = search_records(records, query, character_case_sensitive=settings.character_case_sensitive)
    if result is None:
        raise HTTPException(status_code=404, detail=f"No nickname or character named '{query}'")
    return result


@app.get("/api/players/{nickname}")
async def player_stats(nickname: str) -> dict:
    records = _load(get_settings())
    stats = StatsCalculator().aggregate_by_player(records, nickname)
    if stats is None:
        raise HTTPException(status_code=404, detail=f"Player '{nickname}' not found")
    history = [game.to_dict() for game in player_history(records, nickname)]
    return {"nickname": stats["nickname"], "stats": stats, "history": history}


@app.get("/api/characters")
async def characters() -> dict:
    names = list_characters(_load(get_settings()))
    return {"characters": names, "count": len(names)}


@app.get("/api/characters/{name}")
async def character_stats(name: str) -> dict:
    settings = get_settings()
    stats = aggregate_by_character(_load(settings), name, case_sensitive=settings.character_case_sensitive)
    if stats is None:
        raise HTTPException(status_code=404, detail=f"Character '{name}' not found")
    return stats


@app.get("/api/characters/{name}/guide")
async def character_guide(name: str) -> dict:
    settings = get_settings()
    try:
        guide = load_character_guide(settings.char_dir, name)
    except CharacterGuideError as e:
        raise HTTPException(status_code=500, detail=f"Failed to load character guide: {str(e)}")
    if guide is None:
        raise HTTPException(status_code=404, detail=f"No guide for character '{name}'")
    return guide


@app.get("/api/ranking")
async def ranking(by: str = "winrate", limit: int | None = None) -> dict:
    if by not in RANK_MODES:
        raise HTTPException(status_code=400, detail=f"by must be one of: {', '.join(RANK_MODES)}")
    rows = PlayerRanker().rank(_load(get_settings()), by=by)
    if limit is not None:
        rows = rows[:max(0, limit)]
    return {"by": by, "rows": rows, "count": len(rows)}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host="127.0.0.1", port=5000)
