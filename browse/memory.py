from .config import _log
from .errors import BrowseError

memory: dict = {
    "movie_genres": [],
}


async def load_memory(query_client) -> None:
    """Lataa genrelista kerran käynnistyksessä. Tyhjä lista ei estä hakuja."""
    try:
        memory["movie_genres"] = await query_client.list_genres()
    except BrowseError as e:
        _log("GENREJEN LATAUS EPÄONNISTUI", str(e))
        memory["movie_genres"] = []
        return
    _log("MUISTI LADATTU", f"{len(memory['movie_genres'])} elokuvagenreä")


def genre_id(value: str | None) -> str | None:
    """Genren nimi tai id → id merkkijonona. Tuntematon nimi palautetaan sellaisenaan."""
    if not value or value.strip().isdigit():
        return value
    by_name = {g["name"].lower(): g["id"] for g in memory["movie_genres"]}
    gid = by_name.get(value.strip().lower())
    return str(gid) if gid is not None else value
