from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from browse.config import _log, load_settings
from browse.controller import BrowseController
from browse.errors import BrowseError
from browse.memory import genre_id, load_memory, memory
from browse.render import DETAILS_ERROR, format_details, format_list, format_trending
from browse.tmdb import QueryClient
from browse.trending import build_trending_client

runtime: dict = {
    "controller": None,
}


@asynccontextmanager
async def lifespan(app):
    settings = load_settings()
    query_client = QueryClient.from_settings(settings)
    trending_client = build_trending_client(settings)
    controller = BrowseController(query_client, trending_client, settings.debounce_seconds)
    runtime["controller"] = controller

    await load_memory(query_client)
    # Tyhjä hakusana = discover-selaus heti käynnistyksessä.
    # Trendaavat vasta sen jälkeen: fetch_page tyhjentää virheviestin.
    await controller.start_session("")
    await controller.load_trending()
    try:
        yield
    finally:
        await controller.debouncer.aclose()
        await query_client.aclose()
        await trending_client.aclose()
        runtime["controller"] = None


mcp = FastMCP("movies", lifespan=lifespan)

NOT_READY = "Browser is not ready yet."


def _controller() -> BrowseController | None:
    return runtime["controller"]


@mcp.tool()
async def type_search(text: str) -> str:
    """
    Hakukentän raaka syöte. Haku käynnistyy vasta kun kirjoittaminen on
    pysähtynyt hetkeksi; katso tulokset list_movies-työkalulla.
    text: hakukentän koko sisältö
    """
    controller = _controller()
    if controller is None:
        return NOT_READY
    controller.on_query_changed(text)
    return f"Search for {text!r} scheduled after {controller.debouncer.delay:g}s of quiet."


@mcp.tool()
async def search_movies(query: str = "") -> str:
    """
    Hae elokuvia heti. Tyhjä query selaa suosituimpia (discover).
    query: hakusana
    """
    controller = _controller()
    if controller is None:
        return NOT_READY
    controller.debouncer.cancel()
    await controller.on_effective_term(query)
    return format_list(controller.snapshot())


@mcp.tool()
async def load_more_movies() -> str:
    """Hae nykyisen haun seuraava sivu ja lisää se listan perään."""
    controller = _controller()
    if controller is None:
        return NOT_READY
    await controller.load_more()
    return format_list(controller.snapshot())


@mcp.tool()
async def list_movies() -> str:
    """Näytä kertyneet tulokset filttereillä suodatettuna."""
    controller = _controller()
    if controller is None:
        return NOT_READY
    return format_list(controller.snapshot())


@mcp.tool()
async def set_filters(genre: str | None = None, year: str | None = None, min_rating: str | None = None) -> str:
    """
    Suodata kertyneitä tuloksia. Ei tee uutta hakua.
    genre: genren id tai nimi, esim. "28" tai "Action"
    year: julkaisuvuosi, esim. "2022"
    min_rating: vähimmäisarvosana (0–10)
    """
    controller = _controller()
    if controller is None:
        return NOT_READY
    controller.set_filters(genre=genre_id(genre), year=year, min_rating=min_rating)
    return format_list(controller.snapshot())


@mcp.tool()
async def clear_filters() -> str:
    """Poista kaikki filtterit."""
    controller = _controller()
    if controller is None:
        return NOT_READY
    controller.clear_filters()
    return format_list(controller.snapshot())


@mcp.tool()
async def trending_movies() -> str:
    """Trendaavat elokuvat tallennettujen hakujen perusteella."""
    controller = _controller()
    if controller is None:
        return NOT_READY
    return format_trending(controller.trending)


@mcp.tool()
async def movie_details(id: int) -> str:
    """
    Elokuvan tiedot: näyttelijät, arvostelut ja traileri.
    id: TMDB-id (saadaan list_movies- tai trending_movies-listasta)
    """
    controller = _controller()
    if controller is None:
        return NOT_READY
    try:
        movie = await controller.query_client.get_details(id)
    except BrowseError as e:
        _log("ELOKUVAN TIEDOT EPÄONNISTUI", f"id={id}\n{e}")
        return DETAILS_ERROR
    return format_details(movie)


@mcp.tool()
async def list_genres() -> str:
    """Listaa elokuvagenret (id: nimi)."""
    genres = memory["movie_genres"]
    if not genres:
        return "Genres not loaded."
    return "\n".join(f"{g['id']}: {g['name']}" for g in genres)


if __name__ == "__main__":
    mcp.run()
