# test_render.py: tekstinäkymät: kortit, lista, trendaavat ja elokuvan tiedot
#
# Aja: uv run pytest tests/test_render.py -v

from browse.models import FilterSet, Movie, MovieDetails, TrendingMovie
from browse.render import format_card, format_details, format_list, format_trending


def make_state(**overrides) -> dict:
    items = overrides.pop("items", [])
    state = {
        "session_id": 1,
        "effective_term": "batman",
        "page": 1,
        "items": items,
        "total_pages": 5,
        "has_more": True,
        "is_loading": False,
        "error_message": "",
        "filters": FilterSet(),
        "visible_items": items,
        "trending": [],
    }
    state.update(overrides)
    return state


BATMAN = Movie(id=1, title="Batman", release_date="2022-03-04", vote_average=7.85, original_language="en")


# ─────────────────────────────────────────────────────────────
# Kortti
# ─────────────────────────────────────────────────────────────

def test_kortti():
    assert format_card(BATMAN) == "[1] Batman\n  ★ 7.8 • en • 2022"


def test_kortti_ilman_tietoja():
    card = format_card(Movie(id=2, title="Tuntematon"))
    assert "N/A • ? • N/A" in card


# ─────────────────────────────────────────────────────────────
# Lista
# ─────────────────────────────────────────────────────────────

def test_lista_naytaa_sivun():
    text = format_list(make_state(items=[BATMAN]))
    assert "[1] Batman" in text
    assert "Page 1/5" in text


def test_lista_lataa_ensimmaista_sivua():
    text = format_list(make_state(is_loading=True))
    assert text.endswith("Loading...")


def test_lista_lataa_lisaa():
    text = format_list(make_state(items=[BATMAN], is_loading=True))
    assert "[1] Batman" in text
    assert text.endswith("Loading more movies...")


def test_lista_loppu():
    text = format_list(make_state(items=[BATMAN], has_more=False))
    assert text.endswith("No more movies to load.")


def test_lista_virhe_ja_discover():
    text = format_list(make_state(effective_term="", error_message="Failed to fetch movies. Please try again later."))
    assert text.startswith("All Movies: discover")
    assert "Failed to fetch movies. Please try again later." in text


def test_lista_filtterit_nakyvat():
    other = Movie(id=2, title="Joker")
    text = format_list(make_state(items=[BATMAN, other], visible_items=[BATMAN], filters=FilterSet(genre="28")))
    assert "genre=28" in text
    assert "(1/2 shown)" in text
    assert "Joker" not in text


# ─────────────────────────────────────────────────────────────
# Trendaavat
# ─────────────────────────────────────────────────────────────

def test_trendaavat_numeroitu():
    text = format_trending([
        TrendingMovie(id="a", search_term="batman", count=3, movie_id=1, title="Batman", poster_url="https://img/1.jpg"),
        TrendingMovie(id="b", search_term="joker", count=1, movie_id=2, title="Joker"),
    ])
    assert "1. Batman [1]\n   https://img/1.jpg" in text
    assert "2. Joker [2]" in text


def test_trendaavat_tyhja():
    assert format_trending([]) == "No trending movies yet."


# ─────────────────────────────────────────────────────────────
# Elokuvan tiedot
# ─────────────────────────────────────────────────────────────

def test_tiedot():
    movie = MovieDetails.from_tmdb({
        "id": 414906,
        "title": "The Batman",
        "release_date": "2022-03-01",
        "runtime": 176,
        "vote_average": 7.66,
        "vote_count": 10234,
        "genres": [{"id": 80, "name": "Crime"}],
        "budget": 185000000,
        "videos": {"results": [{"key": "abc"}]},
        "credits": {"cast": [{"id": i, "name": f"Näyttelijä {i}", "character": f"Rooli {i}"} for i in range(8)]},
        "reviews": {"results": [
            {"id": "r1", "author": "eka", "content": "x" * 300},
            {"id": "r2", "author": "toka", "content": "lyhyt"},
            {"id": "r3", "author": "kolmas", "content": "ei näy"},
        ]},
    })

    text = format_details(movie)

    assert text.startswith("The Batman\n2022 • PG-13 • 2h 56m")
    assert "★ 7.7 / 10 (10,234)" in text
    assert "Trailer: https://www.youtube.com/embed/abc" in text
    assert "Budget: $185,000,000" in text
    assert "Tagline: —" in text
    assert "Näyttelijä 5 as Rooli 5" in text
    assert "Näyttelijä 6" not in text
    assert f'"{"x" * 180}..."' in text
    assert "— toka" in text
    assert "kolmas" not in text


def test_tiedot_ilman_arvosteluja():
    text = format_details(MovieDetails(id=1, title="Hiljainen"))
    assert "No reviews available." in text
    assert "NR" in text
