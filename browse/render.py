from .models import Movie, MovieDetails, TrendingMovie
from .state import BrowseState

DETAILS_ERROR = "Failed to load movie details."
REVIEW_LENGTH = 180
TOP_CAST = 6
TOP_REVIEWS = 2


def format_card(movie: Movie) -> str:
    rating = f"{movie.vote_average:.1f}" if movie.vote_average else "N/A"
    year = movie.release_date.split("-")[0] if movie.release_date else "N/A"
    language = movie.original_language or "?"
    return f"[{movie.id}] {movie.title}\n  ★ {rating} • {language} • {year}"


def format_trending(trending: list[TrendingMovie]) -> str:
    if not trending:
        return "No trending movies yet."
    lines = ["Trending Movies\n"]
    for index, movie in enumerate(trending, start=1):
        lines.append(f"{index}. {movie.title} [{movie.movie_id}]" + (f"\n   {movie.poster_url}" if movie.poster_url else ""))
    return "\n".join(lines)


def format_list(state: BrowseState) -> str:
    """Kaikki elokuvat -näkymä: virhe, kortit suodatettuna ja sivutuksen tila."""
    items = state["items"]
    visible = state["visible_items"]
    term = state["effective_term"]

    lines = [f"All Movies: {repr(term) if term else 'discover'}"]
    if not state["filters"].is_empty():
        f = state["filters"]
        lines.append(
            f"Filters: genre={f.genre or '-'} year={f.year or '-'} min_rating={f.min_rating or '-'}"
            f" ({len(visible)}/{len(items)} shown)"
        )
    if state["error_message"]:
        lines.append(state["error_message"])

    if state["is_loading"] and not items:
        lines.append("Loading...")
        return "\n".join(lines)

    lines.append("")
    lines += [format_card(movie) for movie in visible]

    if state["is_loading"]:
        lines.append("Loading more movies...")
    elif not state["has_more"]:
        lines.append("No more movies to load.")
    else:
        total = state["total_pages"]
        lines.append(f"Page {state['page']}/{total if total is not None else '?'}, load more for the next page.")

    return "\n".join(lines)


def _runtime(minutes: int | None) -> str | None:
    if not minutes:
        return None
    return f"{minutes // 60}h {minutes % 60}m"


def format_details(movie: MovieDetails) -> str:
    year = movie.release_date.split("-")[0] if movie.release_date else ""
    header = " • ".join(part for part in [
        year or None,
        "PG-13" if movie.vote_average else "NR",
        _runtime(movie.runtime),
    ] if part)

    lines = [
        movie.title,
        header,
        f"★ {movie.vote_average or 0:.1f} / 10 ({movie.vote_count:,})",
        f"Poster: {movie.poster_url}" if movie.poster_url else None,
        f"Trailer: {movie.trailer_url}" if movie.trailer_url else None,
        f"Genres: {', '.join(movie.genres)}" if movie.genres else None,
        "",
        "Overview",
        movie.overview,
        "",
        f"Release date: {movie.release_date or '-'}",
        f"Status: {movie.status or '-'}",
        f"Languages: {', '.join(movie.spoken_languages) or '-'}",
        f"Tagline: {movie.tagline or '—'}",
        f"Budget: ${movie.budget or 0:,}",
        f"Revenue: ${movie.revenue or 0:,}",
        f"Homepage: {movie.homepage}" if movie.homepage else None,
        "",
        "Top Cast",
    ]
    lines += [f"  {actor.name} as {actor.character or '?'}" for actor in movie.cast[:TOP_CAST]]

    lines += ["", "Top Reviews"]
    if movie.reviews:
        for review in movie.reviews[:TOP_REVIEWS]:
            lines.append(f'  "{review.content[:REVIEW_LENGTH]}..."')
            lines.append(f"  — {review.author}")
    else:
        lines.append("  No reviews available.")

    return "\n".join(line for line in lines if line is not None)
