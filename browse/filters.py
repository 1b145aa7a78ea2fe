from .models import FilterSet, Movie


def _parse_int(value: str) -> int | None:
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_float(value: str) -> float | None:
    try:
        return float(value.strip())
    except ValueError:
        return None


def matches(movie: Movie, filters: FilterSet) -> bool:
    """
    Pitääkö elokuva näyttää annetuilla filttereillä.
    Asettamaton kenttä hyväksyy kaiken; puuttuva tieto hylkää asetetun filtterin.
    """
    if filters.genre:
        genre_id = _parse_int(filters.genre)
        if genre_id is None or not movie.genre_ids or genre_id not in movie.genre_ids:
            return False

    if filters.year:
        if not movie.release_date or not movie.release_date.startswith(filters.year):
            return False

    if filters.min_rating:
        rating = _parse_float(filters.min_rating)
        if rating is None or movie.vote_average is None or movie.vote_average < rating:
            return False

    return True


def apply_filters(items: list[Movie], filters: FilterSet | None) -> list[Movie]:
    """Suodata kertyneet tulokset. Ei muuta items-listaa."""
    if filters is None or filters.is_empty():
        return list(items)
    return [item for item in items if matches(item, filters)]
