from typing import TypedDict

from .models import FilterSet, Movie, TrendingMovie


class BrowseState(TypedDict):
    # Sessio
    session_id: int
    effective_term: str
    page: int
    items: list[Movie]
    total_pages: int | None
    has_more: bool
    # Tila
    is_loading: bool
    error_message: str
    # Näkymä
    filters: FilterSet
    visible_items: list[Movie]
    trending: list[TrendingMovie]
