from .config import _log
from .debounce import Debouncer
from .errors import QueryDomainError, QueryTransportError
from .filters import apply_filters
from .models import FilterSet, Movie, TrendingMovie
from .state import BrowseState

FETCH_ERROR = "Failed to fetch movies. Please try again later."
DOMAIN_ERROR = "An error occurred while fetching movies."
TRENDING_ERROR = "Failed to fetch trending movies. Please try again later."


class BrowseController:
    """
    Haun ja sivutuksen tila yhdelle käyttäjälle.

    Sessio = yhden efektiivisen hakusanan tulokset. Uusi hakusana aloittaa
    uuden session ja hylkää edellisen tulokset. Jokaisella sessiolla on
    kasvava id; vanhan session myöhässä saapuva vastaus heitetään pois.
    """

    def __init__(self, query_client, trending_client, debounce_seconds: float = 0.5):
        self.query_client = query_client
        self.trending_client = trending_client
        self.debouncer = Debouncer(debounce_seconds, self.on_effective_term)

        self.session_id = 0
        self.effective_term = ""
        self.page = 1
        self.items: list[Movie] = []
        self.total_pages: int | None = None
        self.has_more = True
        self.is_loading = False
        self.error_message = ""

        self.filters = FilterSet()
        self.trending: list[TrendingMovie] = []

    # ─────────────────────────────────────────────────────────────
    # Hakusana
    # ─────────────────────────────────────────────────────────────

    def on_query_changed(self, raw: str) -> None:
        """Näppäinpainallus: efektiivinen hakusana vasta hiljaisen jakson jälkeen."""
        self.debouncer.push(raw)

    async def on_effective_term(self, term: str) -> None:
        # Sama hakusana uudelleen ei aloita uutta sessiota
        if self.session_id and term == self.effective_term:
            return
        await self.start_session(term)

    async def start_session(self, term: str) -> None:
        self.session_id += 1
        self.effective_term = term
        self.page = 1
        self.items = []
        self.total_pages = None
        self.has_more = True
        _log("SESSIO", f"session_id={self.session_id} term={term!r}")
        await self.fetch_page(term, 1, append=False)

    # ─────────────────────────────────────────────────────────────
    # Sivuhaku
    # ─────────────────────────────────────────────────────────────

    async def fetch_page(self, term: str, page: int, append: bool) -> None:
        session_id = self.session_id
        self.is_loading = True
        self.error_message = ""
        try:
            result = await self.query_client.fetch_page(term, page)
        except QueryDomainError as e:
            if self._stale(session_id, term, page):
                return
            _log("TMDB VIRHEVASTAUS", f"term={term!r} page={page}\n{e.message}")
            self.error_message = e.message or DOMAIN_ERROR
            if not append:
                self.items = []
        except QueryTransportError as e:
            if self._stale(session_id, term, page):
                return
            _log("TMDB HAKU EPÄONNISTUI", f"term={term!r} page={page}\n{e}")
            self.error_message = FETCH_ERROR
            if not append:
                self.items = []
        else:
            if self._stale(session_id, term, page):
                return
            self.items = self.items + result.results if append else list(result.results)
            self.total_pages = result.total_pages

            # Vain haun ensimmäinen sivu kasvattaa trendilaskuria
            if term and page == 1 and result.results:
                await self._record_search(term, result.results[0])
        finally:
            if session_id == self.session_id:
                self.is_loading = False

    def _stale(self, session_id: int, term: str, page: int) -> bool:
        if session_id == self.session_id:
            return False
        _log("VANHENTUNUT VASTAUS", f"session_id={session_id} (nyt {self.session_id}) term={term!r} page={page}")
        return True

    async def _record_search(self, term: str, movie: Movie) -> None:
        # Best effort: epäonnistuminen ei vaikuta tuloksiin eikä virheviestiin
        try:
            await self.trending_client.record_search(term, movie)
        except Exception as e:
            _log("TRENDING TALLENNUS EPÄONNISTUI", f"term={term!r} movie_id={movie.id}\n{e}")

    async def load_more(self) -> bool:
        """
        Hae seuraava sivu nykyiseen sessioon.
        Palauttaa True jos haku tehtiin.
        """
        if self.is_loading or not self.has_more:
            return False

        next_page = self.page + 1
        if self.total_pages is not None and next_page > self.total_pages:
            self.has_more = False
            return False

        session_id = self.session_id
        await self.fetch_page(self.effective_term, next_page, append=True)
        if session_id == self.session_id:
            self.page = next_page
        return True

    # ─────────────────────────────────────────────────────────────
    # Trendaavat
    # ─────────────────────────────────────────────────────────────

    async def load_trending(self) -> None:
        try:
            self.trending = await self.trending_client.get_trending()
        except Exception as e:
            _log("TRENDING HAKU EPÄONNISTUI", str(e))
            self.trending = []
            self.error_message = TRENDING_ERROR

    # ─────────────────────────────────────────────────────────────
    # Filtterit
    # ─────────────────────────────────────────────────────────────

    def set_filters(self, genre: str | None = None, year: str | None = None, min_rating: str | None = None) -> None:
        self.filters = FilterSet(genre=genre, year=year, min_rating=min_rating)

    def clear_filters(self) -> None:
        self.filters = FilterSet()

    def visible_items(self) -> list[Movie]:
        return apply_filters(self.items, self.filters)

    def snapshot(self) -> BrowseState:
        return BrowseState(
            session_id=self.session_id,
            effective_term=self.effective_term,
            page=self.page,
            items=list(self.items),
            total_pages=self.total_pages,
            has_more=self.has_more,
            is_loading=self.is_loading,
            error_message=self.error_message,
            filters=self.filters,
            visible_items=self.visible_items(),
            trending=list(self.trending),
        )
