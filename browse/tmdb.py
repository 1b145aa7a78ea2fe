import httpx
from pydantic import ValidationError

from .config import Settings, _log
from .errors import QueryDomainError, QueryTransportError
from .models import MovieDetails, MoviePage

SORT_BY = "popularity.desc"


class QueryClient:
    """
    TMDB-haut: sivutettu search/discover, elokuvan tiedot ja genret.
    Avain ja base-url annetaan konstruktorissa, ympäristöä ei lueta täällä.
    """

    def __init__(
        self,
        api_key: str | None = None,
        read_token: str | None = None,
        base_url: str = "https://api.themoviedb.org/3",
        timeout: float = 10.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        headers = {"accept": "application/json"}
        if read_token:
            headers["Authorization"] = f"Bearer {read_token}"
        self._http = http or httpx.AsyncClient(timeout=timeout)
        self._headers = headers

    @classmethod
    def from_settings(cls, settings: Settings, http: httpx.AsyncClient | None = None) -> "QueryClient":
        return cls(
            api_key=settings.tmdb_api_key,
            read_token=settings.tmdb_read_token,
            base_url=settings.tmdb_base,
            timeout=settings.http_timeout,
            http=http,
        )

    async def _get(self, endpoint: str, params: dict) -> dict:
        params = dict(params)
        if self.api_key and "Authorization" not in self._headers:
            params["api_key"] = self.api_key

        try:
            r = await self._http.get(f"{self.base_url}{endpoint}", params=params, headers=self._headers)
        except httpx.HTTPError as e:
            raise QueryTransportError(f"{endpoint}: {e}") from e

        if not r.is_success:
            raise QueryTransportError(f"{endpoint}: HTTP {r.status_code}", status_code=r.status_code)
        try:
            data = r.json()
        except ValueError as e:
            raise QueryTransportError(f"{endpoint}: virheellinen JSON") from e
        # Kaikki käytetyt TMDB-endpointit palauttavat objektin
        if not isinstance(data, dict):
            raise QueryTransportError(f"{endpoint}: vastaus ei ole JSON-objekti")
        return data

    async def fetch_page(self, term: str, page: int = 1) -> MoviePage:
        """
        Hae yksi tulossivu.
        term: hakusana sellaisenaan, tyhjä → discover (selaus suosion mukaan)
        page: sivunumero, alkaa 1:stä
        """
        params: dict = {
            "sort_by": SORT_BY,
            "include_adult": "false",
            "page": page,
        }
        if term:
            endpoint = "/search/movie"
            params["query"] = term
        else:
            endpoint = "/discover/movie"

        _log("TMDB KUTSU", f"endpoint={endpoint}\nparams={params}")
        data = await self._get(endpoint, params)

        if data.get("Response") == "False":
            raise QueryDomainError(data.get("Error"))

        try:
            return MoviePage(
                page=data.get("page", page),
                results=data.get("results") or [],
                total_pages=data.get("total_pages") or 0,
                total_results=data.get("total_results") or 0,
            )
        except ValidationError as e:
            raise QueryTransportError(f"{endpoint}: tuntematon vastauksen muoto") from e

    async def get_details(self, movie_id: int) -> MovieDetails:
        data = await self._get(
            f"/movie/{movie_id}",
            {"append_to_response": "videos,credits,reviews"},
        )
        try:
            return MovieDetails.from_tmdb(data)
        except ValidationError as e:
            raise QueryTransportError(f"/movie/{movie_id}: tuntematon vastauksen muoto") from e

    async def list_genres(self) -> list[dict]:
        data = await self._get("/genre/movie/list", {"language": "en"})
        return data.get("genres", [])

    async def aclose(self) -> None:
        await self._http.aclose()
