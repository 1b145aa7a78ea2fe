import json

import httpx

from .config import Settings, _log
from .errors import TrendingError
from .models import Movie, TrendingMovie, poster_url


def _query(method: str, attribute: str | None = None, values: list | None = None) -> str:
    q: dict = {"method": method}
    if attribute is not None:
        q["attribute"] = attribute
    if values is not None:
        q["values"] = values
    return json.dumps(q)


def _to_trending(doc: dict) -> TrendingMovie:
    return TrendingMovie(
        id=doc["$id"],
        search_term=doc.get("searchTerm", ""),
        count=doc.get("count", 1),
        movie_id=doc["movie_id"],
        poster_url=doc.get("poster_url"),
        title=doc.get("title") or doc.get("searchTerm") or "?",
    )


class AppwriteTrendingClient:
    """
    Hakukertojen laskuri Appwrite-tietokannan kokoelmassa.
    Dokumentti per hakusana: searchTerm, count, movie_id, poster_url, title.
    """

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        database_id: str,
        collection_id: str,
        api_key: str | None = None,
        timeout: float = 10.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.documents_url = (
            f"{endpoint.rstrip('/')}/databases/{database_id}/collections/{collection_id}/documents"
        )
        self._headers = {"X-Appwrite-Project": project_id, "Content-Type": "application/json"}
        if api_key:
            self._headers["X-Appwrite-Key"] = api_key
        self._http = http or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, http: httpx.AsyncClient | None = None) -> "AppwriteTrendingClient":
        return cls(
            endpoint=settings.appwrite_endpoint,
            project_id=settings.appwrite_project_id,
            database_id=settings.appwrite_database_id,
            collection_id=settings.appwrite_collection_id,
            api_key=settings.appwrite_api_key,
            timeout=settings.http_timeout,
            http=http,
        )

    async def _request(self, method: str, url: str, **kwargs) -> dict:
        try:
            r = await self._http.request(method, url, headers=self._headers, **kwargs)
            r.raise_for_status()
            return r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise TrendingError(f"Appwrite {method} epäonnistui: {e}") from e

    async def _list(self, queries: list[str]) -> list[dict]:
        params = [("queries[]", q) for q in queries]
        data = await self._request("GET", self.documents_url, params=params)
        return data.get("documents", [])

    async def get_trending(self, limit: int = 5) -> list[TrendingMovie]:
        docs = await self._list([
            _query("orderDesc", "count"),
            _query("limit", values=[limit]),
        ])
        return [_to_trending(doc) for doc in docs]

    async def record_search(self, term: str, movie: Movie) -> None:
        """Kasvata hakusanan laskuria tai luo uusi dokumentti ensimmäisestä osumasta."""
        docs = await self._list([_query("equal", "searchTerm", [term])])

        if docs:
            doc = docs[0]
            await self._request(
                "PATCH",
                f"{self.documents_url}/{doc['$id']}",
                json={"data": {"count": doc.get("count", 0) + 1}},
            )
            return

        await self._request(
            "POST",
            self.documents_url,
            json={
                "documentId": "unique()",
                "data": {
                    "searchTerm": term,
                    "count": 1,
                    "movie_id": movie.id,
                    "poster_url": poster_url(movie.poster_path),
                    "title": movie.title,
                },
            },
        )
        _log("TRENDING UUSI HAKUSANA", f"term={term!r} movie_id={movie.id}")

    async def aclose(self) -> None:
        await self._http.aclose()


class InMemoryTrendingClient:
    """Sama sopimus prosessin muistissa, kun Appwrite-projektia ei ole määritelty."""

    def __init__(self):
        self._docs: dict[str, TrendingMovie] = {}

    async def get_trending(self, limit: int = 5) -> list[TrendingMovie]:
        ranked = sorted(self._docs.values(), key=lambda t: t.count, reverse=True)
        return ranked[:limit]

    async def record_search(self, term: str, movie: Movie) -> None:
        existing = self._docs.get(term)
        if existing:
            self._docs[term] = existing.model_copy(update={"count": existing.count + 1})
            return
        self._docs[term] = TrendingMovie(
            id=f"mem-{len(self._docs) + 1}",
            search_term=term,
            count=1,
            movie_id=movie.id,
            poster_url=poster_url(movie.poster_path),
            title=movie.title,
        )

    async def aclose(self) -> None:
        pass


def build_trending_client(settings: Settings, http: httpx.AsyncClient | None = None):
    if settings.appwrite_configured:
        return AppwriteTrendingClient.from_settings(settings, http=http)
    _log("TRENDING", "Appwrite-projektia ei määritelty, käytetään muistinvaraista laskuria")
    return InMemoryTrendingClient()
