from pydantic import BaseModel, ConfigDict, Field

IMAGE_BASE = "https://image.tmdb.org/t/p/w500"
TRAILER_BASE = "https://www.youtube.com/embed/"


def poster_url(poster_path: str | None) -> str | None:
    return f"{IMAGE_BASE}{poster_path}" if poster_path else None


class Movie(BaseModel):
    """Yksi hakutulos. Ei muutu vastaanoton jälkeen."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    title: str = "?"
    genre_ids: list[int] | None = None
    release_date: str | None = None
    vote_average: float | None = None
    poster_path: str | None = None
    original_language: str | None = None
    overview: str = ""


class MoviePage(BaseModel):
    page: int = 1
    results: list[Movie] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


class FilterSet(BaseModel):
    """Lomakekenttien arvot sellaisenaan, tyhjä merkkijono = ei asetettu."""

    genre: str | None = None       # genre-id, esim. "28"
    year: str | None = None        # julkaisuvuosi, esim. "2022"
    min_rating: str | None = None  # vähimmäisarvosana, esim. "7.5"

    def is_empty(self) -> bool:
        return not (self.genre or self.year or self.min_rating)


class TrendingMovie(BaseModel):
    id: str               # store-dokumentin id
    search_term: str
    count: int = 1
    movie_id: int
    poster_url: str | None = None
    title: str = "?"


class CastMember(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str = "?"
    character: str | None = None


class Review(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    author: str = "?"
    content: str = ""


class Video(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str
    site: str | None = None
    type: str | None = None


class MovieDetails(BaseModel):
    """/movie/{id}?append_to_response=videos,credits,reviews litistettynä."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = "?"
    release_date: str | None = None
    runtime: int | None = None
    vote_average: float | None = None
    vote_count: int = 0
    poster_path: str | None = None
    genres: list[str] = Field(default_factory=list)
    overview: str = ""
    status: str | None = None
    spoken_languages: list[str] = Field(default_factory=list)
    tagline: str | None = None
    budget: int | None = None
    revenue: int | None = None
    homepage: str | None = None
    cast: list[CastMember] = Field(default_factory=list)
    reviews: list[Review] = Field(default_factory=list)
    videos: list[Video] = Field(default_factory=list)

    @classmethod
    def from_tmdb(cls, d: dict) -> "MovieDetails":
        return cls(
            **{k: v for k, v in d.items() if k not in ("genres", "spoken_languages", "videos", "credits", "reviews")},
            genres=[g["name"] for g in d.get("genres") or []],
            spoken_languages=[lang.get("english_name") or lang.get("name", "?") for lang in d.get("spoken_languages") or []],
            cast=(d.get("credits") or {}).get("cast", []),
            reviews=(d.get("reviews") or {}).get("results", []),
            videos=(d.get("videos") or {}).get("results", []),
        )

    @property
    def trailer_url(self) -> str | None:
        return f"{TRAILER_BASE}{self.videos[0].key}" if self.videos else None

    @property
    def poster_url(self) -> str | None:
        return poster_url(self.poster_path)
