class BrowseError(Exception):
    """Yhteinen kantaluokka selaimen virheille."""


class QueryTransportError(BrowseError):
    """TMDB ei vastannut tai vastasi muulla kuin 2xx-statuksella."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class QueryDomainError(BrowseError):
    """TMDB vastasi, mutta payload kertoo virheestä (Response: "False")."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "")
        self.message = message


class TrendingError(BrowseError):
    """Trendaavien haku tai hakukerran tallennus epäonnistui."""
