import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

_LOG_FILE = os.getenv(
    "BROWSE_LOG_FILE",
    os.path.join(os.path.dirname(__file__), "..", "debug.log"),
)


def _log(section: str, text: str) -> None:
    border = "─" * 60
    entry = f"\n{border}\n[LOG] {section}\n{border}\n{text}\n"
    with open(_LOG_FILE, "a", encoding="utf-8") as f:
        f.write(entry)


class Settings(BaseModel):
    tmdb_api_key: str | None = None
    tmdb_read_token: str | None = None
    tmdb_base: str = "https://api.themoviedb.org/3"
    appwrite_endpoint: str = "https://cloud.appwrite.io/v1"
    appwrite_project_id: str | None = None
    appwrite_api_key: str | None = None
    appwrite_database_id: str | None = None
    appwrite_collection_id: str | None = None
    debounce_seconds: float = 0.5
    http_timeout: float = 10.0

    @property
    def appwrite_configured(self) -> bool:
        return all([
            self.appwrite_project_id,
            self.appwrite_database_id,
            self.appwrite_collection_id,
        ])


# ympäristömuuttuja → Settings-kenttä
_ENV_FIELDS = {
    "TMDB_API_KEY_V3": "tmdb_api_key",
    "TMDB_READ_TOKEN": "tmdb_read_token",
    "TMDB_BASE": "tmdb_base",
    "APPWRITE_ENDPOINT": "appwrite_endpoint",
    "APPWRITE_PROJECT_ID": "appwrite_project_id",
    "APPWRITE_API_KEY": "appwrite_api_key",
    "APPWRITE_DATABASE_ID": "appwrite_database_id",
    "APPWRITE_COLLECTION_ID": "appwrite_collection_id",
    "DEBOUNCE_SECONDS": "debounce_seconds",
    "HTTP_TIMEOUT": "http_timeout",
}


def load_settings(env: dict | None = None) -> Settings:
    """
    Lue asetukset ympäristöstä (ja .env-tiedostosta).
    Vain tämä funktio koskee ympäristöön, clientit saavat arvot konstruktorissa.
    """
    source = os.environ if env is None else env
    values = {field: source[name] for name, field in _ENV_FIELDS.items() if source.get(name)}
    return Settings(**values)
