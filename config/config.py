import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

GOOGLE_SEARCH_ENDPOINT = "https://www.googleapis.com/customsearch/v1"
DEFAULT_USER_AGENT = "agent-web-actions/1.0"
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8000


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""


@dataclass(frozen=True)
class SearchConfig:
    """Credentials for the Google Custom Search JSON API."""

    api_key: str
    engine_id: str
    endpoint: str = GOOGLE_SEARCH_ENDPOINT

    @classmethod
    def from_env(cls) -> "SearchConfig":
        return cls(
            api_key=os.getenv("GOOGLE_SEARCH_KEY", "").strip(),
            engine_id=os.getenv("GOOGLE_SEARCH_CX", "").strip(),
            endpoint=os.getenv("GOOGLE_SEARCH_ENDPOINT", "").strip() or GOOGLE_SEARCH_ENDPOINT,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.engine_id)

    def __repr__(self) -> str:
        # api_key stays out of logs and tracebacks
        return f"SearchConfig(engine_id={self.engine_id!r}, endpoint={self.endpoint!r})"


class Config:
    """Configuration management for the application."""

    def __init__(self):
        """Initialize configuration with environment variables."""
        # Load environment variables from .env file if it exists
        env_path = Path(__file__).parent.parent / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        self.search = SearchConfig.from_env()

        # HTTP Configuration
        self.http_timeout_s = _parse_timeout(os.getenv("HTTP_TIMEOUT_SECONDS", ""))
        self.user_agent = os.getenv("HTTP_USER_AGENT", "").strip() or DEFAULT_USER_AGENT

        # Local invoke server (run_server.py)
        self.server_host = os.getenv("SERVER_HOST", "").strip() or DEFAULT_SERVER_HOST
        self.server_port = _parse_port(os.getenv("SERVER_PORT", ""))

    def validate(self) -> list[str]:
        """
        Check that the search credentials are present.

        Returns:
            list[str]: Names of the missing environment variables (empty when valid)
        """
        missing = []
        if not self.search.api_key:
            missing.append("GOOGLE_SEARCH_KEY")
        if not self.search.engine_id:
            missing.append("GOOGLE_SEARCH_CX")
        return missing


def _parse_timeout(raw: str) -> float | None:
    """Empty means "use the HTTP client's default timeout"."""
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"HTTP_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return value


def _parse_port(raw: str) -> int:
    raw = raw.strip()
    if not raw:
        return DEFAULT_SERVER_PORT
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigError(f"SERVER_PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"SERVER_PORT out of range, got {raw!r}")
    return port
