"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: jobtracker/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env. When .env doesn't exist (prod), this is a no-op.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "JobTracker"
    app_version: str = "1.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]

    # Database
    # database_url wins when set; otherwise built from db_backend + parts below
    database_url: str = ""
    db_backend: str = "sqlite"  # sqlite | postgres
    database_path: str = "./data/jobtracker.db"
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "jobuser"
    db_password: str = "jobpass"
    db_name: str = "jobtracker"

    # External job search (MCP server)
    mcp_server_url: str = "http://localhost:9423"

    # HTTP / network
    http_request_timeout: int = 30

    # PUT /api/jobs/{id}: overwrite is_remote even when the body omits it
    legacy_remote_overwrite: bool = False

    # Logging
    log_level: str = "INFO"
    # empty: the MCP client logs at log_level
    gateway_log_level: str = ""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def sqlalchemy_url(self) -> str:
        """Effective SQLAlchemy URL for the configured backend."""
        if self.database_url:
            return self.database_url
        if self.db_backend == "postgres":
            return (
                f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return f"sqlite:///{self.database_path}"


settings = Settings()


# --- Constants (non-env, business config) ---

# Attachments
MAX_ATTACHMENT_SIZE: int = 10 * 1024 * 1024  # 10 MiB
FILE_TYPE_RESUME: str = "resume"
FILE_TYPE_COVER_LETTER: str = "cover_letter"
ALLOWED_FILE_TYPES: frozenset[str] = frozenset({FILE_TYPE_RESUME, FILE_TYPE_COVER_LETTER})
ALLOWED_MIME_TYPES: frozenset[str] = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})

# Jobs
DEFAULT_JOB_SOURCE: str = "manual"

# Search defaults (applied at the HTTP boundary)
SEARCH_DEFAULT_RESULTS_WANTED: int = 20
SEARCH_DEFAULT_DISTANCE: int = 50
SEARCH_DEFAULT_HOURS_OLD: int = 72
SEARCH_DEFAULT_FORMAT: str = "json"
MCP_SEARCH_METHOD: str = "search_jobs"
