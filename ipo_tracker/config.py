import os
from dataclasses import dataclass
from typing import Optional

# Optional: load a local .env file if present.
try:
    from dotenv import load_dotenv

    load_dotenv()
except Exception:
    # If python-dotenv isn't installed or .env isn't present, that's fine.
    pass


def _env_bool(name: str, default: Optional[bool] = None) -> Optional[bool]:
    """Parse a boolean environment variable.

    Returns:
      - True/False if the env var is set to a recognizable value
      - default if unset or unrecognized

    Accepted truthy: 1, true, yes, y, on
    Accepted falsy:  0, false, no, n, off
    """

    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "y", "on"):
        return True
    if v in ("0", "false", "no", "n", "off"):
        return False
    return default


@dataclass(frozen=True)
class Config:
    """Runtime configuration.

    Values come from environment variables or a .env file.
    """

    # -----------------
    # Record Source
    # -----------------
    # Base URL serving /api/ipo-calendar and /api/angel-investments.
    # By default this is the API in this repo (see scripts/run_api.py).
    RECORD_SOURCE_BASE_URL: str = os.environ.get("RECORD_SOURCE_BASE_URL", "http://localhost:8000")
    RECORD_SOURCE_TIMEOUT_SECONDS: float = float(os.environ.get("RECORD_SOURCE_TIMEOUT_SECONDS", "30"))

    # How the API gets its two lists:
    #   local - parse the bundled sample payloads in-process (default)
    #   http  - GET them from RECORD_SOURCE_BASE_URL like any other client
    RECORD_SOURCE_MODE: str = os.environ.get("RECORD_SOURCE_MODE", "local").strip().lower()

    # -----------------
    # API
    # -----------------
    API_HOST: str = os.environ.get("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.environ.get("API_PORT", "8000"))

    # -----------------
    # CORS
    # -----------------
    # Comma-separated. Set to "*" to allow any origin.
    CORS_ALLOW_ORIGINS: str = os.environ.get(
        "CORS_ALLOW_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173",
    )
    CORS_ALLOW_CREDENTIALS: bool = _env_bool("CORS_ALLOW_CREDENTIALS", True) is True


def load_config() -> Config:
    return Config()
