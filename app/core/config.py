from pathlib import Path

from pydantic_settings import BaseSettings
from typing import Optional


BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "apps.json"

# Placeholder used when no router key is configured; not a credential.
DEV_ROUTER_API_KEY = "default-dev-token"


class Settings(BaseSettings):
    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    WORKERS: int = 4

    CORS_ALLOW_ORIGINS: str = "*"
    CORS_ALLOW_CREDENTIALS: bool = False
    TRUST_PROXY_HEADERS: bool = False

    # Catalog data; the bundled apps.json is used when unset
    CATALOG_PATH: Optional[str] = None

    # Cortensor Router
    CORTENSOR_ROUTER_URL: str = "https://router.cortensor.network"
    CORTENSOR_API_KEY: str = ""
    CORTENSOR_TIMEOUT_SECONDS: float = 10.0
    COMPLETION_TIMEOUT_SECONDS: int = 60
    DEFAULT_SESSION_ID: int = 0

    # Network status polling
    STATUS_POLL_ENABLED: bool = True
    STATUS_POLL_INTERVAL_SECONDS: float = 30.0

    RECOMMEND_RATE_LIMIT: str = "10/minute"

    # Submissions open a pre-filled issue on this repository
    SUBMISSION_REPO_URL: str = "https://github.com/cortensor/community-projects"

    BUILD_GIT_SHA: Optional[str] = None
    BUILD_IMAGE_TAG: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()

if not settings.CORTENSOR_API_KEY:
    import logging as _logging

    settings.CORTENSOR_API_KEY = DEV_ROUTER_API_KEY
    _logging.getLogger(__name__).warning(
        "CORTENSOR_API_KEY was not set; using the development placeholder token. "
        "Set CORTENSOR_API_KEY in env for any real deployment."
    )
