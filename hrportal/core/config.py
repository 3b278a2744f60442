# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration, read from the environment.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "hr-dashboard")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8090"))

    # Upstream REST backend
    BACKEND_API_URL: str = os.getenv("BACKEND_API_URL", "http://localhost:3000")
    BACKEND_API_TOKEN: str = os.getenv("BACKEND_API_TOKEN", "")
    BACKEND_TIMEOUT: float = float(os.getenv("BACKEND_TIMEOUT", "10.0"))
    BACKEND_HEALTH_PATH: str = os.getenv("BACKEND_HEALTH_PATH", "/health")

    # Query cache (seconds)
    EMPLOYEES_STALE_SECONDS: float = float(os.getenv("EMPLOYEES_STALE_SECONDS", "120"))
    EMPLOYEE_DETAIL_STALE_SECONDS: float = float(os.getenv("EMPLOYEE_DETAIL_STALE_SECONDS", "300"))
    REFERENCE_STALE_SECONDS: float = float(os.getenv("REFERENCE_STALE_SECONDS", "600"))
    CLIENTS_STALE_SECONDS: float = float(os.getenv("CLIENTS_STALE_SECONDS", "120"))
    STATS_STALE_SECONDS: float = float(os.getenv("STATS_STALE_SECONDS", "300"))
    LOGS_STALE_SECONDS: float = float(os.getenv("LOGS_STALE_SECONDS", "60"))
    CACHE_GC_SECONDS: float = float(os.getenv("CACHE_GC_SECONDS", "300"))
    REFERENCE_GC_SECONDS: float = float(os.getenv("REFERENCE_GC_SECONDS", "1800"))

    # Tables
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))
    REFERENCE_LIST_LIMIT: int = int(os.getenv("REFERENCE_LIST_LIMIT", "100"))
    CANDIDATE_LIST_LIMIT: int = int(os.getenv("CANDIDATE_LIST_LIMIT", "100"))

    # Wizard sessions
    MAX_WIZARD_SESSIONS: int = int(os.getenv("MAX_WIZARD_SESSIONS", "500"))
    WIZARD_SESSION_TTL_SECONDS: float = float(
        os.getenv("WIZARD_SESSION_TTL_SECONDS", "3600")
    )

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
