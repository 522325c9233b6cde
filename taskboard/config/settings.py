# taskboard/config/settings.py
# Runtime configuration read from the environment (.env supported)

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Application settings"""

    # Datastore
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")
    DATABASE_SSLMODE = os.getenv("DATABASE_SSLMODE")  # only used for PostgreSQL
    AUTO_CREATE_TABLES = _env_flag("AUTO_CREATE_TABLES", "true")

    # Unknown task statuses fall back to "todo" unless strict mode is on
    STRICT_STATUS = _env_flag("STRICT_STATUS", "false")

    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Background overdue scan
    SCHEDULER_ENABLED = _env_flag("SCHEDULER_ENABLED", "true")
    OVERDUE_CHECK_MINUTES = int(os.getenv("OVERDUE_CHECK_MINUTES", "5"))

    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000",
        ).split(",")
        if origin.strip()
    ]

    @property
    def graphiql_enabled(self) -> bool:
        return self.ENVIRONMENT != "production"


settings = Settings()
