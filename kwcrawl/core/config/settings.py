# File: kwcrawl/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # kwcrawl/core/config/settings.py -> kwcrawl/core/config -> kwcrawl/core -> kwcrawl -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "kwcrawl_db")

    SQLITE_PATH: str = os.getenv("SQLITE_PATH", str(DATA_DIR / "kwcrawl.db"))

    @property
    def DATABASE_URL(self) -> str:
        # SQLite only when explicitly requested (tests, local runs).
        if os.getenv("USE_SQLITE", "false").lower() == "true":
            return f"sqlite:///{self.SQLITE_PATH}"

        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # --- Crawler ---
    # Upper bound on in-flight filesystem calls in concurrent mode. 0 = no cap.
    CRAWL_MAX_CONCURRENT_IO: int = int(os.getenv("CRAWL_MAX_CONCURRENT_IO", "0"))
    DEFAULT_CRAWL_MODE: str = os.getenv("DEFAULT_CRAWL_MODE", "concurrent")

    def ensure_dirs(self):
        """Creates the directory holding the SQLite file if it doesn't exist."""
        Path(self.SQLITE_PATH).parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
