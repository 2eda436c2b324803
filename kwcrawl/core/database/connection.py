# File: kwcrawl/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from kwcrawl.core.config.settings import settings


def _engine_options(url: str) -> dict:
    options = {"echo": False, "pool_pre_ping": True}
    if make_url(url).get_backend_name() == "sqlite":
        # Job runs may come from worker threads; the file must have a home
        options["connect_args"] = {"check_same_thread": False}
        settings.ensure_dirs()
    return options


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
