# File: tests/conftest.py

import pytest
import os
import sys
import tempfile
import sqlalchemy
from sqlalchemy import text
from sqlalchemy_utils import database_exists, create_database

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point Settings at a throw-away SQLite database.
# Must happen before anything imports kwcrawl.core.config.settings.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="kwcrawl_tests_")
os.environ["USE_SQLITE"] = "true"
os.environ["SQLITE_PATH"] = os.path.join(_TEST_DB_DIR, "test_kwcrawl.db")

# 3. Shared engine (same one the JobManager uses)
from kwcrawl.core.database.connection import engine as TEST_ENGINE


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures DB exists and all tables are created.
    """
    if not database_exists(TEST_ENGINE.url):
        create_database(TEST_ENGINE.url)

    # Import all models to ensure they are registered
    from kwcrawl.core.database.base import Base
    import kwcrawl.core.jobs.models

    Base.metadata.create_all(bind=TEST_ENGINE)

    yield


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test.
    Detects DB type and cleans tables appropriately.
    """
    with TEST_ENGINE.connect() as conn:
        trans = conn.begin()

        is_sqlite = "sqlite" in str(TEST_ENGINE.url)

        inspector = sqlalchemy.inspect(conn)
        table_names = inspector.get_table_names()

        for table in table_names:
            if is_sqlite:
                conn.execute(text(f'DELETE FROM "{table}";'))
            else:
                conn.execute(text(f'TRUNCATE TABLE "{table}" CASCADE;'))

        trans.commit()

    yield
