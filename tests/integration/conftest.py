import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest
from psycopg import sql

from career_analysis.config.settings import Settings
from career_analysis.database.connection import close_pool, get_connection, init_pool
from career_analysis.database.repositories.analysis_repository import AnalysisRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "career_analysis_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        AnalysisRepository().ensure_tables()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[tuple[str, int]], None, None]:
    cleanup: list[tuple[str, int]] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for table, row_id in cleanup:
                cur.execute(
                    sql.SQL("DELETE FROM {table} WHERE id = %s").format(
                        table=sql.Identifier(table)
                    ),
                    (row_id,),
                )
        conn.commit()
