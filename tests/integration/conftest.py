import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest
from psycopg.rows import dict_row

from welfare.config.settings import Settings
from welfare.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "sql" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "welfare_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
    except Exception as e:
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to a database where sql/schema.sql can be applied"
        )
    try:
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text())
            conn.commit()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[tuple[str, str]], None, None]:
    cleanup: list[tuple[str, str]] = []
    yield cleanup
    if not cleanup:
        return
    # Children first so foreign keys never block a delete.
    order = ("grievances", "applications", "schemes", "profiles")
    with get_connection() as conn:
        with conn.cursor() as cur:
            for table in order:
                for cleanup_table, row_id in cleanup:
                    if cleanup_table != table:
                        continue
                    if table in ("applications", "grievances"):
                        cur.execute(f"DELETE FROM {table} WHERE user_id = %s", (row_id,))
                    else:
                        cur.execute(f"DELETE FROM {table} WHERE id = %s", (row_id,))
        conn.commit()


@pytest.fixture
def seed_profile(
    db_conn: psycopg.Connection[Any],
    integration_cleanup: list[tuple[str, str]],
) -> str:
    user_id = f"test-user-{uuid.uuid4().hex[:8]}"
    with db_conn.cursor() as cur:
        cur.execute(
            "INSERT INTO profiles (id, name, state) VALUES (%s, %s, %s)",
            (user_id, "Test Citizen", "Bihar"),
        )
    db_conn.commit()
    integration_cleanup.append(("applications", user_id))
    integration_cleanup.append(("grievances", user_id))
    integration_cleanup.append(("profiles", user_id))
    return user_id


@pytest.fixture
def seed_scheme(
    db_conn: psycopg.Connection[Any],
    integration_cleanup: list[tuple[str, str]],
) -> dict[str, Any]:
    with db_conn.cursor(row_factory=dict_row) as cur:
        cur.execute(
            """
            INSERT INTO schemes
            (title, description, eligibility_criteria, benefits, ministry, category,
             required_documents, region_specific, regions, expiry_date)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING *
            """,
            (
                f"Test Housing Scheme {uuid.uuid4().hex[:6]}",
                "Assistance for rural housing",
                "Rural households below the income limit",
                "Rs 1.2 lakh grant",
                "Rural Development",
                "Housing",
                ["ID Proof", "Income Certificate"],
                True,
                ["Bihar", "Odisha"],
                "2030-12-31",
            ),
        )
        row = cur.fetchone()
        assert row is not None
    db_conn.commit()
    integration_cleanup.append(("schemes", str(row["id"])))
    return row
