"""
Test Configuration and Fixtures

This module provides:
- Early environment setup (in-memory SQLite default, test log directory)
- A fresh DI container per test on its own SQLite file, so concurrent
  transactions use separate connections and real database locking

Architecture:
- Unit tests (test/**/unit/): AsyncMock or in-memory stores, no database
- Integration tests (test/**/integration/): real SQLAlchemy stack on aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
    os.environ.setdefault('SERVICE_NAME', 'flight_booking_test')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402

from flight_booking.platform.config.di import Container  # noqa: E402
from flight_booking.platform.database.orm_db_setting import create_db_and_tables  # noqa: E402


@pytest.fixture
async def container(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> AsyncGenerator[Container, None]:
    """Container with an opened, empty file database; disposed after the test"""
    monkeypatch.setenv('DATABASE_URL', f'sqlite+aiosqlite:///{tmp_path / "flights.db"}')
    test_container = Container()
    database = test_container.database()
    database.open()
    await create_db_and_tables(database)

    yield test_container

    await database.close()
    test_container.reset_singletons()
