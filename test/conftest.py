"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup (must happen before application imports)
- Chart dimension constants shared by unit and integration tests
- DI container reset between tests

Architecture:
- Unit tests (test/**/unit/): build domain objects directly
- Integration tests (test/**/integration/): go through the DI container or the CLI
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import cleanup, container  # noqa: E402
from src.service.seating.domain.seat_chart import SeatChart  # noqa: E402
from test.test_constants import (  # noqa: E402
    MAX_SEAT_REQUEST,
    SEATING_COLS,
    SEATING_ROWS,
)


@pytest.fixture
def seat_chart() -> SeatChart:
    return SeatChart(SEATING_ROWS, SEATING_COLS, MAX_SEAT_REQUEST)


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    yield
    container.config_service.reset_override()
    cleanup()
