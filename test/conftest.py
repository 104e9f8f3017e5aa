"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: settings and the
loguru sinks are built at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SECRET_KEY', 'unit_test_secret_key')
    os.environ.setdefault('STORAGE_BUCKET', 'test-bucket')
    os.environ.setdefault('STORAGE_REGION', 'us-east-1')
    os.environ.setdefault('EVENT_STATUS_STRICT', 'false')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture
def di_container() -> Generator:
    """Container with overrides undone after each test."""
    yield container
    container.unwire()
    container.reset_override()
    container.reset_singletons()
