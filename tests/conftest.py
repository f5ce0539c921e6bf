"""
Shared pytest fixtures for jumphash tests.
"""

import pytest

from jumphash.logging import LoggingConfig


@pytest.fixture(autouse=True)
def reset_logging_config():
    """Restore the default logging configuration after every test."""
    yield

    config = LoggingConfig()
    config.update(log_level="info", log_output="stdout")
    for logger_name in config.disabled:
        config.enable(logger_name)


@pytest.fixture
def sample_keys() -> list[str]:
    return [f"job-{index:05d}" for index in range(10000)]
