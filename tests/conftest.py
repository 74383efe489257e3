import pytest

from adminopt.logging_config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Route structured logs to stderr at WARNING so stdout holds only user-facing output."""
    configure_logging("WARNING")
