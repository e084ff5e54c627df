"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable

import pytest
import respx

from gridui.core import get_settings
from gridui.clients import ScriptedHost
from gridui.dialogs import Dialog
from gridui.models import GridDescription, UIResults


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["GRIDUI_HOST_URL"] = "http://host.test"
    os.environ["GRIDUI_LOG_LEVEL"] = "DEBUG"
    os.environ["GRIDUI_ALLOW_OVERLAPPING_WIDGETS"] = "false"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def host():
    """Scripted host without queued answers."""
    return ScriptedHost()


@pytest.fixture
def dialog(host):
    """Empty dialog bound to the scripted host."""
    return Dialog(host, title="Test Dialog")


# ============================================================================
# Result Fixtures
# ============================================================================

@pytest.fixture
def answer() -> Callable[..., UIResults]:
    """Build a result payload from widget objects instead of raw keys."""

    def _answer(
        values=None, checked_items=None, expanded_items=None, trigger=None, back=False, forward=False
    ) -> UIResults:
        return UIResults(
            values={w.dest_var: v for w, v in (values or {}).items()},
            checked_items={w.dest_var: list(v) for w, v in (checked_items or {}).items()},
            expanded_items={w.dest_var: list(v) for w, v in (expanded_items or {}).items()},
            trigger=trigger.dest_var if trigger is not None else None,
            back=back,
            forward=forward,
        )

    return _answer


@pytest.fixture
def empty_description():
    """Static description without blocks."""
    return GridDescription(title="Empty", require_response=False)


# ============================================================================
# HTTP/Network Fixtures
# ============================================================================

@pytest.fixture
def mock_host_api():
    """Mock the HTTP rendering host."""
    with respx.mock(base_url="http://host.test", assert_all_called=False) as mock:
        yield mock


# ============================================================================
# Cleanup Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Settings are cached per process; start every test from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
