"""
Shared pytest fixtures for endpoint definition tests.

Provides:
- isolated_settings: keeps ENDPOINTS_* variables and config files out of tests
- services: an empty ServiceCollection
- settings / dev_settings: AppSettings without touching the filesystem
- fixture call logs reset between tests
"""

import os
from pathlib import Path

import pytest

from endpoint_definitions import ServiceCollection
from endpoint_definitions.core.settings import AppSettings, load_settings
from endpoint_definitions.hosting import Environments


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no ENDPOINTS_* variables."""
    for key in list(os.environ):
        if key.startswith("ENDPOINTS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_call_logs():
    """Clear the module-level call logs of the definition fixtures."""
    from definition_fixtures import ordering, throwing_endpoints, unresolvable

    for log in (ordering.CALLS, throwing_endpoints.CALLS, unresolvable.CALLS):
        log.clear()
    yield


@pytest.fixture
def services() -> ServiceCollection:
    """Create an empty service collection."""
    return ServiceCollection()


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """Production settings rooted at the test directory."""
    return load_settings(
        start_dir=str(tmp_path),
        application_name="TestApp",
        content_root=tmp_path,
    )


@pytest.fixture
def dev_settings(settings: AppSettings) -> AppSettings:
    """Development settings rooted at the test directory."""
    return settings.model_copy(update={"environment": Environments.DEVELOPMENT})
