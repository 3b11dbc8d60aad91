"""
Shared pytest fixtures: fixed host contexts so conversions do not depend on
the machine's clock or timezone.
"""
from datetime import datetime, timezone

import pytest

from app.timezones import HostContext

WINTER_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
SUMMER_NOW = datetime(2026, 7, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def winter_host():
    """Mid-January, local zone UTC, 12h clock."""
    return HostContext(local_zone="UTC", hour12=True, clock=lambda: WINTER_NOW)


@pytest.fixture
def summer_host():
    return HostContext(local_zone="UTC", hour12=True, clock=lambda: SUMMER_NOW)


@pytest.fixture
def berlin_host():
    """Caller in Berlin preferring a 24h clock."""
    return HostContext(local_zone="Europe/Berlin", hour12=False, clock=lambda: WINTER_NOW)
