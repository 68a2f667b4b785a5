from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("doccov", deadline=None, suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("doccov")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_doccov_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CI", "DOCCOV_RUN_ID", "DOCCOV_TEST_HARNESS", "DOCCOV_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
