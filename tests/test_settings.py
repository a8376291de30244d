import logging
from typing import Iterator

import pytest

from tranche_optimizer.config import Settings, get_settings
from tranche_optimizer.configuration.rate_grid import (
    DEFAULT_EVALUATION_PRINCIPAL,
    DEFAULT_RATE_GRID,
)
from tranche_optimizer.exceptions import ConfigurationError
from tranche_optimizer.utils import get_logger


@pytest.fixture
def _fresh_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RATE_GRID", raising=False)
    monkeypatch.delenv("EVALUATION_PRINCIPAL", raising=False)

    current = Settings()

    assert current.evaluation_principal == DEFAULT_EVALUATION_PRINCIPAL
    assert current.rate_grid == dict(DEFAULT_RATE_GRID)


def test_settings_read_rate_grid_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("RATE_GRID", '{"5": 2.0, "10": 3.1}')
    monkeypatch.setenv("EVALUATION_PRINCIPAL", "450000")

    current = Settings()

    assert current.rate_grid == {5: 2.0, 10: 3.1}
    assert current.evaluation_principal == 450_000.0


@pytest.mark.usefixtures("_fresh_settings_cache")
def test_invalid_principal_raises_configuration_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("EVALUATION_PRINCIPAL", "-1")

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()

    assert exc_info.value.details["errors"]


def test_get_logger_namespaces_under_package() -> None:
    assert get_logger("reports").name == "tranche_optimizer.reports"
    assert get_logger("tranche_optimizer.services").name == "tranche_optimizer.services"
    assert isinstance(get_logger("x"), logging.Logger)
