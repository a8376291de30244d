import logging

import pytest

import main
from tests.factories import SAMPLE_GRID


def test_run_prints_report_for_configured_grid(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda: None)
    monkeypatch.setattr(main.settings, "rate_grid", dict(SAMPLE_GRID))
    monkeypatch.setattr(main.settings, "evaluation_principal", 300_000.0)

    outcome = main.run()

    output = capsys.readouterr().out
    assert len(outcome.evaluations) == 15
    assert "Minimal blended payment" in output
    assert output.count(" | ") == 30


@pytest.mark.parametrize("grid", [{5: 0}, {10: 2.9}])
def test_run_exits_on_misconfigured_grid(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    grid: dict,
) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda: None)
    monkeypatch.setattr(main.settings, "rate_grid", grid)

    with caplog.at_level(logging.ERROR, logger="tranche_optimizer.main"):
        with pytest.raises(SystemExit) as exc_info:
            main.run()

    assert exc_info.value.code == 1
    assert "Search aborted" in caplog.text
