from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from hotel_rooms.config.settings import Settings


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.log_dir is None
    assert settings.max_base_cost == 1_000_000.0
    assert settings.label_warning_length == 50
    assert settings.format_cost(12.345) == "12.35"


def test_settings_read_prefixed_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOTEL_LOG_DIR", "~/hotel-logs")
    monkeypatch.setenv("HOTEL_LABEL_WARNING_LENGTH", "10")
    monkeypatch.setenv("HOTEL_COST_PRECISION", "0")

    settings = Settings()

    assert settings.log_dir == Path("~/hotel-logs").expanduser()
    assert settings.label_warning_length == 10
    assert settings.format_cost(99.6) == "100"


def test_settings_reads_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("HOTEL_MAX_BASE_COST=2500\n")

    assert Settings().max_base_cost == 2500.0


@pytest.mark.parametrize(
    "overrides",
    [{"max_base_cost": 0}, {"label_warning_length": 0}, {"cost_precision": -1}],
)
def test_settings_reject_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)
