"""Tests for AppSettings and its environment overrides."""

import logging

import pytest

from quoridie.config import AppSettings


class TestAppSettings:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.white_player == "human"
        assert s.black_player == "random"
        assert s.engine_seed is None
        assert s.walls_per_player == 10
        assert s.log_level == "WARNING"

    def test_log_level_normalised(self) -> None:
        s = AppSettings(log_level="debug")
        assert s.log_level == "DEBUG"
        assert s.log_level_value == logging.DEBUG

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"white_player": "alphazero"},
            {"black_player": ""},
            {"walls_per_player": -1},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            AppSettings(**kwargs)


class TestFromEnv:
    def test_empty_environment(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_overrides(self) -> None:
        s = AppSettings.from_env(
            {
                "QUORIDIE_WHITE": "Random",
                "QUORIDIE_BLACK": "human",
                "QUORIDIE_SEED": "42",
                "QUORIDIE_WALLS": " 6 ",
                "QUORIDIE_LOG_LEVEL": "info",
            }
        )
        assert s == AppSettings(
            white_player="random",
            black_player="human",
            engine_seed=42,
            walls_per_player=6,
            log_level="INFO",
        )

    def test_blank_values_ignored(self) -> None:
        assert AppSettings.from_env({"QUORIDIE_SEED": "  ", "QUORIDIE_WHITE": ""}) == AppSettings()

    def test_bad_integer(self) -> None:
        with pytest.raises(ValueError, match="QUORIDIE_WALLS must be an integer"):
            AppSettings.from_env({"QUORIDIE_WALLS": "ten"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUORIDIE_SEED", "9")
        assert AppSettings.from_env().engine_seed == 9
