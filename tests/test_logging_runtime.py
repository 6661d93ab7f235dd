"""Tests for logging profiles and the mixer factory."""

from __future__ import annotations

import logging

import pytest

from joydrive.core.config import Settings
from joydrive.core.logging_runtime import (
    LOG_PROFILES,
    LoggingRuntime,
    ensure_logging_config,
    log,
    mixer_log,
)
from joydrive.mixer_factory import create_mixer


@pytest.fixture(autouse=True)
def _restore_levels(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_PROFILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    saved = (log.level, mixer_log.level)
    yield
    log.setLevel(saved[0])
    mixer_log.setLevel(saved[1])


class TestProfiles:
    """Tests for named logging profiles."""

    def test_known_profiles(self) -> None:
        """All profiles are registered."""
        assert set(LOG_PROFILES) == {"DEFAULT", "MIXER_DEBUG", "QUIET"}

    def test_default_profile(self) -> None:
        """DEFAULT logs at INFO without trace."""
        runtime = ensure_logging_config(Settings(log_profile="default"))
        assert runtime == LoggingRuntime(log_level="INFO", mixer_trace=False)
        assert log.level == logging.INFO
        assert mixer_log.level == logging.INFO

    def test_mixer_debug_profile(self) -> None:
        """MIXER_DEBUG enables the per-call trace."""
        runtime = ensure_logging_config(Settings(log_profile="mixer-debug"))
        assert runtime.mixer_trace is True
        assert mixer_log.isEnabledFor(logging.DEBUG)

    def test_quiet_profile(self) -> None:
        """QUIET raises both loggers to WARNING."""
        ensure_logging_config(Settings(log_profile="QUIET"))
        assert log.level == logging.WARNING
        assert mixer_log.level == logging.WARNING

    def test_profile_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_PROFILE is read from the environment."""
        monkeypatch.setenv("LOG_PROFILE", "QUIET")
        runtime = ensure_logging_config(Settings())
        assert runtime.log_level == "WARNING"

    def test_unknown_profile(self) -> None:
        """Unknown profile names raise."""
        with pytest.raises(RuntimeError, match="Unknown LOG_PROFILE"):
            ensure_logging_config(Settings(log_profile="LOUD"))


class TestManualRuntime:
    """Tests for runtime built from individual settings."""

    def test_from_settings(self) -> None:
        """log_level from settings is applied."""
        runtime = ensure_logging_config(Settings(log_level="debug"))
        assert runtime == LoggingRuntime(log_level="DEBUG", mixer_trace=False)
        # без трассировки микшер остаётся на INFO
        assert mixer_log.level == logging.INFO

    def test_trace_enabled(self) -> None:
        """mixer_trace drops the mixer logger to DEBUG."""
        ensure_logging_config(Settings(log_level="warning", mixer_trace=True))
        assert log.level == logging.WARNING
        assert mixer_log.level == logging.DEBUG


class TestCreateMixer:
    """Tests for the mixer factory."""

    def test_builds_from_settings(self, caplog: pytest.LogCaptureFixture) -> None:
        """Factory builds the mixer and logs it."""
        caplog.set_level(logging.INFO, logger="joydrive")
        mixer = create_mixer(Settings(mixer_deadzone=0.05, mixer_magnitude_mode="euclidean"))
        assert mixer.deadzone == 0.05
        assert mixer.magnitude_mode == "euclidean"
        assert "Mixer ready" in caplog.text

    def test_default_settings(self) -> None:
        """Factory works with default settings."""
        mixer = create_mixer()
        assert mixer.mix(0.0, 1.0) == (1.0, 1.0)

    def test_pwm_limit_reaches_mixer(self) -> None:
        """pwm_limit from settings is carried by the built mixer."""
        mixer = create_mixer(Settings(pwm_limit=1000))
        assert mixer.pwm_limit == 1000
