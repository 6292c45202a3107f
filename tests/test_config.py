import dataclasses

import pytest

from figtimer import config
from figtimer.config import Style, TimerConfig, parse_color


def test_defaults():
    cfg = TimerConfig()
    assert cfg.blink_rate_ms == 500
    assert cfg.blink_rate == 0.5
    assert cfg.caption == ""
    assert not cfg.allow_negative
    assert cfg.style == Style()


def test_config_is_immutable():
    cfg = TimerConfig(initial_seconds=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.initial_seconds = 5


@pytest.mark.parametrize("text", ["red", "RED", " cyan "])
def test_parse_basic_color(text):
    assert parse_color(text).color == text.strip().lower()


def test_parse_hex_color():
    assert parse_color("#FF8000") == Style(rgb=(255, 128, 0))


@pytest.mark.parametrize("text", ["orange", "#12345", "#GGGGGG", ""])
def test_parse_color_rejects(text):
    with pytest.raises(ValueError):
        parse_color(text)


def test_log_path_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config.platform, "system", lambda: "Linux")
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
    assert config.get_log_path() == tmp_path / "figtimer" / "figtimer.log"


def test_debug_flag(monkeypatch):
    monkeypatch.setenv("FIGTIMER_DEBUG", "1")
    assert config.debug_enabled()
    monkeypatch.setenv("FIGTIMER_DEBUG", "0")
    assert not config.debug_enabled()
