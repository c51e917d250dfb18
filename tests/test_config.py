import pytest

from mankai import config


def test_defaults(monkeypatch):
    for var in ("MANKAI_PROMPT", "MANKAI_LOG_LEVEL", "MANKAI_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "mankai> "
    assert config.get_log_level() == "WARNING"
    assert config.get_recursion_limit() is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("MANKAI_PROMPT", "> ")
    monkeypatch.setenv("MANKAI_LOG_LEVEL", "debug")
    monkeypatch.setenv("MANKAI_RECURSION_LIMIT", "4000")
    assert config.get_prompt() == "> "
    assert config.get_log_level() == "DEBUG"
    assert config.get_recursion_limit() == 4000


def test_bad_recursion_limit(monkeypatch):
    monkeypatch.setenv("MANKAI_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError, match="MANKAI_RECURSION_LIMIT"):
        config.get_recursion_limit()
