# tests/test_config.py

import logging

from pvpstats.config import PROJECT_ROOT, is_url, load_settings, parse_bool


def test_defaults(monkeypatch):
    for name in ('PVPSTATS_STATS_PATH', 'PVPSTATS_CHAR_DIR',
                 'PVPSTATS_CHARACTER_CASE_SENSITIVE', 'PVPSTATS_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.stats_source == str(PROJECT_ROOT / 'data' / 'stats.json')
    assert settings.char_dir == PROJECT_ROOT / 'data' / 'char'
    assert settings.character_case_sensitive is True
    assert settings.log_level == 'INFO'


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv('PVPSTATS_STATS_PATH', 'https://example.com/stats.json')
    monkeypatch.setenv('PVPSTATS_CHAR_DIR', str(tmp_path))
    monkeypatch.setenv('PVPSTATS_CHARACTER_CASE_SENSITIVE', 'off')
    monkeypatch.setenv('PVPSTATS_LOG_LEVEL', 'debug')

    settings = load_settings()

    assert settings.stats_source == 'https://example.com/stats.json'
    assert settings.char_dir == tmp_path
    assert settings.character_case_sensitive is False
    assert settings.log_level == 'DEBUG'


def test_parse_bool(caplog):
    assert parse_bool('YES', default=False) is True
    assert parse_bool('0', default=True) is False
    assert parse_bool(None, default=True) is True
    assert parse_bool('  ', default=False) is False
    with caplog.at_level(logging.WARNING):
        assert parse_bool('maybe', default=True, name='FLAG') is True
    assert 'FLAG' in caplog.text


def test_is_url():
    assert is_url('http://host/stats.json')
    assert is_url('HTTPS://host/stats.json')
    assert not is_url('data/stats.json')
    assert not is_url('')
