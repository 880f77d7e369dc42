# tests/test_main.py

import json

import pytest

import main
from tests.helpers import write_guide, write_stats_file


@pytest.fixture
def stats_path(tmp_path, monkeypatch):
    monkeypatch.delenv('PVPSTATS_CHARACTER_CASE_SENSITIVE', raising=False)
    return write_stats_file(tmp_path)


def test_search_player_text(stats_path, capsys):
    assert main.main(['--data', stats_path, 'search', 'alice']) == main.EXIT_OK
    out = capsys.readouterr().out
    assert 'PLAYER: Alice' in out
    assert 'Most Played:      Knight' in out


def test_search_character_json(stats_path, capsys):
    assert main.main(['--data', stats_path, '--json', 'search', 'Archer']) == main.EXIT_OK
    body = json.loads(capsys.readouterr().out)
    assert body['kind'] == 'character'


def test_search_ignore_character_case(stats_path, capsys):
    assert main.main(['--data', stats_path, 'search', 'archer']) == main.EXIT_NOT_FOUND
    assert main.main(['--data', stats_path, '--ignore-character-case', 'search', 'archer']) == main.EXIT_OK
    assert 'CHARACTER: Archer' in capsys.readouterr().out


def test_ranking_tier_json(stats_path, capsys):
    assert main.main(['--data', stats_path, '--json', 'ranking', '--by', 'tier', '--limit', '1']) == main.EXIT_OK
    body = json.loads(capsys.readouterr().out)
    assert body['count'] == 1
    assert body['rows'][0]['nickname'] == 'Cara'


def test_ranking_text(stats_path, capsys):
    assert main.main(['--data', stats_path, 'ranking']) == main.EXIT_OK
    out = capsys.readouterr().out
    assert 'WIN RATE RANKING' in out
    assert out.index('Cara') < out.index('Bob')


def test_characters(stats_path, capsys):
    assert main.main(['--data', stats_path, '--json', 'characters']) == main.EXIT_OK
    assert json.loads(capsys.readouterr().out)['characters'] == ['Knight', 'Archer']


def test_guide(tmp_path, capsys):
    char_dir = tmp_path / 'char'
    write_guide(char_dir, 'Knight', {'name': 'Knight', 'skills': [], 'gadget': 'Smoke'})
    assert main.main(['--char-dir', str(char_dir), 'guide', 'Knight']) == main.EXIT_OK
    assert 'Smoke' in capsys.readouterr().out
    assert main.main(['--char-dir', str(char_dir), 'guide', 'Mage']) == main.EXIT_NOT_FOUND


def test_load_error(tmp_path, capsys):
    code = main.main(['--data', str(tmp_path / 'missing.json'), 'characters'])
    assert code == main.EXIT_LOAD_ERROR
    assert 'Failed to load match records' in capsys.readouterr().out
