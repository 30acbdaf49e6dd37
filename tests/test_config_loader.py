from pathlib import Path

import pytest

from ulm.config import coerce_scalar, deep_merge, load_config, load_typed_config, validate_api_config
from ulm.config_types import AppConfig


def test_defaults():
    cfg = load_config()
    assert cfg['api']['base_url'] == 'http://localhost:3000'
    assert cfg['api']['timeout'] is None
    assert cfg['users']['page_size'] == 10
    assert cfg['users']['search_debounce_ms'] == 500


def test_env_override(monkeypatch):
    monkeypatch.setenv('ULM__USERS__PAGE_SIZE', '25')
    monkeypatch.setenv('ULM__API__BASE_URL', 'https://users.example.com/')
    cfg = load_config()
    assert cfg['users']['page_size'] == 25
    assert cfg['api']['base_url'] == 'https://users.example.com/'


def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv('ULM__USERS__PAGE_SIZE', '25')
    cfg = load_config(overrides={'users': {'page_size': 5}})
    assert cfg['users']['page_size'] == 5
    assert cfg['users']['search_debounce_ms'] == 500


def test_dotenv_ignored_under_pytest(tmp_path: Path):
    env_file = tmp_path / '.env'
    env_file.write_text('ULM__USERS__PAGE_SIZE=7\n', encoding='utf-8')
    cfg = load_config(dotenv_path=env_file)
    assert cfg['users']['page_size'] == 10


def test_dotenv_loaded_when_enabled(tmp_path: Path, monkeypatch):
    monkeypatch.setenv('ULM_ENABLE_DOTENV', '1')
    env_file = tmp_path / '.env'
    env_file.write_text(
        '# local settings\n'
        'ULM__USERS__PAGE_SIZE=7  # smaller pages\n'
        'ULM__API__TOKEN="abc#123"\n'
        'OTHER=ignored\n',
        encoding='utf-8',
    )
    cfg = load_config(dotenv_path=env_file)
    assert cfg['users']['page_size'] == 7
    assert cfg['api']['token'] == 'abc#123'
    assert 'other' not in cfg


def test_real_env_beats_dotenv(tmp_path: Path, monkeypatch):
    monkeypatch.setenv('ULM_ENABLE_DOTENV', '1')
    monkeypatch.setenv('ULM__USERS__PAGE_SIZE', '3')
    env_file = tmp_path / '.env'
    env_file.write_text('ULM__USERS__PAGE_SIZE=7\n', encoding='utf-8')
    assert load_config(dotenv_path=env_file)['users']['page_size'] == 3


def test_typed_config_ignores_unknown_keys(monkeypatch):
    monkeypatch.setenv('ULM__API__UNUSED', 'x')
    cfg = load_typed_config()
    assert isinstance(cfg, AppConfig)
    assert cfg.api.max_retries == 3
    assert 'unused' not in cfg.to_dict()['api']


def test_typed_config_round_trip():
    cfg = AppConfig.from_dict({'api': {'base_url': 'http://x', 'token': 't'}, 'users': {'page_size': 20}})
    assert cfg.api.base_url == 'http://x'
    assert cfg.users.page_size == 20
    assert cfg.users.search_debounce_ms == 500
    assert AppConfig.from_dict(cfg.to_dict()) == cfg


def test_validate_api_config_normalizes():
    assert validate_api_config({'api': {'base_url': 'http://localhost:3000/'}}) == 'http://localhost:3000'


@pytest.mark.parametrize('base_url', [None, '', 'localhost:3000', 'ftp://host', 'http://'])
def test_validate_api_config_rejects(base_url):
    with pytest.raises(ValueError):
        validate_api_config({'api': {'base_url': base_url}})


def test_deep_merge_does_not_mutate():
    a = {'api': {'base_url': 'a', 'token': None}}
    merged = deep_merge(a, {'api': {'token': 't'}})
    assert merged == {'api': {'base_url': 'a', 'token': 't'}}
    assert a['api']['token'] is None


@pytest.mark.parametrize('raw,expected', [
    ('true', True),
    ('No', False),
    ('null', None),
    ('42', 42),
    ('-3', -3),
    ('1.5', 1.5),
    ('[1, 2]', [1, 2]),
    ('http://x', 'http://x'),
])
def test_coerce_scalar(raw, expected):
    assert coerce_scalar(raw) == expected
