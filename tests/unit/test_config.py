import pytest

from simplekv_lib.config import MissingKeyPolicy, StoreSettings, load_settings
from simplekv_lib.store import KVStore


def test_defaults_when_file_missing(tmp_path):
    s = load_settings(tmp_path / 'missing.yml')
    assert s.log_level == 'WARNING'
    assert s.intersection_missing_key is MissingKeyPolicy.FAIL


def test_load_from_yaml(tmp_path):
    p = tmp_path / 'simplekv.yml'
    p.write_text('log_level: debug\nintersection_missing_key: empty\n', encoding='utf-8')
    s = load_settings(p)
    assert s.log_level == 'DEBUG'
    assert s.intersection_missing_key is MissingKeyPolicy.EMPTY


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / 'simplekv.yml'
    p.write_text('', encoding='utf-8')
    assert load_settings(p) == StoreSettings()


def test_non_mapping_rejected(tmp_path):
    p = tmp_path / 'simplekv.yml'
    p.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ValueError, match='expected mapping'):
        load_settings(p)


def test_parse_error_rejected(tmp_path):
    p = tmp_path / 'simplekv.yml'
    p.write_text('log_level: [unclosed\n', encoding='utf-8')
    with pytest.raises(ValueError, match='parse error'):
        load_settings(p)


def test_invalid_values_rejected(tmp_path):
    p = tmp_path / 'simplekv.yml'
    p.write_text('intersection_missing_key: sometimes\n', encoding='utf-8')
    with pytest.raises(ValueError, match='invalid config format'):
        load_settings(p)
    p.write_text('log_level: chatty\n', encoding='utf-8')
    with pytest.raises(ValueError, match='invalid config format'):
        load_settings(p)


def test_store_uses_default_settings():
    assert KVStore().settings == StoreSettings()
