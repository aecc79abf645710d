"""Tests for the read-only configuration store."""

import json

from filefinder.utils.config import ConfigStore


def write_config(directory, data):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / 'config.json').write_text(json.dumps(data), encoding='utf-8')


class TestConfigStore:
    """Tests for ConfigStore."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test defaults apply when no file exists."""
        config = ConfigStore(config_dir=tmp_path / 'absent')

        assert config.get_bool('debug_logging') is False
        assert config.get_int('history_limit', 0) == 0
        assert config.get_str('open_backend', 'auto') == 'auto'
        assert not (tmp_path / 'absent').exists()

    def test_reads_values(self, tmp_path):
        """Test typed getters read stored values."""
        write_config(tmp_path, {'debug_logging': 'yes', 'history_limit': '25', 'open_backend': 'gio'})
        config = ConfigStore(config_dir=tmp_path)

        assert config.get_bool('debug_logging') is True
        assert config.get_int('history_limit') == 25
        assert config.get_str('open_backend') == 'gio'

    def test_invalid_json_is_ignored(self, tmp_path):
        """Test a corrupt file falls back to defaults."""
        (tmp_path / 'config.json').write_text('{not json', encoding='utf-8')
        config = ConfigStore(config_dir=tmp_path)

        assert config.get('history_limit') is None

    def test_bad_int_falls_back(self, tmp_path):
        """Test non-numeric and boolean limits use the default."""
        write_config(tmp_path, {'history_limit': 'lots', 'other': True})
        config = ConfigStore(config_dir=tmp_path)

        assert config.get_int('history_limit', 7) == 7
        assert config.get_int('other', 3) == 3
