"""Tests for configuration loading."""

import unittest
import tempfile
import os
from pathlib import Path

import pytest
import yaml

from gentzen.utils.config import Config, DEFAULTS, get_config


class TestConfig(unittest.TestCase):
    """Test configuration loading."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "config.yaml"
        self.config_data = {
            'search': {
                'order': ['LBot', 'Axiom', 'LAnd'],
            },
            'render': {
                'format': 'text',
            },
            'logging': {
                'level': '${TEST_GENTZEN_LEVEL:INFO}',
            },
        }
        with open(self.config_path, 'w') as f:
            yaml.dump(self.config_data, f)

    def tearDown(self):
        import shutil
        shutil.rmtree(self.temp_dir)
        os.environ.pop('TEST_GENTZEN_LEVEL', None)

    def test_load_config(self):
        config = Config(str(self.config_path))
        self.assertEqual(config.get('search.order'), ['LBot', 'Axiom', 'LAnd'])
        self.assertEqual(config['render.format'], 'text')

    def test_environment_default(self):
        config = Config(str(self.config_path))
        self.assertEqual(config.get('logging.level'), 'INFO')

    def test_environment_variable(self):
        os.environ['TEST_GENTZEN_LEVEL'] = 'DEBUG'
        config = Config(str(self.config_path))
        self.assertEqual(config.get('logging.level'), 'DEBUG')

    def test_missing_key(self):
        config = Config(str(self.config_path))
        self.assertIsNone(config.get('search.timeout'))
        self.assertEqual(config.get('search.order.first', 'x'), 'x')

    def test_partial_file_keeps_defaults(self):
        with open(self.config_path, 'w') as f:
            yaml.dump({'render': {'format': 'text'}}, f)
        config = Config(str(self.config_path))
        self.assertIsNone(config.get('search.order'))
        self.assertEqual(config.get('render.format'), 'text')
        self.assertEqual(DEFAULTS['render']['format'], 'latex')

    def test_empty_file(self):
        self.config_path.write_text("")
        config = Config(str(self.config_path))
        self.assertEqual(config.get('render.format'), 'latex')

    def test_not_a_mapping(self):
        self.config_path.write_text("- LBot\n- Axiom\n")
        with self.assertRaises(ValueError):
            Config(str(self.config_path))

    def test_update(self):
        config = Config(str(self.config_path))
        config.update({'render': {'standalone': True}})
        self.assertEqual(config.get('render.format'), 'text')
        self.assertTrue(config.get('render.standalone'))


class TestConfigDiscovery:
    """Test the default file lookup."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("GENTZEN_LOG_LEVEL", raising=False)
        config = Config()
        assert config.config_path is None
        assert config.get('render.format') == 'latex'
        assert config.get('logging.level') == 'WARNING'

    def test_project_file(self, tmp_path, monkeypatch):
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "gentzen.yaml").write_text("render:\n  format: text\n")
        monkeypatch.chdir(tmp_path)
        config = Config()
        assert config.get('render.format') == 'text'

    def test_get_config_replaced_by_path(self, tmp_path):
        path = tmp_path / "other.yaml"
        path.write_text("render:\n  format: text\n")
        config = get_config(str(path))
        assert get_config() is config
        assert config.get('render.format') == 'text'


if __name__ == '__main__':
    unittest.main()
