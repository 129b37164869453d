"""
Unit tests for ghanalytics.config module
"""
import unittest
import tempfile
import os
import shutil
import json
from pathlib import Path
from unittest.mock import patch

from ghanalytics.config import (
    load_config,
    get_config_path,
    get_default_config,
    get_data_files,
    merge_configs,
    apply_env_overrides,
)
from ghanalytics.exit_codes import ConfigError


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up test environment"""
        self.temp_dir = tempfile.mkdtemp()
        clean_env = {k: v for k, v in os.environ.items() if not k.startswith('GHANALYTICS_')}
        clean_env['HOME'] = self.temp_dir
        self.env_patcher = patch.dict(os.environ, clean_env, clear=True)
        self.env_patcher.start()

    def tearDown(self):
        """Clean up test environment"""
        self.env_patcher.stop()
        shutil.rmtree(self.temp_dir)

    def write_config(self, name, content):
        config_dir = Path(self.temp_dir) / '.ghanalytics'
        config_dir.mkdir(exist_ok=True)
        path = config_dir / name
        path.write_text(content)
        return path

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertIn('data', config)
        self.assertIn('ranking', config)
        self.assertIn('logging', config)
        self.assertEqual(config['ranking']['default_limit'], 10)
        self.assertEqual(config['data']['events_file'], 'events.csv')

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        config = load_config()
        self.assertEqual(config, get_default_config())

    def test_default_config_path(self):
        self.assertEqual(get_config_path(), Path(self.temp_dir) / '.ghanalytics' / 'config.json')

    def test_load_json_config(self):
        self.write_config('config.json', json.dumps({'ranking': {'default_limit': 3}}))
        config = load_config()
        self.assertEqual(config['ranking']['default_limit'], 3)
        # Untouched sections keep their defaults
        self.assertEqual(config['data']['directory'], 'data')

    def test_load_toml_config(self):
        self.write_config('config.toml', '[data]\ndirectory = "/srv/export"\n')
        config = load_config()
        self.assertEqual(config['data']['directory'], '/srv/export')
        self.assertEqual(config['data']['actors_file'], 'actors.csv')

    def test_load_yaml_config(self):
        self.write_config('config.yaml', 'logging:\n  level: DEBUG\n')
        config = load_config()
        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_broken_default_config_falls_back(self):
        self.write_config('config.json', '{not json')
        with self.assertLogs('ghanalytics', level='ERROR'):
            config = load_config()
        self.assertEqual(config, get_default_config())

    def test_explicit_config_must_exist(self):
        os.environ['GHANALYTICS_CONFIG'] = str(Path(self.temp_dir) / 'missing.json')
        with self.assertRaises(ConfigError):
            load_config()

    def test_explicit_broken_config_raises(self):
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text('[1, 2')
        os.environ['GHANALYTICS_CONFIG'] = str(path)
        with self.assertRaises(ConfigError):
            load_config()

    def test_explicit_config_path(self):
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text(json.dumps({'data': {'directory': 'elsewhere'}}))
        os.environ['GHANALYTICS_CONFIG'] = str(path)
        self.assertEqual(get_config_path(), path)
        self.assertEqual(load_config()['data']['directory'], 'elsewhere')

    def test_non_mapping_config_rejected(self):
        self.write_config('config.json', '[1, 2, 3]')
        with self.assertRaises(ConfigError):
            load_config()

    def test_env_overrides(self):
        os.environ['GHANALYTICS_RANKING_DEFAULT_LIMIT'] = '25'
        os.environ['GHANALYTICS_DATA_EVENTS_FILE'] = 'ev.csv'
        config = load_config()
        self.assertEqual(config['ranking']['default_limit'], 25)
        self.assertEqual(config['data']['events_file'], 'ev.csv')

    def test_env_override_unknown_key_ignored(self):
        os.environ['GHANALYTICS_NOPE_THING'] = 'x'
        self.assertEqual(load_config(), get_default_config())


class TestConfigHelpers(unittest.TestCase):

    def test_merge_configs_is_recursive(self):
        base = {'a': {'b': 1, 'c': 2}, 'd': 3}
        merged = merge_configs(base, {'a': {'c': 20}, 'e': 5})
        self.assertEqual(merged, {'a': {'b': 1, 'c': 20}, 'd': 3, 'e': 5})
        self.assertEqual(base['a']['c'], 2)

    def test_apply_env_overrides_booleans(self):
        config = {'logging': {'enabled': False}}
        with patch.dict(os.environ, {'GHANALYTICS_LOGGING_ENABLED': 'yes'}):
            self.assertTrue(apply_env_overrides(config)['logging']['enabled'])

    def test_get_data_files(self):
        files = get_data_files(get_default_config())
        self.assertEqual(files, {
            'actors': 'actors.csv',
            'commits': 'commits.csv',
            'events': 'events.csv',
            'repos': 'repos.csv',
        })


if __name__ == '__main__':
    unittest.main()
