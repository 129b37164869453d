"""Tests for output formatting."""

import json

import pytest
import yaml

from ghanalytics.format_utils import format_output, get_format_from_env

ROWS = [
    {'rank': 1, 'id': 1, 'username': 'alice', 'events': 3},
    {'rank': 2, 'id': 2, 'username': 'bob', 'events': 1},
]


class TestFormatOutput:

    def test_jsonl(self):
        lines = list(format_output(ROWS, 'jsonl'))
        assert [json.loads(line) for line in lines] == ROWS

    def test_json(self):
        (text,) = format_output(ROWS, 'json')
        assert json.loads(text) == ROWS

    def test_yaml(self):
        (text,) = format_output(ROWS, 'yaml')
        assert yaml.safe_load(text) == ROWS

    def test_csv_keeps_key_order(self):
        (text,) = format_output(ROWS, 'csv')
        assert text.splitlines() == ['rank,id,username,events', '1,1,alice,3', '2,2,bob,1']

    def test_tsv_with_fields(self):
        (text,) = format_output(ROWS, 'tsv', fields=['username', 'events'])
        assert text.splitlines() == ['username\tevents', 'alice\t3', 'bob\t1']

    def test_csv_empty(self):
        assert list(format_output([], 'csv')) == []

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown format"):
            list(format_output(ROWS, 'xml'))


class TestFormatFromEnv:

    def test_default(self, monkeypatch):
        monkeypatch.delenv('GHANALYTICS_FORMAT', raising=False)
        assert get_format_from_env() == 'table'

    def test_env_value(self, monkeypatch):
        monkeypatch.setenv('GHANALYTICS_FORMAT', 'JSONL')
        assert get_format_from_env() == 'jsonl'

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv('GHANALYTICS_FORMAT', 'xml')
        assert get_format_from_env('csv') == 'csv'
