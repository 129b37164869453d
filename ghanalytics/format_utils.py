"""
Output format utilities for ghanalytics CLI commands.

Provides functions to format data as CSV, TSV, YAML, JSON, and JSONL.
"""

import json
import csv
import io
import os
from typing import Dict, List, Any, Iterable, Iterator, Optional
import yaml

STRUCTURED_FORMATS = ('jsonl', 'json', 'csv', 'tsv', 'yaml')
ALL_FORMATS = ('table',) + STRUCTURED_FORMATS


def format_output(data: Iterable[Dict[str, Any]], format: str,
                  fields: Optional[List[str]] = None) -> Iterator[str]:
    """
    Format data according to the specified format.

    Args:
        data: Iterable of dictionaries to format
        format: Output format (json, jsonl, csv, tsv, yaml)
        fields: Optional list of fields to include (for CSV/TSV)

    Yields:
        Formatted strings for output
    """
    if format == "jsonl":
        yield from format_jsonl(data)
    elif format == "json":
        yield from format_json(data)
    elif format == "csv":
        yield from format_delimited(data, fields, ',')
    elif format == "tsv":
        yield from format_delimited(data, fields, '\t')
    elif format == "yaml":
        yield from format_yaml(data)
    else:
        raise ValueError(f"Unknown format: {format}")


def format_jsonl(data: Iterable[Dict[str, Any]]) -> Iterator[str]:
    """Format data as JSON Lines (one JSON object per line)."""
    for item in data:
        yield json.dumps(item, ensure_ascii=False)


def format_json(data: Iterable[Dict[str, Any]]) -> Iterator[str]:
    """Format data as a single JSON array."""
    yield json.dumps(list(data), ensure_ascii=False, indent=2)


def format_yaml(data: Iterable[Dict[str, Any]]) -> Iterator[str]:
    """Format data as YAML."""
    yield yaml.dump(list(data), default_flow_style=False, allow_unicode=True, sort_keys=False)


def format_delimited(data: Iterable[Dict[str, Any]], fields: Optional[List[str]] = None,
                     delimiter: str = ',') -> Iterator[str]:
    """
    Format data as CSV or TSV with a header row.

    Args:
        data: Iterable of dictionaries
        fields: Fields to include. If None, uses the keys of the items in
            first-seen order.
        delimiter: Column separator
    """
    data_list = list(data)
    if not data_list:
        return

    if fields is None:
        fields = []
        for item in data_list:
            for key in item:
                if key not in fields:
                    fields.append(key)

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=fields, delimiter=delimiter,
                            extrasaction='ignore', lineterminator='\n')
    writer.writeheader()
    for item in data_list:
        writer.writerow(item)

    yield output.getvalue().rstrip('\n')


def get_format_from_env(default: str = 'table') -> str:
    """
    Get output format from environment variable.

    Checks GHANALYTICS_FORMAT environment variable.

    Args:
        default: Default format if not specified

    Returns:
        Format string
    """
    format = os.environ.get('GHANALYTICS_FORMAT', default).lower()
    if format not in ALL_FORMATS:
        return default
    return format
