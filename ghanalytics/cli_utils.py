"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import sys
import click
from functools import wraps
from .progress import get_progress
from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)
from .format_utils import ALL_FORMATS, format_output, get_format_from_env


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Status messages on stderr
    - Structured output on stdout
    - Automatic --quiet/-q handling to suppress data output
    - Consistent error handling and exit codes

    The wrapped command receives a ``progress`` reporter and returns
    either a list of dicts (formatted per --format) or None when it
    handled output itself.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        verbose = kwargs.get('verbose', False)
        quiet = kwargs.get('quiet', False)
        output_format = kwargs.get('format') or get_format_from_env()
        fields_str = kwargs.get('fields')
        fields = fields_str.split(',') if fields_str else None

        kwargs['format'] = output_format
        progress = get_progress(enabled=verbose or None)
        kwargs['progress'] = progress

        try:
            result = func(*args, **kwargs)

            if quiet or result is None:
                pass
            else:
                for line in format_output(result, output_format, fields):
                    click.echo(line)

            sys.exit(SUCCESS)

        except KeyboardInterrupt:
            progress.error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            progress.error(str(e))
            if not quiet:
                click.echo(json.dumps({
                    "error": str(e),
                    "type": type(e).__name__,
                    "exit_code": e.exit_code
                }, ensure_ascii=False))
            sys.exit(e.exit_code)
        except Exception as e:
            progress.error(f"Command failed: {e}")
            if not quiet:
                click.echo(json.dumps({
                    "error": str(e),
                    "type": type(e).__name__
                }, ensure_ascii=False))
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


# Standard options that many commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Show progress and debug logging on stderr'),
    'quiet': click.option('-q', '--quiet', is_flag=True,
                          help='Suppress data output'),
    'limit': click.option('--limit', type=click.IntRange(min=0),
                          help='Maximum number of results (default from config)'),
    'data_dir': click.option('--data-dir', type=click.Path(file_okay=False),
                             help='Directory holding the CSV export (default from config)'),
    'format': click.option('-f', '--format',
                           type=click.Choice(ALL_FORMATS),
                           help='Output format (default: table, or from GHANALYTICS_FORMAT env)'),
    'fields': click.option('--fields',
                           help='Comma-separated list of fields to include (for CSV/TSV)'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'limit')
        def my_command(verbose, limit):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
