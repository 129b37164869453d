"""
Top-N activity rankings.

Ranks users or repositories from a GitHub event export by how many
qualifying events they have.
"""

import click
from typing import List, Optional

from ..cli_utils import standard_command, add_common_options
from ..config import load_config, configure_logging, get_data_files
from ..criteria import ALL_CRITERIA, SortCriterion
from ..exit_codes import ConfigError
from ..infra import CsvStore
from ..render import render_ranking_table
from ..services import Dimension, RankingOptions, RankingService

DEFAULT_USER_CRITERIA = (SortCriterion.COMMITS_PUSHED, SortCriterion.PR_CREATED)
DEFAULT_REPO_CRITERIA = (SortCriterion.COMMITS_PUSHED,)

TOP_LIMIT = 10


def run_ranking(
    dimension: Dimension,
    criteria,
    event_types,
    limit: Optional[int],
    data_dir: Optional[str],
    format: str,
    progress,
    verbose: bool = False,
    quiet: bool = False,
    title: Optional[str] = None,
) -> Optional[List[dict]]:
    """Load the store, rank ``dimension`` and return rows for output.

    Returns None after printing a table when ``format`` is 'table'.
    """
    config = load_config()
    configure_logging(config, verbose)

    if limit is None:
        limit = config.get('ranking', {}).get('default_limit', TOP_LIMIT)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ConfigError(
                f"ranking.default_limit must be a non-negative integer, got {limit!r}"
            )
    directory = data_dir or config.get('data', {}).get('directory', 'data')

    options = RankingOptions(criteria=tuple(criteria), event_types=tuple(event_types), limit=limit)

    progress(f"Loading events from {directory}")
    store = CsvStore.from_directory(directory, files=get_data_files(config))

    entries = RankingService(store).leaderboard(dimension, options)
    progress.success(f"Ranked {len(entries)} {dimension.value}")

    if format == 'table':
        if not quiet:
            render_ranking_table(entries, dimension, title=title)
        return None

    return [
        {'rank': position, **entry.to_dict()}
        for position, entry in enumerate(entries, start=1)
    ]


def ranking_options(default_criteria):
    """Options shared by the users and repos commands."""
    defaults = ', '.join(c.value for c in default_criteria)

    def decorator(func):
        func = add_common_options('limit', 'data_dir', 'format', 'fields', 'verbose', 'quiet')(func)
        func = click.option(
            '--event-type', 'event_types', multiple=True,
            help='Raw event type that also counts (e.g. IssuesEvent); repeatable',
        )(func)
        func = click.option(
            '--by', 'criteria', multiple=True, type=click.Choice(ALL_CRITERIA),
            help=f'Activity criterion; repeatable (default: {defaults})',
        )(func)
        return func
    return decorator


def _criteria_or_default(criteria, event_types, default_criteria):
    if criteria or event_types:
        return criteria
    return default_criteria


@click.command('users')
@ranking_options(DEFAULT_USER_CRITERIA)
@standard_command
def users_handler(criteria, event_types, limit, data_dir, format, fields, verbose, quiet, progress):
    """Rank users by activity.

    Examples:
        ghanalytics users                          # Top 10 by commits and PRs
        ghanalytics users --by prCreated --limit 5
        ghanalytics users --event-type IssuesEvent -f jsonl
    """
    return run_ranking(
        Dimension.USERS,
        _criteria_or_default(criteria, event_types, DEFAULT_USER_CRITERIA),
        event_types, limit, data_dir, format, progress, verbose, quiet,
        title="Top Users",
    )


@click.command('repos')
@ranking_options(DEFAULT_REPO_CRITERIA)
@standard_command
def repos_handler(criteria, event_types, limit, data_dir, format, fields, verbose, quiet, progress):
    """Rank repositories by activity.

    Examples:
        ghanalytics repos                          # Top 10 by commits pushed
        ghanalytics repos --by watchActivity
        ghanalytics repos --event-type ForkEvent -f csv
    """
    return run_ranking(
        Dimension.REPOS,
        _criteria_or_default(criteria, event_types, DEFAULT_REPO_CRITERIA),
        event_types, limit, data_dir, format, progress, verbose, quiet,
        title="Top Repositories",
    )


def top_ten_command(name, dimension, criteria, title, help_text):
    """Build a fixed top-10 command."""

    @click.command(name, help=help_text)
    @add_common_options('data_dir', 'format', 'fields', 'verbose', 'quiet')
    @standard_command
    def handler(data_dir, format, fields, verbose, quiet, progress):
        return run_ranking(
            dimension, criteria, (), TOP_LIMIT, data_dir, format, progress, verbose, quiet,
            title=title,
        )

    return handler


top_ten_users = top_ten_command(
    'top-ten-users', Dimension.USERS, DEFAULT_USER_CRITERIA, "Top 10 Users",
    "Top 10 active users sorted by amount of PRs created and commits pushed.",
)
top_ten_repos_by_commits = top_ten_command(
    'top10-repos-by-commits-pushed', Dimension.REPOS, (SortCriterion.COMMITS_PUSHED,),
    "Top 10 Repositories by Commits Pushed",
    "Top 10 repositories sorted by amount of commits pushed.",
)
top_ten_repos_by_watch = top_ten_command(
    'top10-repos-by-watch-events', Dimension.REPOS, (SortCriterion.WATCH_ACTIVITY,),
    "Top 10 Repositories by Watch Events",
    "Top 10 repositories sorted by amount of watch events.",
)
