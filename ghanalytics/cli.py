#!/usr/bin/env python3

import click

from ghanalytics.commands.config import config_cmd
from ghanalytics.commands.top import (
    users_handler,
    repos_handler,
    top_ten_users,
    top_ten_repos_by_commits,
    top_ten_repos_by_watch,
)


@click.group()
@click.version_option(package_name='ghanalytics')
def cli():
    """ghanalytics - Rank GitHub users and repositories by event activity.

    Reads a GitHub event export (actors.csv, commits.csv, events.csv,
    repos.csv) and lists the most active users or repositories.
    """
    pass


# Rankings
cli.add_command(users_handler, name='users')
cli.add_command(repos_handler, name='repos')

# Fixed top-10 reports
cli.add_command(top_ten_users)
cli.add_command(top_ten_repos_by_commits)
cli.add_command(top_ten_repos_by_watch)

cli.add_command(config_cmd)


def main():
    cli()


if __name__ == "__main__":
    main()
