"""Shared fixtures for ghanalytics tests."""

import pytest

from ghanalytics.domain import Actor, Event, Repo

from tests.helpers import FakeStore, write_export


@pytest.fixture
def scenario_store():
    """Three actors; actor 1 pushes twice, actor 2 once, actor 3 opens a PR."""
    return FakeStore(
        actors=[Actor(1, "a"), Actor(2, "b"), Actor(3, "c")],
        events=[
            Event(1, "PushEvent", actor_id=1, repo_id=10),
            Event(2, "PushEvent", actor_id=1, repo_id=10),
            Event(3, "PushEvent", actor_id=2, repo_id=10),
            Event(4, "PullRequestEvent", actor_id=3, repo_id=10),
        ],
        repos=[Repo(10, "octo/hello")],
    )


@pytest.fixture
def export_dir(tmp_path):
    """A small export on disk, including duplicate rows."""
    return write_export(
        tmp_path / 'data',
        actors=[(1, 'alice'), (2, 'bob'), (3, 'carol'), (1, 'alice-dup')],
        commits=[('abc123', 'init', 100), ('def456', 'fix', 101), ('abc123', 'dup', 100)],
        events=[
            (100, 'PushEvent', 1, 10),
            (101, 'PushEvent', 2, 20),
            (102, 'PushEvent', 1, 20),
            (103, 'PullRequestEvent', 3, 20),
            (104, 'WatchEvent', 2, 10),
            (105, 'WatchEvent', 3, 10),
            (106, 'IssuesEvent', 3, 30),
            (100, 'PushEvent', 1, 10),
        ],
        repos=[(10, 'octo/hello'), (20, 'octo/world'), (30, 'octo/issues')],
    )
