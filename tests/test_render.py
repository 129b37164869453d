"""Tests for ranking table rendering."""

from rich.console import Console

from ghanalytics.domain import Actor, Repo
from ghanalytics.render import render_ranking_table
from ghanalytics.services import Dimension, RankedEntry


def render(entries, dimension, title=None):
    console = Console(record=True, width=100, color_system=None)
    render_ranking_table(entries, dimension, title=title, target=console)
    return console.export_text()


class TestRenderRankingTable:

    def test_user_columns(self):
        text = render([RankedEntry(Actor(1, "alice"), 4), RankedEntry(Actor(2, "bob"), 1)],
                      Dimension.USERS, title="Top Users")
        assert "Top Users" in text
        assert "Rank" in text
        assert "Username" in text
        assert "alice" in text and "bob" in text
        assert text.index("alice") < text.index("bob")

    def test_repo_columns(self):
        text = render([RankedEntry(Repo(9, "octo/hello"), 2)], Dimension.REPOS)
        assert "Name" in text
        assert "Repository" not in text
        assert "octo/hello" in text

    def test_empty(self):
        assert "No users found." in render([], Dimension.USERS)
