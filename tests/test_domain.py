"""Tests for the domain layer."""

import dataclasses

import pytest

from ghanalytics.domain import Actor, Commit, Event, EventType, Repo


class TestActor:
    """Tests for Actor domain object."""

    def test_to_dict(self):
        assert Actor(7, "octocat").to_dict() == {'id': 7, 'username': 'octocat'}

    def test_label_and_str(self):
        actor = Actor(7, "octocat")
        assert actor.label == "octocat"
        assert str(actor) == "octocat"

    def test_immutable(self):
        actor = Actor(7, "octocat")
        with pytest.raises(dataclasses.FrozenInstanceError):
            actor.username = "other"


class TestRepo:
    """Tests for Repo domain object."""

    def test_to_dict(self):
        assert Repo(1, "octo/hello").to_dict() == {'id': 1, 'name': 'octo/hello'}


class TestEvent:
    """Tests for Event domain object."""

    def test_unknown_type_is_kept(self):
        event = Event(1, "GollumEvent", actor_id=2, repo_id=3)
        assert event.type == "GollumEvent"

    def test_to_dict(self):
        event = Event(1, "WatchEvent", actor_id=2, repo_id=3)
        assert event.to_dict() == {'id': 1, 'type': 'WatchEvent', 'actor_id': 2, 'repo_id': 3}

    def test_event_type_str(self):
        assert str(EventType.PULL_REQUEST) == "PullRequestEvent"


class TestCommit:
    """Tests for Commit domain object."""

    def test_repr_shortens_sha(self):
        commit = Commit("0123456789abcdef", "msg", 5)
        assert "01234567" in repr(commit)
