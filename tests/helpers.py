"""Test helpers shared across ghanalytics tests."""


def write_export(directory, actors=(), commits=(), events=(), repos=()):
    """Write a four-file CSV export into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    files = {
        'actors.csv': ('id,username', actors),
        'commits.csv': ('sha,message,event_id', commits),
        'events.csv': ('id,type,actor_id,repo_id', events),
        'repos.csv': ('id,name', repos),
    }
    for name, (header, rows) in files.items():
        lines = [header] + [','.join(str(v) for v in row) for row in rows]
        (directory / name).write_text('\n'.join(lines) + '\n')
    return directory


class FakeStore:
    """In-memory store with call recording."""

    def __init__(self, actors=(), events=(), repos=()):
        self.actors = list(actors)
        self.events = list(events)
        self.repos = list(repos)
        self.calls = []

    def query_actors(self, predicate):
        self.calls.append('actors')
        return [a for a in self.actors if predicate(a)]

    def query_events(self, predicate):
        self.calls.append('events')
        return [e for e in self.events if predicate(e)]

    def query_repos(self, predicate):
        self.calls.append('repos')
        return [r for r in self.repos if predicate(r)]
