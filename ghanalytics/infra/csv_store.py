"""
CSV entity store for ghanalytics.

Loads a GitHub event export made of four CSV files:

    actors.csv   id,username
    commits.csv  sha,message,event_id
    events.csv   id,type,actor_id,repo_id
    repos.csv    id,name

Each file starts with a header row. Records are deduplicated by identity
(first occurrence wins) and kept in load order. The store is read-only
once loaded, so it can be queried from several threads.
"""

import csv
from pathlib import Path
from typing import Callable, Dict, Hashable, List, Optional, Protocol, TextIO, TypeVar, Union
import logging

from ..domain import Actor, Commit, Event, Repo
from ..exit_codes import StoreLoadError, StoreQueryError

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_FILES = {
    'actors': 'actors.csv',
    'commits': 'commits.csv',
    'events': 'events.csv',
    'repos': 'repos.csv',
}


class EntityStore(Protocol):
    """
    Query interface the ranking services depend on.

    Each query returns every stored record satisfying the predicate, in
    store order. Failures are raised as exceptions and are not retried.
    """

    def query_actors(self, predicate: Callable[[Actor], bool]) -> List[Actor]: ...

    def query_events(self, predicate: Callable[[Event], bool]) -> List[Event]: ...

    def query_repos(self, predicate: Callable[[Repo], bool]) -> List[Repo]: ...


class CsvStore:
    """
    In-memory entity store built from CSV files.

    Example:
        store = CsvStore.from_directory("data")
        pushes = store.query_events(lambda e: e.type == "PushEvent")
    """

    def __init__(
        self,
        actors: List[Actor],
        commits: List[Commit],
        events: List[Event],
        repos: List[Repo],
    ):
        self._actors = _dedupe(actors, lambda a: a.id)
        self._commits = _dedupe(commits, lambda c: c.sha)
        self._events = _dedupe(events, lambda e: e.id)
        self._repos = _dedupe(repos, lambda r: r.id)

    @classmethod
    def from_readers(
        cls,
        actors: TextIO,
        commits: TextIO,
        events: TextIO,
        repos: TextIO,
    ) -> 'CsvStore':
        """
        Load a store from open text streams.

        Raises:
            StoreLoadError: If a row is malformed
        """
        return cls(
            actors=_load(actors, 2, _parse_actor),
            commits=_load(commits, 3, _parse_commit),
            events=_load(events, 4, _parse_event),
            repos=_load(repos, 2, _parse_repo),
        )

    @classmethod
    def from_directory(
        cls,
        directory: Union[str, Path],
        files: Optional[Dict[str, str]] = None,
    ) -> 'CsvStore':
        """
        Load a store from the CSV files in a directory.

        Args:
            directory: Directory holding the export
            files: Overrides for the file names in DEFAULT_FILES

        Raises:
            StoreLoadError: If a file is missing or malformed
        """
        directory = Path(directory).expanduser()
        names = {**DEFAULT_FILES, **(files or {})}

        loaded = {}
        for kind, (width, parse) in _LAYOUTS.items():
            path = directory / names[kind]
            try:
                with open(path, newline='', encoding='utf-8') as f:
                    loaded[kind] = _load(f, width, parse, source=str(path))
            except OSError as e:
                raise StoreLoadError(e.strerror or str(e), path=str(path)) from e

        store = cls(**loaded)
        logger.debug(
            f"Loaded {len(store._events)} events, {len(store._actors)} actors, "
            f"{len(store._repos)} repos, {len(store._commits)} commits from {directory}"
        )
        return store

    def query_actors(self, predicate: Callable[[Actor], bool]) -> List[Actor]:
        return _scan(self._actors, predicate, 'actors')

    def query_commits(self, predicate: Callable[[Commit], bool]) -> List[Commit]:
        return _scan(self._commits, predicate, 'commits')

    def query_events(self, predicate: Callable[[Event], bool]) -> List[Event]:
        return _scan(self._events, predicate, 'events')

    def query_repos(self, predicate: Callable[[Repo], bool]) -> List[Repo]:
        return _scan(self._repos, predicate, 'repos')

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return (
            f"CsvStore(actors={len(self._actors)}, commits={len(self._commits)}, "
            f"events={len(self._events)}, repos={len(self._repos)})"
        )


def _scan(records: List[T], predicate: Callable[[T], bool], kind: str) -> List[T]:
    try:
        return [r for r in records if predicate(r)]
    except Exception as e:
        raise StoreQueryError(f"Query on {kind} failed: {e}") from e


def _dedupe(records: List[T], key_of: Callable[[T], Hashable]) -> List[T]:
    seen = set()
    unique = []
    for record in records:
        key = key_of(record)
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    if len(unique) != len(records):
        logger.debug(f"Dropped {len(records) - len(unique)} duplicate records")
    return unique


def _load(
    stream: TextIO,
    width: int,
    parse: Callable[[List[str]], T],
    source: Optional[str] = None,
) -> List[T]:
    """Parse rows after the header, requiring at least ``width`` columns."""
    reader = csv.reader(stream)
    records: List[T] = []

    try:
        # skip header
        if next(reader, None) is None:
            return records

        for row in reader:
            if not row:
                continue
            if len(row) < width:
                raise StoreLoadError(
                    f"expected {width} columns, got {len(row)}",
                    path=source, line=reader.line_num,
                )
            try:
                records.append(parse(row))
            except ValueError as e:
                raise StoreLoadError(str(e), path=source, line=reader.line_num) from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise StoreLoadError(str(e), path=source, line=reader.line_num) from e

    return records


def _parse_id(value: str) -> int:
    value = value.strip()
    if not value.isdigit():
        raise ValueError(f"invalid id: {value!r}")
    return int(value)


def _parse_actor(row: List[str]) -> Actor:
    return Actor(id=_parse_id(row[0]), username=row[1])


def _parse_commit(row: List[str]) -> Commit:
    return Commit(sha=row[0], message=row[1], event_id=_parse_id(row[2]))


def _parse_event(row: List[str]) -> Event:
    return Event(
        id=_parse_id(row[0]),
        type=row[1],
        actor_id=_parse_id(row[2]),
        repo_id=_parse_id(row[3]),
    )


def _parse_repo(row: List[str]) -> Repo:
    return Repo(id=_parse_id(row[0]), name=row[1])


_LAYOUTS = {
    'actors': (2, _parse_actor),
    'commits': (3, _parse_commit),
    'events': (4, _parse_event),
    'repos': (2, _parse_repo),
}
