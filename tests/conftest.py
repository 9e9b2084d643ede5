# Shared pytest fixtures for twig tests

import pytest
import os
import sys
from datetime import datetime, timedelta, timezone

# Make the repository root importable without an install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from twig.commit_helpers import CounterCommitIdGenerator
from twig.engine import InMemoryEngine
from twig.repo import Repo


class TickingClock:
    # Deterministic clock: starts at a fixed instant, one second per reading
    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def now(self):
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


class RecordingIdGenerator(CounterCommitIdGenerator):
    # Counter ids, remembering the arguments of every request
    def __init__(self):
        super().__init__()
        self.calls = []

    def new_commit_id(self, tree, parents, timestamp):
        self.calls.append((tree, parents, timestamp))
        return super().new_commit_id(tree, parents, timestamp)


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def id_generator():
    return RecordingIdGenerator()


@pytest.fixture
def repo():
    return Repo()


@pytest.fixture
def engine(repo, id_generator, clock):
    # Fresh repository on branch main with no commits
    return InMemoryEngine(repo, id_generator, clock)


@pytest.fixture
def engine_with_commit(engine):
    # One commit on main holding a.txt="1"
    engine.add_file_to_working_directory("a.txt", "1")
    engine.add("a.txt")
    commit_id = engine.commit("c1")
    return engine, commit_id


@pytest.fixture
def engine_with_branches(engine_with_commit):
    # main at c1, feat at c2 (c1 plus b.txt="2"), HEAD back on main
    engine, first_commit = engine_with_commit
    engine.create_branch("feat")
    engine.checkout_branch("feat")
    engine.add_file_to_working_directory("b.txt", "2")
    engine.add("b.txt")
    second_commit = engine.commit("c2")
    engine.checkout_branch("main")
    return engine, first_commit, second_commit


@pytest.fixture
def status_by_path():
    # Status files keyed by path, so tests never depend on list order
    def collect(engine):
        return {f.path: f for f in engine.status().files}
    return collect
