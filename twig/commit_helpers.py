from datetime import datetime, timezone
from typing import Protocol
import hashlib
import random
import time
from .errors import CommitIdCollisionError, NoSuchCommitError
from .models import Commit, CommitId, Tree


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class CommitIdGenerator(Protocol):
    def new_commit_id(self, tree: Tree, parents: list[CommitId], timestamp: datetime) -> CommitId: ...


class CounterCommitIdGenerator:
    """Hands out ``commit-<unix seconds>-<n>``; the counter keeps ids unique."""

    def __init__(self) -> None:
        self.counter = 0

    def new_commit_id(self, tree: Tree, parents: list[CommitId], timestamp: datetime) -> CommitId:
        self.counter += 1
        return f"commit-{int(timestamp.timestamp())}-{self.counter}"


class RandomCommitIdGenerator:
    def new_commit_id(self, tree: Tree, parents: list[CommitId], timestamp: datetime) -> CommitId:
        return hashlib.sha256(f"{time.time_ns()}-{random.random()}".encode()).hexdigest()


class CommitGraph:
    """Append-only store of commits keyed by id.

    Commits handed out are deep copies, so nothing outside the graph can
    reach a stored tree.
    """

    def __init__(self) -> None:
        self._commits: dict[CommitId, Commit] = {}

    def add(self, commit: Commit) -> None:
        if commit.id in self._commits:
            raise CommitIdCollisionError(commit.id)
        self._commits[commit.id] = commit.model_copy(deep=True)

    def get(self, commit_id: CommitId) -> Commit:
        if commit_id not in self._commits:
            raise NoSuchCommitError(commit_id)
        return self._commits[commit_id].model_copy(deep=True)

    def tree_of(self, commit_id: CommitId | None) -> Tree:
        if commit_id is None or commit_id not in self._commits:
            return {}
        return dict(self._commits[commit_id].tree)

    def __contains__(self, commit_id: object) -> bool:
        return commit_id in self._commits

    def __len__(self) -> int:
        return len(self._commits)
