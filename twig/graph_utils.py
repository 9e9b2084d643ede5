from collections.abc import Iterator
from .commit_helpers import CommitGraph
from .models import Commit, CommitId


def first_parent_chain(commits: CommitGraph, start: CommitId | None) -> Iterator[Commit]:
    # only parents[0] is followed, a second parent would never be visited
    commit_id = start
    seen = set()
    while commit_id is not None and commit_id in commits and commit_id not in seen:
        seen.add(commit_id)
        commit = commits.get(commit_id)
        yield commit
        commit_id = commit.parents[0] if commit.parents else None
