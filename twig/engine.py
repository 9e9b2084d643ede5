"""The repository engine: every operation that links the working directory,
index, commit graph and refs goes through here.

Every operation checks its preconditions before touching any store, so a
raised ``TwigError`` always leaves the repository exactly as it was.
"""
from abc import ABC, abstractmethod
import logging
import re
from .commit_helpers import Clock, CommitIdGenerator, CounterCommitIdGenerator, SystemClock
from .errors import (
    BranchExistsError,
    DetachedHeadError,
    NoCurrentCommitError,
    NoMatchError,
    NoSuchBranchError,
    NoSuchCommitError,
    NothingToCommitError,
    PatternError,
)
from .graph_utils import first_parent_chain
from .models import (
    Branch,
    Commit,
    CommitId,
    Detached,
    HeadDescription,
    HeadInfo,
    LogEntry,
    OnBranch,
    StatusResult,
    Tree,
)
from .repo import Repo
from .status import classify_paths

logger = logging.getLogger(__name__)


class Engine(ABC):
    """Public surface of a repository.

    Implementations are single-caller; a shared engine would need one lock
    around each of these calls.
    """

    @abstractmethod
    def add_file_to_working_directory(self, path: str, content: str) -> None: ...

    @abstractmethod
    def add(self, pattern: str) -> list[str]: ...

    @abstractmethod
    def commit(self, message: str) -> CommitId: ...

    @abstractmethod
    def create_branch(self, name: str) -> None: ...

    @abstractmethod
    def checkout_branch(self, name: str) -> None: ...

    @abstractmethod
    def status(self) -> StatusResult: ...

    @abstractmethod
    def log(self) -> list[LogEntry]: ...

    @abstractmethod
    def reset(self, commit_id: CommitId) -> None: ...

    @abstractmethod
    def list_branches(self) -> list[Branch]: ...

    @abstractmethod
    def current_branch(self) -> str | None: ...

    @abstractmethod
    def head(self) -> HeadInfo: ...

    @abstractmethod
    def get_commit(self, commit_id: CommitId) -> Commit: ...

    @abstractmethod
    def working_directory_files(self) -> Tree: ...

    @abstractmethod
    def staged_files(self) -> Tree: ...


class InMemoryEngine(Engine):
    def __init__(
        self,
        repo: Repo | None = None,
        id_generator: CommitIdGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._repo = repo if repo is not None else Repo()
        self._id_generator = id_generator or CounterCommitIdGenerator()
        self._clock = clock or SystemClock()

    def add_file_to_working_directory(self, path: str, content: str) -> None:
        self._repo.working_directory.add_file(path, content)

    def add(self, pattern: str) -> list[str]:
        """Stage a working-directory file, or every file whose path matches
        ``pattern`` as a regular expression.

        A literal path wins over the pattern reading, so ``a.txt`` stages only
        ``a.txt`` even though ``.`` would match any character. Returns the
        staged paths, sorted.
        """
        working = self._repo.working_directory
        if pattern in working:
            matched = [pattern]
        else:
            try:
                regex = re.compile(pattern)
            except re.error as e:
                raise PatternError(pattern, str(e)) from e
            matched = sorted(path for path in working.paths() if regex.search(path))
        if not matched:
            raise NoMatchError(pattern)

        for path in matched:
            self._repo.index.add_entry(path, working.get(path))
        logger.debug("Staged %d file(s) for '%s': %s", len(matched), pattern, matched)
        return matched

    def commit(self, message: str) -> CommitId:
        repo = self._repo
        staged = repo.index.entries()
        if not staged:
            raise NothingToCommitError()
        head = repo.head
        if isinstance(head, OnBranch) and head.name not in repo.branches:
            raise NoSuchBranchError(head.name)

        parent_id = repo.current_commit_id()
        tree = repo.commits.tree_of(parent_id)
        tree.update(staged)
        parents = [parent_id] if parent_id is not None else []
        timestamp = self._clock.now()
        commit_id = self._id_generator.new_commit_id(dict(tree), list(parents), timestamp)
        new_commit = Commit(
            id=commit_id,
            message=message,
            timestamp=timestamp,
            parents=tuple(parents),
            tree=tree,
        )
        repo.commits.add(new_commit)

        if isinstance(head, OnBranch):
            repo.branches.update_branch_head(head.name, commit_id)
        elif isinstance(head, Detached):
            repo.update_head(Detached(commit_id=commit_id))
        repo.index.clear()
        logger.info("Committed %s (%d file(s), parent %s)", commit_id, len(tree), parent_id)
        return commit_id

    def create_branch(self, name: str) -> None:
        repo = self._repo
        if name in repo.branches:
            raise BranchExistsError(name)
        current = repo.current_commit_id()
        if current is None:
            raise NoCurrentCommitError()
        repo.branches.create_branch(name, current)
        logger.info("Created branch '%s' at %s", name, current)

    def checkout_branch(self, name: str) -> None:
        """Switch HEAD to ``name`` and overwrite the working directory with its
        tree. Uncommitted edits and staged entries are discarded."""
        repo = self._repo
        if name not in repo.branches:
            raise NoSuchBranchError(name)
        target = repo.branches.get_target(name)
        repo.working_directory.recreate(repo.commits.tree_of(target))
        repo.update_head(OnBranch(name=name))
        repo.index.clear()
        logger.info("Switched to branch '%s' (%s)", name, target)

    def status(self) -> StatusResult:
        repo = self._repo
        files = classify_paths(
            repo.current_tree(),
            repo.index.entries(),
            repo.working_directory.files(),
        )
        return StatusResult(head=self._describe_head(), files=files)

    def log(self) -> list[LogEntry]:
        return [
            LogEntry(
                id=commit.id,
                message=commit.message,
                timestamp=commit.timestamp,
                parents=commit.parents,
            )
            for commit in first_parent_chain(self._repo.commits, self._repo.current_commit_id())
        ]

    def reset(self, commit_id: CommitId) -> None:
        """Hard reset: move the current branch to ``commit_id``, overwrite the
        working directory from it and clear the index."""
        repo = self._repo
        branch_name = repo.get_current_branch()
        if branch_name is None:
            raise DetachedHeadError()
        if commit_id not in repo.commits:
            raise NoSuchCommitError(commit_id)
        repo.branches.update_branch_head(branch_name, commit_id)
        repo.working_directory.recreate(repo.commits.tree_of(commit_id))
        repo.index.clear()
        logger.info("Reset branch '%s' to %s", branch_name, commit_id)

    def list_branches(self) -> list[Branch]:
        return self._repo.branches.branches()

    def current_branch(self) -> str | None:
        return self._repo.get_current_branch()

    def head(self) -> HeadInfo:
        return self._repo.head.model_copy()

    def get_commit(self, commit_id: CommitId) -> Commit:
        return self._repo.commits.get(commit_id)

    def working_directory_files(self) -> Tree:
        return self._repo.working_directory.files()

    def staged_files(self) -> Tree:
        return self._repo.index.entries()

    def _describe_head(self) -> HeadDescription:
        repo = self._repo
        return HeadDescription(
            branch=repo.get_current_branch(),
            commit_id=repo.current_commit_id(),
            detached=isinstance(repo.head, Detached),
        )
