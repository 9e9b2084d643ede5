from .branching import BranchTable
from .commit_helpers import CommitGraph
from .config import TwigConfig
from .models import CommitId, Detached, HeadInfo, OnBranch, Tree, Unset
from .staging import Index
from .working_directory import WorkingDirectory


class Repo:
    """Owns every store of a repository: working directory, index, commit
    graph, branches and HEAD.

    A new repo starts on the default branch, which has no target yet. Passing
    ``head`` lets callers start from a detached or unset HEAD; the default
    branch is still created.
    """

    def __init__(self, config: TwigConfig | None = None, head: HeadInfo | None = None) -> None:
        self.config = config or TwigConfig()
        self.working_directory = WorkingDirectory()
        self.index = Index()
        self.commits = CommitGraph()
        self.branches = BranchTable()
        self.branches.create_branch(self.config.default_branch)
        self._head: HeadInfo = head if head is not None else OnBranch(name=self.config.default_branch)

    @property
    def head(self) -> HeadInfo:
        return self._head

    def update_head(self, new_head: HeadInfo) -> None:
        self._head = new_head

    def get_current_branch(self) -> str | None:
        if isinstance(self._head, OnBranch):
            return self._head.name
        return None

    def current_commit_id(self) -> CommitId | None:
        head = self._head
        if isinstance(head, OnBranch):
            if head.name not in self.branches:
                return None
            target = self.branches.get_target(head.name)
        elif isinstance(head, Detached):
            target = head.commit_id
        elif isinstance(head, Unset):
            return None
        else:
            raise TypeError(f"unexpected HEAD value {head!r}")
        if target is None or target not in self.commits:
            return None
        return target

    def current_tree(self) -> Tree:
        return self.commits.tree_of(self.current_commit_id())
