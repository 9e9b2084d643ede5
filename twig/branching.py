from .errors import BranchExistsError, NoSuchBranchError
from .models import Branch, CommitId


class BranchTable:
    def __init__(self) -> None:
        self._branches: dict[str, Branch] = {}

    def get_target(self, branch_name: str) -> CommitId | None:
        if branch_name not in self._branches:
            raise NoSuchBranchError(branch_name)
        return self._branches[branch_name].target

    def create_branch(self, branch_name: str, start_commit: CommitId | None = None) -> None:
        if branch_name in self._branches:
            raise BranchExistsError(branch_name)
        self._branches[branch_name] = Branch(name=branch_name, target=start_commit)

    def update_branch_head(self, branch_name: str, new_commit_id: CommitId) -> None:
        if branch_name not in self._branches:
            raise NoSuchBranchError(branch_name)
        self._branches[branch_name].target = new_commit_id

    def branches(self) -> list[Branch]:
        return [self._branches[name].model_copy() for name in sorted(self._branches)]

    def __contains__(self, branch_name: object) -> bool:
        return branch_name in self._branches
