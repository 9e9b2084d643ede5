from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Literal

CommitId = str
Tree = dict[str, str]


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: CommitId
    message: str
    timestamp: datetime
    parents: tuple[CommitId, ...] = ()
    tree: Tree = {}


class Branch(BaseModel):
    name: str
    target: CommitId | None = None   # None until the first commit lands on it


class OnBranch(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["branch"] = "branch"
    name: str


class Detached(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["commit"] = "commit"
    commit_id: CommitId


class Unset(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["unset"] = "unset"


HeadInfo = OnBranch | Detached | Unset


class FileStatus(BaseModel):
    path: str
    staged: bool = False
    modified: bool = False
    untracked: bool = False

    @property
    def committed(self) -> bool:
        return not (self.staged or self.modified or self.untracked)


class HeadDescription(BaseModel):
    branch: str | None = None
    commit_id: CommitId | None = None
    detached: bool = False

    def describe(self) -> str:
        if self.detached:
            if self.commit_id is None:
                return "HEAD detached (no commits yet)"
            return f"HEAD detached at {self.commit_id[:7]}"
        if self.branch is None:
            return "HEAD unset (no commits yet)"
        if self.commit_id is None:
            return f"On branch {self.branch} (no commits yet)"
        return f"On branch {self.branch}"


class StatusResult(BaseModel):
    head: HeadDescription
    files: list[FileStatus]


class LogEntry(BaseModel):
    id: CommitId
    message: str
    timestamp: datetime
    parents: tuple[CommitId, ...] = ()
