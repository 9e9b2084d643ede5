class TwigError(Exception):
    """Base exception for every recoverable repository error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoMatchError(TwigError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"pathspec '{pattern}' did not match any files")
        self.pattern = pattern


class PatternError(TwigError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern '{pattern}': {reason}")
        self.pattern = pattern


class NothingToCommitError(TwigError):
    def __init__(self) -> None:
        super().__init__("nothing to commit, no files staged")


class BranchExistsError(TwigError):
    def __init__(self, name: str) -> None:
        super().__init__(f"branch '{name}' already exists")
        self.name = name


class NoCurrentCommitError(TwigError):
    def __init__(self) -> None:
        super().__init__("no current commit to start a branch from")


class NoSuchBranchError(TwigError):
    def __init__(self, name: str) -> None:
        super().__init__(f"branch '{name}' does not exist")
        self.name = name


class DetachedHeadError(TwigError):
    def __init__(self) -> None:
        super().__init__("cannot reset while HEAD is not on a branch")


class NoSuchCommitError(TwigError):
    def __init__(self, commit_id: str) -> None:
        super().__init__(f"commit {commit_id} does not exist")
        self.commit_id = commit_id


class CommitIdCollisionError(TwigError):
    """Raised when the id generator hands out an id that is already taken."""

    def __init__(self, commit_id: str) -> None:
        super().__init__(f"commit id {commit_id} is already in use")
        self.commit_id = commit_id
