from .models import Tree


class WorkingDirectory:
    """The files a user edits freely, keyed by path."""

    def __init__(self) -> None:
        self._files: Tree = {}

    def add_file(self, path: str, content: str) -> None:
        self._files[path] = content

    def get(self, path: str) -> str | None:
        return self._files.get(path)

    def files(self) -> Tree:
        return dict(self._files)

    def paths(self) -> list[str]:
        return list(self._files)

    def clear(self) -> None:
        self._files.clear()

    def recreate(self, tree: Tree) -> None:
        # wholesale overwrite, anything not in tree is dropped
        self.clear()
        self._files.update(tree)

    def __contains__(self, path: object) -> bool:
        return path in self._files

    def __len__(self) -> int:
        return len(self._files)
