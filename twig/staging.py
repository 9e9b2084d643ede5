from .models import Tree


class Index:
    """Staging area: the path -> content entries that go into the next commit."""

    def __init__(self) -> None:
        self._entries: Tree = {}

    def add_entry(self, path: str, content: str) -> None:
        self._entries[path] = content

    def entries(self) -> Tree:
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
