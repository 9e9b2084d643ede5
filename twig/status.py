from .models import FileStatus, Tree


def classify_path(path: str, commit_tree: Tree, staged: Tree, working: Tree) -> FileStatus:
    in_index = path in staged
    in_working = path in working
    in_commit = path in commit_tree
    if in_index:
        modified = in_working and working[path] != staged[path]
    else:
        modified = in_working and (not in_commit or commit_tree[path] != working[path])
    return FileStatus(
        path=path,
        staged=in_index,
        modified=modified,
        untracked=in_working and not in_commit and not in_index,
    )


def classify_paths(commit_tree: Tree, staged: Tree, working: Tree) -> list[FileStatus]:
    """Classify every path seen in the current tree, the index or the working
    directory. Paths in none of the three never show up."""
    paths = set(commit_tree) | set(staged) | set(working)
    return [classify_path(path, commit_tree, staged, working) for path in sorted(paths)]
