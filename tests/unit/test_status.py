# Unit tests for status classification and HEAD descriptions

from twig.models import FileStatus, HeadDescription
from twig.status import classify_path, classify_paths


class TestClassifyPath:

    def test_committed_unchanged(self):
        # Same content in tree and working directory, nothing staged
        status = classify_path("a.txt", {"a.txt": "1"}, {}, {"a.txt": "1"})
        assert status.committed

    def test_untracked(self):
        status = classify_path("new.txt", {}, {}, {"new.txt": "x"})
        assert status.untracked and status.modified and not status.staged

    def test_modified_against_tree(self):
        status = classify_path("a.txt", {"a.txt": "1"}, {}, {"a.txt": "2"})
        assert status.modified
        assert not status.untracked and not status.staged

    def test_staged_and_unchanged_since(self):
        status = classify_path("a.txt", {"a.txt": "1"}, {"a.txt": "2"}, {"a.txt": "2"})
        assert status.staged and not status.modified

    def test_staged_then_edited_again(self):
        # Working directory differs from the staged content
        status = classify_path("a.txt", {}, {"a.txt": "2"}, {"a.txt": "3"})
        assert status.staged and status.modified and not status.untracked

    def test_removed_from_working_directory(self):
        # Only working-directory content can make a path modified
        status = classify_path("a.txt", {"a.txt": "1"}, {}, {})
        assert status.committed


class TestClassifyPaths:

    def test_covers_union_of_paths_and_nothing_else(self):
        tree = {"a": "1", "b": "1"}
        staged = {"b": "2", "c": "1"}
        working = {"a": "1", "d": "1"}
        paths = [f.path for f in classify_paths(tree, staged, working)]
        assert sorted(paths) == ["a", "b", "c", "d"]

    def test_empty_repository(self):
        assert classify_paths({}, {}, {}) == []


class TestFileStatus:

    def test_committed_only_when_no_flags(self):
        assert FileStatus(path="a").committed
        assert not FileStatus(path="a", staged=True).committed
        assert not FileStatus(path="a", modified=True).committed


class TestHeadDescription:

    def test_on_branch(self):
        assert HeadDescription(branch="main", commit_id="abc").describe() == "On branch main"

    def test_on_branch_without_commits(self):
        assert HeadDescription(branch="main").describe() == "On branch main (no commits yet)"

    def test_detached(self):
        head = HeadDescription(commit_id="0123456789", detached=True)
        assert head.describe() == "HEAD detached at 0123456"

    def test_unset(self):
        assert HeadDescription().describe() == "HEAD unset (no commits yet)"
