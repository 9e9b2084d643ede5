# Unit tests for twig/config.py

import pytest
from pydantic import ValidationError

from twig.config import TwigConfig, load_config
from twig.models import OnBranch
from twig.repo import Repo


class TestLoadConfig:

    def test_defaults_when_no_path(self):
        config = load_config(None)
        assert config.default_branch == "main"
        assert config.log_level == "WARNING"

    def test_defaults_when_file_missing(self, tmp_path):
        assert load_config(tmp_path / "missing.ini") == TwigConfig()

    def test_reads_ini_values(self, tmp_path):
        path = tmp_path / "twig.ini"
        path.write_text("[core]\ndefault_branch = trunk\n\n[log]\nlevel = debug\n")
        config = load_config(path)
        assert config.default_branch == "trunk"
        assert config.log_level == "DEBUG"

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "twig.ini"
        path.write_text("[log]\nlevel = INFO\n")
        config = load_config(path)
        assert config.default_branch == "main"
        assert config.log_level == "INFO"

    def test_invalid_level_rejected(self, tmp_path):
        path = tmp_path / "twig.ini"
        path.write_text("[log]\nlevel = loud\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestTwigConfig:

    def test_branch_name_with_space_rejected(self):
        with pytest.raises(ValidationError):
            TwigConfig(default_branch="my branch")

    def test_empty_branch_name_rejected(self):
        with pytest.raises(ValidationError):
            TwigConfig(default_branch="")

    def test_repo_uses_default_branch(self):
        repo = Repo(config=TwigConfig(default_branch="trunk"))
        assert repo.head == OnBranch(name="trunk")
        assert "trunk" in repo.branches
        assert repo.branches.get_target("trunk") is None
