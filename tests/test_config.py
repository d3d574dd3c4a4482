from pathlib import Path

import pytest

from expgscaffold.generator.config import ConfigError, ScaffoldSettings, load_settings


def test_defaults_without_file(tmp_path: Path):
    s = load_settings(cwd=tmp_path)
    assert s == ScaffoldSettings()
    assert s.git_init == ["git", "init"]
    assert s.gitignore == "node_modules/\n.env.*"


def test_default_location_is_relative_to_cwd(tmp_path: Path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "create-expg-server.yml").write_text("git_branch: [git, branch, -M, trunk]\n")
    assert load_settings(cwd=tmp_path).git_branch == ["git", "branch", "-M", "trunk"]


def test_empty_file_gives_defaults(tmp_path: Path):
    cfg = tmp_path / "c.yml"
    cfg.write_text("")
    assert load_settings(cfg) == ScaffoldSettings()


def test_explicit_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "nope.yml")


def test_not_a_mapping(tmp_path: Path):
    cfg = tmp_path / "c.yml"
    cfg.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_settings(cfg)


def test_bad_yaml(tmp_path: Path):
    cfg = tmp_path / "c.yml"
    cfg.write_text("install: [npm\n")
    with pytest.raises(ConfigError):
        load_settings(cfg)


def test_bad_types(tmp_path: Path):
    cfg = tmp_path / "c.yml"
    cfg.write_text("install: 42\n")
    with pytest.raises(ConfigError):
        load_settings(cfg)
