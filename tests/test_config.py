"""Tests for configuration loading, merging and the run config value."""

from pathlib import Path

import pytest
import yaml

from sourcedoc.access_level import AccessLevel
from sourcedoc.deep_merge import deep_merge
from sourcedoc.doc_config import DocConfig
from sourcedoc.load_config import load_config


def test_deep_merge_nested_and_scalars() -> None:
    """Verify recursive merging and scalar replacement."""
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    update = {"a": 2, "nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"a": 2, "nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_lists_replace_except_abstract_glob() -> None:
    """Verify that lists replace, except the additive abstract_glob."""
    base = {"modules": ["A"], "abstract_glob": ["docs/*.md"]}
    update = {"modules": ["B"], "abstract_glob": ["extra/*.md", "docs/*.md"]}
    merged = deep_merge(base, update)
    assert merged["modules"] == ["B"]
    assert merged["abstract_glob"] == ["docs/*.md", "extra/*.md"]


def test_load_config_defaults() -> None:
    """Verify that defaults are returned without a file."""
    config = load_config(None)
    assert config["min_acl"] == "public"
    assert config["modules"] == []
    assert load_config("does/not/exist.yml") == config


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that a user file overrides defaults."""
    config_file = tmp_path / "sourcedoc.yml"
    config_file.write_text(
        yaml.dump({"modules": ["Core", "UI"], "separate_global_declarations": True})
    )
    loaded = load_config(str(config_file))
    assert loaded["modules"] == ["Core", "UI"]
    assert loaded["separate_global_declarations"] is True
    assert loaded["hide_declarations"] == ""


def test_doc_config_from_dict() -> None:
    """Verify conversion of a merged dict into the immutable config."""
    config = DocConfig.from_dict(
        {
            "modules": ["Core", "UI"],
            "hide_declarations": "objc",
            "min_acl": "internal",
            "abstract_glob": ["docs/*.md"],
            "api_root": "/api/",
        }
    )
    assert config.modules == ("Core", "UI")
    assert config.multiple_modules
    assert config.module_name("UI")
    assert not config.module_name("Foundation")
    assert config.hide_objc
    assert not config.hide_swift
    assert config.min_acl is AccessLevel.INTERNAL
    assert config.abstract_glob == ("docs/*.md",)
    assert config.api_root == "/api"


def test_doc_config_is_read_only() -> None:
    """Verify that the config cannot change during a run."""
    config = DocConfig()
    with pytest.raises(AttributeError):
        config.separate_global_declarations = True  # type: ignore[misc]
    assert not config.multiple_modules


def test_doc_config_rejects_bad_hide_value() -> None:
    """Verify validation of hide_declarations."""
    with pytest.raises(ValueError, match="hide_declarations"):
        DocConfig(hide_declarations="kotlin")


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file must hold a mapping."""
    config_file = tmp_path / "sourcedoc.yml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(SystemExit, match="mapping"):
        load_config(str(config_file))


def test_load_config_does_not_share_defaults() -> None:
    """Verify that callers cannot change the defaults through a result."""
    load_config(None)["modules"].append("Leaked")
    assert load_config(None)["modules"] == []
