"""Tests for config module."""

from pathlib import Path

from buddybot.config import Config, load_config


def test_config_initialization(temp_dir: Path):
    config = Config(project_root=temp_dir, config_dict={"max_line_length": 99})

    assert config.project_root == temp_dir
    assert config.settings["max_line_length"] == 99
    assert config.is_present()


def test_config_defaults():
    config = Config(project_root=None)

    assert not config.is_present()
    assert config.max_line_length == 120
    assert config.complexity_threshold == 10
    assert config.reveal_on_update is True
    assert config.hydration_interval_minutes == 30.0


def test_config_typed_values(sample_config: Config):
    assert sample_config.max_line_length == 80
    assert sample_config.complexity_threshold == 5
    assert sample_config.reveal_on_update is False
    assert sample_config.hydration_interval_minutes == 45.0


def test_config_invalid_types_fall_back(temp_dir: Path, caplog):
    config = Config(temp_dir, {"max_line_length": "wide", "reveal_on_update": 1, "complexity_threshold": True})

    assert config.max_line_length == 120
    assert config.reveal_on_update is True
    assert config.complexity_threshold == 10
    assert "invalid value" in caplog.text


def test_config_getitem_missing_key(sample_config: Config):
    assert "rules" in sample_config
    try:
        sample_config["nonexistent"]
    except KeyError as e:
        assert "tool.buddybot" in str(e)
    else:
        raise AssertionError("expected KeyError")


def test_load_config_from_pyproject(pyproject_toml: Path):
    config = load_config(pyproject_toml.parent)

    assert config.is_present()
    assert config.max_line_length == 100
    assert config.reveal_on_update is False
    assert config.get("rules", {}).get("LINE-TOO-LONG") == "BLOCK"


def test_load_config_from_subdirectory(pyproject_toml: Path):
    nested = pyproject_toml.parent / "pkg" / "sub"
    nested.mkdir(parents=True)

    assert load_config(nested).max_line_length == 100


def test_load_config_without_section(temp_dir: Path):
    (temp_dir / "pyproject.toml").write_text('[project]\nname = "other"\n')
    config = load_config(temp_dir)

    assert config.project_root == temp_dir.resolve()
    assert not config.is_present()


def test_load_config_invalid_toml(temp_dir: Path, caplog):
    (temp_dir / "pyproject.toml").write_text("[tool.buddybot\nbroken = ")
    config = load_config(temp_dir)

    assert not config.is_present()
    assert "Error parsing" in caplog.text
