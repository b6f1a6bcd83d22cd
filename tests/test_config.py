"""
Tests for configuration loading: mimic.yml, env vars, CLI overrides.
"""

import textwrap
from pathlib import Path

import pytest

from mimic.core.config.loader import find_config_file, load_config
from mimic.core.errors import ConfigError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        output_dir: manifests
        log_level: info
        prune: true
        top_level_comments:
          - "owner: platform"
    """)
    path = tmp_path / "mimic.yml"
    path.write_text(content)
    return path


class TestFindConfigFile:
    def test_finds_in_start_dir(self, config_file: Path):
        assert find_config_file(config_file.parent) == config_file.resolve()

    def test_walks_up(self, config_file: Path):
        nested = config_file.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == config_file.resolve()

    def test_not_found(self, isolated_cwd: Path):
        assert find_config_file(isolated_cwd) is None


class TestLoadConfig:
    def test_defaults(self, isolated_cwd: Path):
        config = load_config(environ={})
        assert config.output_dir == Path("gen")
        assert config.log_level == "WARNING"
        assert config.prune is False
        assert config.top_level_comments == []

    def test_from_file(self, config_file: Path):
        config = load_config(config_file, environ={})
        assert config.output_dir == Path("manifests")
        assert config.log_level == "INFO"
        assert config.prune is True
        assert config.top_level_comments == ["owner: platform"]

    def test_auto_detected_file(self, config_file: Path, monkeypatch):
        monkeypatch.chdir(config_file.parent)
        assert load_config(environ={}).output_dir == Path("manifests")

    def test_wrapped_under_mimic_key(self, tmp_path: Path):
        path = tmp_path / "mimic.yml"
        path.write_text("mimic:\n  output_dir: wrapped\n")
        assert load_config(path, environ={}).output_dir == Path("wrapped")

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "mimic.yml"
        path.write_text("")
        assert load_config(path, environ={}).output_dir == Path("gen")

    def test_env_overrides_file(self, config_file: Path):
        config = load_config(
            config_file,
            environ={"MIMIC_OUTPUT_DIR": "from-env", "MIMIC_LOG_LEVEL": "debug"},
        )
        assert config.output_dir == Path("from-env")
        assert config.log_level == "DEBUG"

    def test_overrides_beat_env(self, config_file: Path):
        config = load_config(
            config_file,
            overrides={"output_dir": Path("from-cli"), "prune": False},
            environ={"MIMIC_OUTPUT_DIR": "from-env"},
        )
        assert config.output_dir == Path("from-cli")
        assert config.prune is False

    def test_none_overrides_ignored(self, config_file: Path):
        config = load_config(config_file, overrides={"output_dir": None}, environ={})
        assert config.output_dir == Path("manifests")

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml", environ={})

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "mimic.yml"
        path.write_text("output_dir: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path, environ={})

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "mimic.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path, environ={})

    def test_unknown_log_level(self, tmp_path: Path):
        path = tmp_path / "mimic.yml"
        path.write_text("log_level: chatty\n")
        with pytest.raises(ConfigError, match="Invalid generator configuration"):
            load_config(path, environ={})
