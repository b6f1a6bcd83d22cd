"""
Tests for the CLI: global options, ``new()`` argument parsing and ``run()``.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from mimic.core.encoding import YAML
from mimic.core.generator import GENERATED_COMMENT, Generator
from mimic.main import cli, new, run


class TestCLIGlobal:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "mimic" in result.output
        assert "generate" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_generate_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", "--help"])
        assert result.exit_code == 0
        assert "--output-dir" in result.output
        assert "--prune" in result.output

    def test_generate_outside_script_fails(self, isolated_cwd: Path, tmp_path: Path):
        out = tmp_path / "gen"
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", "-o", str(out)])
        assert result.exit_code == 2
        assert "generation script" in result.output
        assert not out.exists()


class TestNew:
    def test_returns_generator(self, isolated_cwd: Path, tmp_path: Path):
        gen = new(["generate", "--output-dir", str(tmp_path / "gen")])
        assert isinstance(gen, Generator)
        assert gen.output_dir == tmp_path / "gen"
        assert gen.prune is False

    def test_default_output_dir(self, isolated_cwd: Path):
        assert new(["generate"]).output_dir == Path("gen")

    def test_env_output_dir(self, isolated_cwd: Path, monkeypatch):
        monkeypatch.setenv("MIMIC_OUTPUT_DIR", "from-env")
        assert new(["generate"]).output_dir == Path("from-env")

    def test_flag_beats_config_file(self, isolated_cwd: Path):
        (isolated_cwd / "mimic.yml").write_text("output_dir: from-file\nprune: true\n")
        gen = new(["generate", "-o", "from-flag", "--no-prune"])
        assert gen.output_dir == Path("from-flag")
        assert gen.prune is False

    def test_comments(self, isolated_cwd: Path):
        gen = new(["generate", "--comment", "one", "--comment", "two"])
        assert gen.pool.top_level_comments == (GENERATED_COMMENT, "one", "two")

    def test_help_exits_zero(self, isolated_cwd: Path):
        with pytest.raises(SystemExit) as exc:
            new(["generate", "--help"])
        assert exc.value.code == 0

    def test_unknown_option(self, isolated_cwd: Path):
        with pytest.raises(SystemExit) as exc:
            new(["generate", "--bogus"])
        assert exc.value.code == 2

    def test_missing_config_file(self, isolated_cwd: Path, capsys):
        with pytest.raises(SystemExit) as exc:
            new(["generate", "--config", "missing.yml"])
        assert exc.value.code == 1
        assert "Config file not found" in capsys.readouterr().err


class TestRun:
    def test_writes_output(self, isolated_cwd: Path, tmp_path: Path):
        out = tmp_path / "gen"

        def build(gen: Generator) -> None:
            gen.with_path("k8s").add("svc.yaml", YAML({"kind": "Service"}))

        paths = run(build, ["generate", "-o", str(out)])

        target = out / "k8s" / "svc.yaml"
        assert paths == [target]
        assert target.read_text() == f"# {GENERATED_COMMENT}\nkind: Service\n"

    def test_clash_aborts_without_output(self, isolated_cwd: Path, tmp_path: Path, capsys):
        out = tmp_path / "gen"

        def build(gen: Generator) -> None:
            gen.add("x.yaml", YAML({"a": 1}))
            gen.add("x.yaml", YAML({"a": 2}))

        with pytest.raises(SystemExit) as exc:
            run(build, ["generate", "-o", str(out)])

        assert exc.value.code == 1
        assert "filename clash: x.yaml" in capsys.readouterr().err
        assert not out.exists()

    def test_invalid_name_aborts(self, isolated_cwd: Path, tmp_path: Path, capsys):
        def build(gen: Generator) -> None:
            gen.add("k8s/x.yaml", YAML({"a": 1}))

        with pytest.raises(SystemExit) as exc:
            run(build, ["generate", "-o", str(tmp_path / "gen")])

        assert exc.value.code == 1
        assert "invalid file name" in capsys.readouterr().err
