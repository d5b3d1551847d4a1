"""Tests for the reckon CLI."""

import json

import pytest
from click.testing import CliRunner

from reckon.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_tree(tmp_path):
    def write(text: str):
        path = tmp_path / "expr.yaml"
        path.write_text(text)
        return str(path)

    return write


class TestEval:
    def test_eval_conversion(self, runner, write_tree):
        result = runner.invoke(cli, ["eval", write_tree("as: [255, hex]\n")])
        assert result.exit_code == 0
        assert result.output.strip() == "0xff"

    def test_eval_from_stdin(self, runner):
        result = runner.invoke(cli, ["eval", "-"], input="add: [2, 3]\n")
        assert result.exit_code == 0
        assert result.output.strip() == "5"

    def test_eval_shows_tree(self, runner, write_tree):
        result = runner.invoke(cli, ["eval", "--tree", write_tree("as: [pi, dp]\n")])
        assert result.exit_code == 0
        assert "(pi as dp)" in result.output
        assert "3.141592654" in result.output

    def test_eval_domain_error(self, runner, write_tree):
        result = runner.invoke(cli, ["eval", write_tree("div: [1, 0]\n")])
        assert result.exit_code == 1
        assert "Division by zero" in result.output

    def test_eval_malformed_tree(self, runner, write_tree):
        result = runner.invoke(cli, ["eval", write_tree("frobnicate: 1\n")])
        assert result.exit_code == 1
        assert "Unknown node kind" in result.output

    def test_eval_compat_mode(self, runner, write_tree):
        path = write_tree("apply: [cbrt, 27]\n")
        assert runner.invoke(cli, ["eval", path]).output.strip() == "3"

        result = runner.invoke(cli, ["eval", "--compat", path])
        assert result.exit_code == 1
        assert "Unknown identifier 'cbrt'" in result.output

    def test_eval_compat_from_config(self, runner, write_tree, tmp_path, monkeypatch):
        config_dir = tmp_path / "settings"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("compatibility_mode: true\n")
        monkeypatch.setenv("RECKON_CONFIG_DIR", str(config_dir))

        result = runner.invoke(cli, ["eval", write_tree("apply: [cbrt, 27]\n")])
        assert result.exit_code == 1

    def test_eval_timeout_cancels(self, runner, write_tree):
        result = runner.invoke(cli, ["eval", "--timeout", "1", write_tree("factorial: 200000\n")])
        assert result.exit_code == 130
        assert "Computation cancelled" in result.output

    def test_bad_config_file(self, runner, write_tree, tmp_path, monkeypatch):
        config_dir = tmp_path / "settings"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("timeout_ms: -1\n")
        monkeypatch.setenv("RECKON_CONFIG_DIR", str(config_dir))

        result = runner.invoke(cli, ["eval", write_tree("1\n")])
        assert result.exit_code == 1
        assert "timeout_ms" in result.output


class TestListing:
    def test_builtins_default(self, runner):
        result = runner.invoke(cli, ["builtins"])
        assert result.exit_code == 0
        assert "default mode" in result.output
        assert "hexadecimal" in result.output

    def test_builtins_compat(self, runner):
        result = runner.invoke(cli, ["builtins", "--compat"])
        assert result.exit_code == 0
        assert "9 builtin identifiers (compatibility mode)" in result.output
        assert "approx." in result.output
        assert "hexadecimal" not in result.output

    def test_functions(self, runner):
        result = runner.invoke(cli, ["functions"])
        assert result.exit_code == 0
        assert "Trigonometric" in result.output
        assert "atanh" in result.output

    def test_functions_json(self, runner):
        result = runner.invoke(cli, ["functions", "--json"])
        assert result.exit_code == 0
        docs = json.loads(result.output)
        assert docs["functions"]["sqrt"]["category"] == "algebraic"
        assert {f["name"] for f in docs["byCategory"]["hyperbolic"]} == {
            "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
        }
