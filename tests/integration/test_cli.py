"""Integration tests for CLI commands.

End-to-end tests invoking the click app, from argument parsing through the
engine to console and file output.
"""

import json
from pathlib import Path

from click.testing import CliRunner
import pandas as pd
import pytest

from codetransform.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.integration
class TestCompileCommand:
    def test_help(self, runner):
        result = runner.invoke(app, ["compile", "--help"])

        assert result.exit_code == 0
        assert "--mode" in result.output
        assert "--json" in result.output

    def test_range(self, runner):
        result = runner.invoke(app, ["compile", "A->E", "--mode", "range"])

        assert result.exit_code == 0
        assert "> ABCDE" in result.output
        assert "Ranges expanded: 1" in result.output

    def test_default_mode_is_combined(self, runner):
        result = runner.invoke(app, ["compile", "A->E"])

        assert result.exit_code == 0
        assert "> NOPQR" in result.output

    def test_mode_is_case_insensitive(self, runner):
        result = runner.invoke(app, ["compile", "HELLO", "--mode", "MAPPING"])

        assert result.exit_code == 0
        assert "> URYYB" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(app, ["compile", "HELLO", "--mode", "mapping", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["output"] == "URYYB"
        assert payload["stats"]["charsTransformed"] == 5

    def test_errors_exit_non_zero(self, runner):
        result = runner.invoke(app, ["compile", "A->z", "--mode", "range", "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["errors"] == [
            "Invalid range: Case mismatch between 'A' and 'z'"
        ]

    def test_blank_input_warns(self, runner):
        result = runner.invoke(app, ["compile", "   "])

        assert result.exit_code == 0
        assert "Input is empty" in result.output

    def test_reads_stdin(self, runner):
        result = runner.invoke(app, ["compile", "--mode", "range"], input="1->9")

        assert result.exit_code == 0
        assert "> 123456789" in result.output

    def test_reads_file(self, runner, tmp_path: Path):
        source = tmp_path / "program.txt"
        source.write_text("Z->V", encoding="utf-8")

        result = runner.invoke(
            app, ["compile", "--file", str(source), "--mode", "range", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["output"] == "ZYXWV"

    def test_text_and_file_conflict(self, runner, tmp_path: Path):
        source = tmp_path / "program.txt"
        source.write_text("A->E", encoding="utf-8")

        result = runner.invoke(app, ["compile", "A->E", "--file", str(source)])

        assert result.exit_code == 2
        assert "not both" in result.output

    def test_unknown_mode_rejected(self, runner):
        result = runner.invoke(app, ["compile", "A->E", "--mode", "reverse"])

        assert result.exit_code == 2

    def test_mode_from_config_file(self, runner, tmp_path: Path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[default]\nmode = "range"\n')

        result = runner.invoke(
            app, ["compile", "A->C", "--config", str(config_file), "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["output"] == "ABC"

    def test_mode_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("CODETRANSFORM_DEFAULT_MODE", "default")

        result = runner.invoke(app, ["compile", "A->C", "--json"])

        assert json.loads(result.output)["output"] == "A->C"

    def test_simulated_delay(self, runner, tmp_path: Path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[default]\nsimulated_delay = 0.01\n")

        result = runner.invoke(
            app,
            ["compile", "A->E", "--mode", "range", "--config", str(config_file)],
        )

        assert result.exit_code == 0
        assert "> ABCDE" in result.output


@pytest.mark.integration
class TestBatchCommand:
    def test_batch_writes_results(self, runner, tmp_path: Path):
        source = tmp_path / "codes.csv"
        source.write_text("input,mode\nA->E,range\nHELLO,mapping\nA->E,\n")

        result = runner.invoke(app, ["batch", str(source)])

        assert result.exit_code == 0, result.output
        assert "All 3 rows compiled successfully" in result.output
        written = pd.read_csv(
            tmp_path / "codes_results.csv", dtype=str, keep_default_na=False
        )
        assert list(written["output"]) == ["ABCDE", "URYYB", "NOPQR"]

    def test_batch_explicit_output_and_mode(self, runner, tmp_path: Path):
        source = tmp_path / "codes.csv"
        source.write_text("code\nZ->X\n")
        output = tmp_path / "out" / "compiled.csv"

        result = runner.invoke(
            app,
            [
                "batch",
                str(source),
                "--mode",
                "range",
                "--input-column",
                "code",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        written = pd.read_csv(output, dtype=str, keep_default_na=False)
        assert list(written["output"]) == ["ZYX"]

    def test_batch_with_row_errors(self, runner, tmp_path: Path):
        source = tmp_path / "codes.csv"
        source.write_text("input\nA->z\nB->D\n")

        result = runner.invoke(app, ["batch", str(source), "--mode", "range"])

        assert result.exit_code == 1
        assert "1 of 2 rows compiled with errors" in result.output
        assert (tmp_path / "codes_results.csv").exists()

    def test_batch_missing_column(self, runner, tmp_path: Path):
        source = tmp_path / "codes.csv"
        source.write_text("text\nA->E\n")

        result = runner.invoke(app, ["batch", str(source)])

        assert result.exit_code == 1
        assert "Column 'input' not found" in result.output

    def test_batch_missing_file(self, runner, tmp_path: Path):
        result = runner.invoke(app, ["batch", str(tmp_path / "absent.csv")])

        assert result.exit_code == 2


@pytest.mark.integration
class TestReferenceCommands:
    def test_reference(self, runner):
        result = runner.invoke(app, ["reference"])

        assert result.exit_code == 0
        assert "Letter Mapping (ROT13)" in result.output
        assert "Numbers 0 and 7 remain unchanged" in result.output
        assert "ZYXWV" in result.output
        assert "12345" in result.output

    def test_modes(self, runner):
        result = runner.invoke(app, ["modes"])

        assert result.exit_code == 0
        for name in ("default", "range", "mapping", "combined"):
            assert name in result.output

    def test_demo(self, runner):
        result = runner.invoke(app, ["demo", "--mode", "range"])

        assert result.exit_code == 0
        assert "ABCDEFGHIJKLMNOPQRSTUVWXYZ" in result.output
        assert "123456789" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "version" in result.output
