# =============================================================================
# test_cli.py - lexscan Command-Line Tests
# =============================================================================
# Tests for the lexscan tool using click's CliRunner.
# =============================================================================

import json

from click.testing import CliRunner

from lexical_scanner.cli.errors import ExitCode
from lexical_scanner.cli.lexscan import format_tokens_text, main
from lexical_scanner.scanner import tokenize


class TestLexscanCLI:
    """Tests for the lexscan CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Tokenize a source file" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_cli_text_output(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("x = 1;\n")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.SUCCESS
        assert "IDENTIFIER" in result.output
        assert "ASSIGN" in result.output
        assert "INTEGER_LITERAL" in result.output
        assert "SEMICOLON" in result.output

    def test_cli_json_output(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("if (a <= 2.5) b = a;")

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "--format", "json"])

        assert result.exit_code == 0
        tokens = json.loads(result.stdout)
        assert tokens[0] == {"kind": "RESERVED_WORD", "lexeme": "if", "line": 1, "column": 1}
        assert [t["lexeme"] for t in tokens] == [
            "if", "(", "a", "<=", "2.5", ")", "b", "=", "a", ";",
        ]

    def test_cli_output_file(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("a = b;")
        output = tmp_path / "tokens.txt"

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "-o", str(output)])

        assert result.exit_code == 0
        assert "ASSIGN" in output.read_text()

    def test_cli_lexical_error(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("x = 12a;")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "malformed number '12a'" in result.output
        assert "prog.txt:1:7" in result.output

    def test_cli_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.txt")])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_reserved_words_option(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("begin if end")

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "-f", "json", "-r", "begin,end"])

        assert result.exit_code == 0
        kinds = [t["kind"] for t in json.loads(result.stdout)]
        assert kinds == ["RESERVED_WORD", "IDENTIFIER", "RESERVED_WORD"]

    def test_cli_reserved_words_from_env(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("begin")

        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(source), "-f", "json"],
            env={"LEXSCAN_RESERVED_WORDS": "begin"},
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["kind"] == "RESERVED_WORD"

    def test_cli_undecodable_source(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_bytes(b"x = \xff;")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "cannot decode" in result.output

    def test_cli_unknown_encoding(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("x")

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "-e", "no-such-codec"])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Unknown encoding: 'no-such-codec'" in result.output

    def test_cli_unknown_encoding_from_env(self, tmp_path, monkeypatch):
        source = tmp_path / "prog.txt"
        source.write_text("x")
        monkeypatch.setenv("LEXSCAN_ENCODING", "no-such-codec")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Unknown encoding" in result.output

    def test_cli_lookup_failure_is_internal_error(self, tmp_path, monkeypatch):
        """A KeyError from inside the tool is a defect, not a bad argument."""
        source = tmp_path / "prog.txt"
        source.write_text("x")

        def broken_formatter(tokens):
            raise KeyError("kind")

        monkeypatch.setattr(
            "lexical_scanner.cli.lexscan.format_tokens_text", broken_formatter
        )

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.INTERNAL_ERROR
        assert "Internal error" in result.output

    def test_cli_index_error_is_internal_error(self, tmp_path, monkeypatch):
        source = tmp_path / "prog.txt"
        source.write_text("x")

        def broken_formatter(tokens):
            raise IndexError("list index out of range")

        monkeypatch.setattr(
            "lexical_scanner.cli.lexscan.format_tokens_json", broken_formatter
        )

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "-f", "json"])

        assert result.exit_code == ExitCode.INTERNAL_ERROR


class TestFormatting:
    """Tests for the text table formatter."""

    def test_format_tokens_text(self):
        text = format_tokens_text(tokenize("x <= 1"))
        lines = text.splitlines()
        assert len(lines) == 3
        assert lines[1].split() == ["1:3", "LESS_EQUAL", "<="]
