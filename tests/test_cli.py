"""Tests for the command line interface."""

import io
from pathlib import Path

import pytest

from reword.cli import (
    EXIT_FILE_NOT_FOUND,
    EXIT_SUCCESS,
    EXIT_TEMPLATE_ERROR,
    main,
    parse_command_line_args,
)

FULL_NAME = "Even Olsson Rogstadkjærnet"


class TestArguments:
    """Argument parsing."""

    def test_format_defaults(self) -> None:
        parsed = parse_command_line_args(["format", "kebab", "hello"])
        assert parsed.command == "format"
        assert parsed.style == "kebab"
        assert parsed.text == ["hello"]
        assert parsed.limit is None
        assert parsed.verbose is False

    def test_negative_limit_is_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_command_line_args(["format", "kebab", "--limit=-1", "hello"])
        assert exc_info.value.code == 2

    def test_unknown_style_is_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_command_line_args(["format", "title", "hello"])
        assert exc_info.value.code == 2
        assert "Unknown style 'title'" in capsys.readouterr().err

    def test_invalid_template_variable(self) -> None:
        with pytest.raises(SystemExit):
            parse_command_line_args(["render", "template.j2", "--var", "novalue"])


class TestFormatCommand:
    """The format subcommand."""

    def test_format_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["format", "kebab", FULL_NAME]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "even-olsson-rogstadkjærnet\n"

    def test_format_with_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["format", "camel", "--limit", "12", FULL_NAME]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "evenOR\n"

    def test_texts_around_options(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["format", "kebab", "hello world", "-l", "7", FULL_NAME]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "hello-world\ne-o-r\n"

    def test_unknown_option_after_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["format", "kebab", "--limit", "3", "hello", "--bogus"])
        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert "unrecognized arguments" in err
        assert "--bogus" in err

    def test_extra_arguments_outside_format(self) -> None:
        with pytest.raises(SystemExit):
            parse_command_line_args(["styles", "extra"])

    def test_format_several_texts(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["format", "SCREAMING_SNAKE", "hello world", "HTML_parser"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "HELLO_WORLD\nHTML_PARSER\n"

    def test_format_reads_stdin(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("Hello World\r\nfoo bar\n"))
        assert main(["format", "snake"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "hello_world\nfoo_bar\n"

    def test_verbose_reports_lengths(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--verbose", "format", "name", "--limit", "12", FULL_NAME]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == "Even O R\n"
        assert "name: 26 -> 8 graphemes (limit 12)" in captured.err


class TestOtherCommands:
    """The join, styles and render subcommands."""

    def test_join(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["join", "or", "a", "b", "c"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "a, b or c\n"

    def test_styles(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["styles"]) == EXIT_SUCCESS
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 8
        assert lines[0].split() == ["name", "Hello", "World", "Example"]
        assert lines[2].split() == ["camel", "helloWorldExample"]
        assert lines[-1].split() == ["screaming-kebab", "HELLO-WORLD-EXAMPLE"]

    def test_render_to_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        template = tmp_path / "struct.j2"
        template.write_text("pub struct {{ title | pascal_case }};\n", encoding="utf-8")

        assert main(["render", str(template), "--var", "title=user account"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "pub struct UserAccount;\n"

    def test_render_to_file(self, tmp_path: Path) -> None:
        template = tmp_path / "const.j2"
        template.write_text("{{ title | screaming_snake_case(7) }}={{ value }}\n", encoding="utf-8")
        output = tmp_path / "out" / "const.txt"

        exit_code = main(
            ["render", str(template), "-V", f"title={FULL_NAME}", "-V", "value=1", "--output", str(output)]
        )

        assert exit_code == EXIT_SUCCESS
        assert output.read_text(encoding="utf-8") == "E_O_R=1\n"

    def test_render_missing_template(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["render", str(tmp_path / "missing.j2")]) == EXIT_FILE_NOT_FOUND
        assert "File not found" in capsys.readouterr().err

    def test_render_template_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        template = tmp_path / "broken.j2"
        template.write_text("{{ title | }}\n", encoding="utf-8")

        assert main(["render", str(template), "--var", "title=x"]) == EXIT_TEMPLATE_ERROR
        assert "Template error" in capsys.readouterr().err

    def test_render_undefined_variable(self, tmp_path: Path) -> None:
        template = tmp_path / "needs_title.j2"
        template.write_text("{{ title | kebab_case }}\n", encoding="utf-8")

        assert main(["render", str(template)]) == EXIT_TEMPLATE_ERROR
