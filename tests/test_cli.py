from io import StringIO
from pathlib import Path

import pytest

import clox


@pytest.fixture
def stderr(monkeypatch: pytest.MonkeyPatch) -> StringIO:
    # The CLI writes usage and file errors to the stderr it imported.
    stream = StringIO()
    monkeypatch.setattr(clox, "stderr", stream)
    return stream


def run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(clox, "argv", ["clox", *args])
    clox.main()


def test_run_source(monkeypatch, capsys):
    run_main(monkeypatch, "run", "var a;")

    assert capsys.readouterr().out.splitlines() == [
        "VAR var None",
        "IDENTIFIER a None",
        "SEMICOLON ; None",
        "EOF  None",
    ]


def test_run_stdin(monkeypatch, capsys):
    monkeypatch.setattr(clox, "stdin", StringIO("1\n2"))

    run_main(monkeypatch, "run", "-")

    assert capsys.readouterr().out.splitlines() == [
        "NUMBER 1 1.0",
        "NUMBER 2 2.0",
        "EOF  None",
    ]


def test_run_source_with_error_exits_65(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run", "1 @")

    assert exc.value.code == 65
    captured = capsys.readouterr()
    assert captured.err == "[line 1] Error: Unexpected character.\n"
    assert captured.out.splitlines() == ["NUMBER 1 1.0", "EOF  None"]


def test_run_file(monkeypatch, capsys, tmp_path: Path):
    script = tmp_path / "script.lox"
    script.write_text('print "hi";\n')

    run_main(monkeypatch, str(script))
    run_main(monkeypatch, "run_file", str(script))

    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == [
        "PRINT print None",
        'STRING "hi" hi',
        "SEMICOLON ; None",
        "EOF  None",
    ]
    assert lines[4:] == lines[:4]


def test_missing_file_exits_66(monkeypatch, stderr, tmp_path: Path):
    missing = tmp_path / "missing.lox"

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run_file", str(missing))

    assert exc.value.code == 66
    assert stderr.getvalue() == f"File at {missing} not found\n"


def test_print_tokens(monkeypatch, capsys, tmp_path: Path):
    script = tmp_path / "script.lox"
    script.write_text("a\n  >= b")

    run_main(monkeypatch, "print_tokens", str(script))

    assert capsys.readouterr().out.splitlines() == [
        "1: [line 1] IDENTIFIER a None",
        "2: [line 2] GREATER_EQUAL >= None",
        "3: [line 2] IDENTIFIER b None",
        "4: [line 2] EOF  None",
    ]


def test_unknown_command_exits_66(monkeypatch, stderr):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "interpret", "x")

    assert exc.value.code == 66
    assert stderr.getvalue() == "unrecognized command: interpret\n"


def test_too_many_arguments_exits_64(monkeypatch, stderr):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run", "a", "b")

    assert exc.value.code == 64
    assert stderr.getvalue() == "Usage: clox [command] [script]\n"


def test_prompt_scans_each_line_and_keeps_going_after_errors(monkeypatch, capsys):
    lines = iter(["@", '"open', "ok", ""])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))

    run_main(monkeypatch, "run_prompt")

    captured = capsys.readouterr()
    assert captured.err.splitlines() == [
        "[line 1] Error: Unexpected character.",
        "[line 1] Error: Unterminated string.",
    ]
    assert captured.out.splitlines() == [
        "EOF  None",
        "EOF  None",
        "IDENTIFIER ok None",
        "EOF  None",
    ]


def test_prompt_stops_at_end_of_input(monkeypatch, capsys):
    def end_of_input(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", end_of_input)

    run_main(monkeypatch)

    assert capsys.readouterr().out == ""


def test_invalid_utf8_is_an_unexpected_character(monkeypatch, capsys, tmp_path: Path):
    script = tmp_path / "script.lox"
    script.write_bytes(b"var a = \xff;\n")

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run_file", str(script))

    assert exc.value.code == 65
    captured = capsys.readouterr()
    assert captured.err == "[line 1] Error: Unexpected character.\n"
    assert captured.out.splitlines() == [
        "VAR var None",
        "IDENTIFIER a None",
        "EQUAL = None",
        "SEMICOLON ; None",
        "EOF  None",
    ]


def test_directory_is_not_a_script(monkeypatch, stderr, tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run_file", str(tmp_path))

    assert exc.value.code == 66
    assert stderr.getvalue() == f"File at {tmp_path} not found\n"
