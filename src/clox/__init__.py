#!/usr/bin/env python3
from pathlib import Path
from sys import argv, exit, stderr, stdin

from clox.lox import Lox
from clox.scanner import Scanner


def main() -> None:
    """Main entrypoint for the Lox scanner.

    This function is invoked if the clox package is executed directly, or via
    the clox CLI entrypoint.

    With no arguments it will start an interactive prompt that prints the
    Tokens for every line entered.

    If the argument is a file, it will be scanned and its Tokens printed.

    Otherwise, the following commands are provided:
    clox run_prompt <- Run the interactive prompt
    clox run <source_or_stdin> <- Scan a source string, - for stdin.
    clox run_file <file> <- Scan a Lox source at a given path.
    clox print_tokens <file> <- Print a numbered listing of a file's Tokens.
    """

    # First argument in argv is always the script itself in Python
    if len(argv) == 2:
        if argv[1] == "run_prompt":
            run_prompt()
            return

        run_file(argv[1])
    elif len(argv) == 3:
        command = argv[1]
        match command:
            case "run":
                source = argv[2]
                if source == "-":
                    try:
                        source = stdin.read()
                    except KeyboardInterrupt:
                        return

                run_source(source)
            case "run_file":
                run_file(argv[2])
            case "print_tokens":
                print_tokens(argv[2])
            case _:
                print(f"unrecognized command: {command}", file=stderr)
                exit(66)

    elif len(argv) > 3:
        print("Usage: clox [command] [script]", file=stderr)
        exit(64)
    else:
        run_prompt()


def read_script(path: str) -> str:
    script_path = Path(path)
    if not script_path.is_file():
        print(f"File at {script_path} not found", file=stderr)
        exit(66)

    # Undecodable bytes become U+FFFD, which the Scanner reports as unexpected.
    return script_path.read_text(encoding="utf-8", errors="replace")


def run_source(source: str) -> None:
    lox = Lox()
    lox.run(source)

    # Indicate an error in the exit code.
    if lox.had_error:
        exit(65)


def run_file(path: str) -> None:
    run_source(read_script(path))


def run_prompt() -> None:
    lox = Lox()
    try:
        while True:
            line = input("> ")

            if not line:
                break

            # Every line is scanned on its own, strings and comments can't
            # continue onto the next one.
            lox.run(line)

            # Reset error flag since this is an interactive session.
            lox.reset()
    except (KeyboardInterrupt, EOFError):
        return


def print_tokens(path: str) -> None:
    # Numbered listing including the line each Token starts on, which the
    # plain Token representation leaves out.
    lox = Lox()
    tokens = Scanner(read_script(path), lox).scan_tokens()

    for i, token in enumerate(tokens, 1):
        print(f"{i}: [line {token.line}] {token}")

    if lox.had_error:
        exit(65)


if __name__ == "__main__":
    main()
