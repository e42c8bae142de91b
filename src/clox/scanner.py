#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from clox.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    DiagnosticSink,
)
from clox.keywords import lookup
from clox.token import Literal, Token
from clox.token_type import TokenType


class ScannerReuseError(RuntimeError):
    """Raised when a Scanner that has already started scanning is asked to scan again."""

    pass


class Scanner:
    """Lox Scanner

    This class scans a given source text and produces Tokens for the Parser.

    To use:
    Scanner("var a = 2;").scan_tokens()
    [VAR var None,
     IDENTIFIER a None,
     EQUAL = None,
     NUMBER 2 2.0,
     SEMICOLON ; None,
     EOF  None]

    Lexical errors (unexpected characters, unterminated strings) are reported
    to the reporter and the offending lexeme is dropped; scanning always runs
    to the end of the source and always finishes with an EOF Token.

    A Scanner is bound to one source and can only be used for a single scan,
    either eagerly with scan_tokens() or lazily with iter_tokens(). Scanning the
    same source again needs a new Scanner.

    Args:
        source: str. The lox source text to scan.
        reporter: Optional[DiagnosticSink]. Where to report lexical errors. A new
            DiagnosticCollector is used if none is given.

    Public Attributes:
        tokens: List[Token]. All Tokens produced by scan_tokens().
        start: int. Start index in the source for the Token currently being scanned.
        current: int. The current index in the source, this will be combined with
            the start to generate the Token lexeme.
        line: int. Current line being scanned, this is incremented whenever a
            newline character is consumed.
        start_line: int. Line the Token currently being scanned started on. This
            only differs from line for strings spanning several lines.
    """

    def __init__(self, source: str, reporter: Optional[DiagnosticSink] = None) -> None:
        self.source = source
        self.reporter: DiagnosticSink = (
            DiagnosticCollector() if reporter is None else reporter
        )
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.started = False

    def scan_tokens(self) -> List[Token]:
        """Scan the whole source text and return all scanned Tokens.

        This method will return regardless of whether or not there were errors
        during scanning, check the reporter to find out.

        Returns:
            tokens: List[Token]. All successfully scanned Tokens, ending with EOF.

        Raises:
            ScannerReuseError: If this Scanner has already been used.
        """

        self.tokens.extend(self.iter_tokens())
        return self.tokens

    def iter_tokens(self) -> Iterator[Token]:
        """Lazily scan the source text, yielding each Token as it is scanned.

        The returned iterator is finite, ends with the EOF Token, and can't be
        restarted.

        Raises:
            ScannerReuseError: If this Scanner has already been used.
        """

        if self.started:
            raise ScannerReuseError(
                "Scanner has already scanned its source, create a new Scanner"
            )

        self.started = True
        return self._scan()

    def _scan(self) -> Iterator[Token]:
        while not self.is_at_end():
            # Move the start position up to the current index prior to scanning
            # the next token
            self.start = self.current
            self.start_line = self.line
            token = self.scan_token()
            if token is not None:
                yield token

        yield Token(TokenType.EOF, "", None, self.line)

    def is_at_end(self) -> bool:
        """Check if Scanner's current position is at the end of the source."""

        return self.current >= len(self.source)

    def scan_token(self) -> Optional[Token]:
        """Scan a single lexeme starting at the current position.

        Returns:
            token: Optional[Token]. The scanned Token, or None if the lexeme does
                not produce one (whitespace, comments and lexical errors).
        """

        c = self.advance()
        match c:
            # Single character Lexemes.
            case "(":
                return self.add_empty_token(TokenType.LEFT_PAREN)
            case ")":
                return self.add_empty_token(TokenType.RIGHT_PAREN)
            case "{":
                return self.add_empty_token(TokenType.LEFT_BRACE)
            case "}":
                return self.add_empty_token(TokenType.RIGHT_BRACE)
            case ",":
                return self.add_empty_token(TokenType.COMMA)
            case ".":
                return self.add_empty_token(TokenType.DOT)
            case "-":
                return self.add_empty_token(TokenType.MINUS)
            case "+":
                return self.add_empty_token(TokenType.PLUS)
            case ";":
                return self.add_empty_token(TokenType.SEMICOLON)
            case "*":
                return self.add_empty_token(TokenType.STAR)
            # Two character Lexemes, never longer than two.
            case "!":
                return self.add_empty_token(
                    TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG
                )
            case "=":
                return self.add_empty_token(
                    TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL
                )
            case "<":
                return self.add_empty_token(
                    TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS
                )
            case ">":
                return self.add_empty_token(
                    TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER
                )
            # Division or Comment.
            case "/":
                if self.match("/"):
                    # A comment runs to the end of the line. The newline itself
                    # is left for the next scan_token so the line is counted.
                    while self.peek() != "\n" and not self.is_at_end():
                        self.advance()
                    return None

                return self.add_empty_token(TokenType.SLASH)
            # Ignore whitespace.
            case " " | "\r" | "\t":
                return None
            case "\n":
                self.line += 1
                return None
            case '"':
                return self.string()
            case _:
                if self.is_digit(c):
                    return self.number()
                elif self.is_alpha(c):
                    return self.identifier()

                # Unrecognized single character, report it but keep scanning
                # in case there are other errors further on.
                self.reporter.report(
                    self.line, DiagnosticKind.UNEXPECTED_CHARACTER.value
                )
                return None

    def identifier(self) -> Token:
        """Scan an identifier or a reserved word.

        The whole alphanumeric run is consumed before the keyword lookup, so a
        keyword is never split out of a longer identifier.

        Examples:
        print     -> Token(TokenType.PRINT,      "print",     None, 1)
        classroom -> Token(TokenType.IDENTIFIER, "classroom", None, 1)
        """

        while self.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start : self.current]
        type = lookup(text)

        return self.add_empty_token(TokenType.IDENTIFIER if type is None else type)

    def number(self) -> Token:
        """Scan a number literal.

        Integers and decimals are both parsed to a float.

        Examples:
        4   -> Token(TokenType.NUMBER, "4",   4.0, 1)
        4.2 -> Token(TokenType.NUMBER, "4.2", 4.2, 1)
        4.  -> Token(TokenType.NUMBER, "4",   4.0, 1), the "." is left for a DOT
        """

        while self.is_digit(self.peek()):
            self.advance()

        # Only take the "." if a digit follows it.
        if self.peek() == "." and self.is_digit(self.peek_next()):
            self.advance()

            while self.is_digit(self.peek()):
                self.advance()

        return self.add_token(
            TokenType.NUMBER, float(self.source[self.start : self.current])
        )

    def string(self) -> Optional[Token]:
        """Scan a string literal.

        Strings can span several lines and have no escape sequences. The lexeme
        keeps the quotes, the literal does not.

        Examples:
        "foo"      -> Token(TokenType.STRING, '"foo"',      "foo",      1)
        "foo\\nbar" -> Token(TokenType.STRING, '"foo\\nbar"', "foo\\nbar", 1)

        Returns:
            token: Optional[Token]. The STRING Token, or None if the source ended
                before the closing quote.
        """

        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1

            self.advance()

        if self.is_at_end():
            # Reported where the string was opened, which is where the user
            # needs to look.
            self.reporter.report(
                self.start_line, DiagnosticKind.UNTERMINATED_STRING.value
            )
            return None

        # The closing ".
        self.advance()

        value = self.source[self.start + 1 : self.current - 1]
        return self.add_token(TokenType.STRING, value)

    def advance(self) -> str:
        """Return the char at the Scanner's current position, then move past it."""

        current = self.source[self.current]
        self.current += 1
        return current

    def match(self, expected: str) -> bool:
        """Consume the char at the current index only if it is the expected one.

        This is used for scanning two character lexemes such as != and ==.

        Args:
            expected: str. Expected char.

        Returns:
            matched: bool. Whether or not the char matched and was consumed.
        """

        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def peek(self) -> str:
        """Return the char at the current index without consuming it, "\\0" at the end."""

        if self.is_at_end():
            return "\0"

        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the char after the current index without consuming it, "\\0" at the end."""

        if self.current + 1 >= len(self.source):
            return "\0"

        return self.source[self.current + 1]

    def is_alpha(self, c: str) -> bool:
        return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"

    def is_alpha_numeric(self, c: str) -> bool:
        return self.is_alpha(c) or self.is_digit(c)

    def is_digit(self, c: str) -> bool:
        return "0" <= c <= "9"

    def add_empty_token(self, type: TokenType) -> Token:
        """Create a Token with no literal value, such as an operator or keyword."""

        return self.add_token(type, None)

    def add_token(self, type: TokenType, literal: Literal = None) -> Token:
        """Create a Token for the lexeme between start and current.

        Args:
            type: TokenType. Type of Token being created.
            literal: Literal. Eagerly evaluated Python value of the lexeme if any,
                otherwise None.

        Returns:
            token: Token. The Token, starting on start_line.
        """

        text = self.source[self.start : self.current]

        return Token(type, text, literal, self.start_line)


@dataclass(frozen=True)
class ScanResult:
    """Tokens and diagnostics from scanning one source.

    Public Attributes:
        tokens: Tuple[Token, ...]. Every Token, ending with EOF.
        diagnostics: Tuple[Diagnostic, ...]. Every lexical error, in source order.
    """

    tokens: Tuple[Token, ...]
    diagnostics: Tuple[Diagnostic, ...]

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)


def scan(source: str) -> ScanResult:
    """Scan source with a fresh Scanner and collect its diagnostics."""

    collector = DiagnosticCollector()
    tokens = Scanner(source, collector).scan_tokens()

    return ScanResult(tuple(tokens), tuple(collector))
