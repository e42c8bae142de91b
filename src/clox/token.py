#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Union

from clox.token_type import TokenType

# Eagerly evaluated value of a literal lexeme: float for NUMBER, str for STRING,
# None for everything else.
Literal = Union[None, float, str]


@dataclass(frozen=True)
class Token:
    """Scanner Token

    A Token is one classified lexeme of the source text. Tokens are created by
    the Scanner in source order and never change afterwards.

    For example:
    var x = 10;

    Scans to:
    Token(TokenType.VAR,        "var", None, 1)
    Token(TokenType.IDENTIFIER, "x",   None, 1)
    Token(TokenType.EQUAL,      "=",   None, 1)
    Token(TokenType.NUMBER,     "10",  10.0, 1)
    Token(TokenType.SEMICOLON,  ";",   None, 1)
    Token(TokenType.EOF,        "",    None, 1)

    Args:
        type: TokenType. Category of the lexeme.
        lexeme: str. Exact span of source this Token was scanned from. Only the
            EOF Token has an empty lexeme.
        literal: Literal. The value of a NUMBER or STRING lexeme (quotes
            stripped for strings), otherwise None.
        line: int. 1-based line the lexeme starts on. For EOF this is the line
            the scan ended on.
    """

    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __repr__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return self.type.name + " " + self.lexeme + " " + str(self.literal)
