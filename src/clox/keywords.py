#!/usr/bin/env python3
from types import MappingProxyType
from typing import Mapping, Optional

from clox.token_type import TokenType

# Reserved words of the language. Read-only, so a single table is shared by
# every Scanner.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)


def lookup(text: str) -> Optional[TokenType]:
    """Return the keyword TokenType spelled exactly as text, if there is one.

    Matching is case-sensitive, so "Class" is not a keyword.
    """

    return KEYWORDS.get(text)
