"""Token kinds and the Token value produced by the monkey lexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional


class TokenKind(Enum):
    # Sentinels
    ILLEGAL = auto()
    EOF = auto()

    # Literals / identifiers
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EQ = auto()
    NOT_EQ = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()


KEYWORDS: Dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}

# Canonical spelling of every kind that carries no payload.
SPELLINGS: Dict[TokenKind, str] = {
    TokenKind.EOF: "",
    TokenKind.ASSIGN: "=",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.BANG: "!",
    TokenKind.ASTERISK: "*",
    TokenKind.SLASH: "/",
    TokenKind.LT: "<",
    TokenKind.GT: ">",
    TokenKind.EQ: "==",
    TokenKind.NOT_EQ: "!=",
    TokenKind.COMMA: ",",
    TokenKind.SEMICOLON: ";",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
}
SPELLINGS.update({kind: text for text, kind in KEYWORDS.items()})

PAYLOAD_KINDS = frozenset({TokenKind.IDENT, TokenKind.INT, TokenKind.ILLEGAL})

OPERATORS = frozenset(
    {
        TokenKind.ASSIGN,
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.BANG,
        TokenKind.ASTERISK,
        TokenKind.SLASH,
        TokenKind.LT,
        TokenKind.GT,
        TokenKind.EQ,
        TokenKind.NOT_EQ,
    }
)

DELIMITERS = frozenset(
    {
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
    }
)


def lookup_ident(ident: str) -> TokenKind:
    """Return the keyword kind for ``ident``, or IDENT for any other name."""
    return KEYWORDS.get(ident, TokenKind.IDENT)


@dataclass
class Token:
    """One lexical unit.

    Only ``kind`` and ``literal`` take part in equality; the position fields
    are metadata filled in by the lexer.
    """

    kind: TokenKind
    literal: Optional[str] = None
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)
    offset: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.literal is None:
            self.literal = SPELLINGS.get(self.kind, "")

    @property
    def is_keyword(self) -> bool:
        return self.kind in KEYWORDS.values()

    def __str__(self) -> str:
        if self.kind in PAYLOAD_KINDS:
            return f'{self.kind.name}("{self.literal}")'
        return self.kind.name


__all__ = [
    "Token",
    "TokenKind",
    "KEYWORDS",
    "SPELLINGS",
    "PAYLOAD_KINDS",
    "OPERATORS",
    "DELIMITERS",
    "lookup_ident",
]
