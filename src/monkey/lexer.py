"""
monkey language lexer.

Pull-based scanner over an immutable byte buffer: every call to
``next_token`` skips whitespace and classifies exactly one token, using at
most one byte of lookahead and never backtracking. Unrecognised bytes come
back as ILLEGAL tokens; whether that is fatal is left to the caller (see
``scan(strict=True)``).
"""

from __future__ import annotations

import string
from typing import Iterator, List, Optional, Union

from .token import Token, TokenKind, lookup_ident

NUL = 0
NEWLINE = ord("\n")

WHITESPACE = frozenset(b" \t\n\r")
LETTERS = frozenset((string.ascii_letters + "_").encode("ascii"))
DIGITS = frozenset(string.digits.encode("ascii"))

SINGLE_CHAR_TOKENS = {
    ord("+"): TokenKind.PLUS,
    ord("-"): TokenKind.MINUS,
    ord("*"): TokenKind.ASTERISK,
    ord("/"): TokenKind.SLASH,
    ord("<"): TokenKind.LT,
    ord(">"): TokenKind.GT,
    ord(","): TokenKind.COMMA,
    ord(";"): TokenKind.SEMICOLON,
    ord("("): TokenKind.LPAREN,
    ord(")"): TokenKind.RPAREN,
    ord("{"): TokenKind.LBRACE,
    ord("}"): TokenKind.RBRACE,
}

# First byte -> (kind alone, kind when followed by '=')
TWO_CHAR_TOKENS = {
    ord("="): (TokenKind.ASSIGN, TokenKind.EQ),
    ord("!"): (TokenKind.BANG, TokenKind.NOT_EQ),
}

Source = Union[str, bytes, bytearray, memoryview]


class LexerError(Exception):
    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.token = token


def _illegal_literal(ch: int) -> str:
    if 0x20 <= ch < 0x7F:
        return chr(ch)
    return f"\\x{ch:02x}"


class Lexer:
    def __init__(self, source: Source):
        if isinstance(source, str):
            source = source.encode("utf-8")
        self.input = bytes(source)
        self.position = 0
        self.read_position = 0
        self.ch = NUL
        self.line = 1
        self.col = 0
        self.read_char()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return

    def scan(self, strict: bool = False) -> List[Token]:
        tokens: List[Token] = []
        for tok in self:
            if strict and tok.kind is TokenKind.ILLEGAL:
                raise LexerError(
                    f"Illegal character {tok.literal!r} at {tok.line}:{tok.col}", tok
                )
            tokens.append(tok)
        return tokens

    def next_token(self) -> Token:
        self.skip_whitespace()

        start, line, col = self.position, self.line, self.col
        ch = self.ch

        if self.at_end():
            # EOF does not advance, so repeated calls keep returning it.
            return Token(TokenKind.EOF, "", line, col, start, start)

        if ch in TWO_CHAR_TOKENS:
            single, double = TWO_CHAR_TOKENS[ch]
            if self.peek_char() == ord("="):
                self.read_char()
                kind = double
            else:
                kind = single
        elif ch in SINGLE_CHAR_TOKENS:
            kind = SINGLE_CHAR_TOKENS[ch]
        elif ch in LETTERS:
            ident = self.read_identifier()
            return Token(lookup_ident(ident), ident, line, col, start, self.position)
        elif ch in DIGITS:
            number = self.read_number()
            return Token(TokenKind.INT, number, line, col, start, self.position)
        else:
            self.read_char()
            return Token(
                TokenKind.ILLEGAL, _illegal_literal(ch), line, col, start, self.position
            )

        self.read_char()
        return Token(kind, None, line, col, start, self.position)

    def at_end(self) -> bool:
        return self.position >= len(self.input)

    def read_char(self) -> None:
        if self.ch == NEWLINE:
            self.line += 1
            self.col = 1
        else:
            self.col += 1

        if self.read_position >= len(self.input):
            self.ch = NUL
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> int:
        """Return the byte after the current one without consuming it."""
        if self.read_position >= len(self.input):
            return NUL
        return self.input[self.read_position]

    def read_identifier(self) -> str:
        start = self.position
        while not self.at_end() and self.ch in LETTERS:
            self.read_char()
        return self.input[start : self.position].decode("ascii")

    def read_number(self) -> str:
        start = self.position
        while not self.at_end() and self.ch in DIGITS:
            self.read_char()
        return self.input[start : self.position].decode("ascii")

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.ch in WHITESPACE:
            self.read_char()


def tokenize(source: Source, strict: bool = False) -> List[Token]:
    """Lex ``source`` completely; the result always ends with an EOF token."""
    return Lexer(source).scan(strict)


__all__ = ["Lexer", "LexerError", "tokenize"]
