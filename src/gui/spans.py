"""Map monkey tokens to highlight spans in editor text coordinates."""

from __future__ import annotations

from typing import List, Tuple

from monkey.lexer import Lexer
from monkey.token import DELIMITERS, OPERATORS, Token, TokenKind

KEYWORD = "keyword"
NUMBER = "number"
IDENTIFIER = "identifier"
OPERATOR = "operator"
DELIMITER = "delimiter"
ILLEGAL = "illegal"

CATEGORIES = (KEYWORD, NUMBER, IDENTIFIER, OPERATOR, DELIMITER, ILLEGAL)


def category_for(tok: Token) -> str:
    kind = tok.kind
    if tok.is_keyword:
        return KEYWORD
    if kind is TokenKind.INT:
        return NUMBER
    if kind is TokenKind.IDENT:
        return IDENTIFIER
    if kind in OPERATORS:
        return OPERATOR
    if kind in DELIMITERS:
        return DELIMITER
    return ILLEGAL


def _byte_to_text_index(text: str) -> List[int]:
    # Qt addresses text in UTF-16 code units, so astral characters count twice.
    index: List[int] = []
    pos = 0
    for c in text:
        index.extend([pos] * len(c.encode("utf-8")))
        pos += 2 if ord(c) > 0xFFFF else 1
    index.append(pos)
    return index


def token_spans(text: str) -> List[Tuple[int, int, str]]:
    """Return ``(start, length, category)`` for every token in ``text``.

    Illegal bytes inside a multibyte character collapse onto that character,
    so each character is covered at most once.
    """
    index = _byte_to_text_index(text)
    spans: List[Tuple[int, int, str]] = []
    for tok in Lexer(text):
        if tok.kind is TokenKind.EOF:
            break
        start, end = index[tok.offset], index[tok.end]
        if end > start:
            spans.append((start, end - start, category_for(tok)))
    return spans
