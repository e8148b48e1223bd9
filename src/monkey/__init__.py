from .lexer import Lexer, LexerError, tokenize
from .token import KEYWORDS, Token, TokenKind, lookup_ident

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "LexerError",
    "tokenize",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_ident",
]
