"""
Monkey Lexer Package

Implements a hand-written lexical analyzer (tokenizer) for the Monkey language.

Key Features:
- Pull-based: one token per next_token() call, EOF repeats once reached
- One character of lookahead, maximal munch for names and integers
- Illegal characters are returned as tokens, never raised
- Configurable whitespace set and integer overflow policy
- Diagnostics for illegal tokens and likely keyword typos
"""

from .tokens import Token, TokenType, KEYWORDS, classify_identifier
from .config import LexerConfig, WhitespaceMode, OverflowPolicy
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "classify_identifier",
    "LexerConfig",
    "WhitespaceMode",
    "OverflowPolicy",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
]
