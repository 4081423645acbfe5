"""
Monkey Lexer - turns source text into tokens

Single pass, one character of lookahead. Every call to next_token() skips
whitespace and hands back exactly one token; nothing is ever raised, an
unrecognized character just becomes an ILLEGAL token and the caller decides
what to do with it.
"""

import logging
from typing import Iterator, List, Optional

from .config import LexerConfig, OverflowPolicy, DEFAULT_CONFIG
from .tokens import (
    Token, TokenType, EOF_TOKEN, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    classify_identifier
)
from .errors import Diagnostic, LexerError, diagnose, error_from_token

logger = logging.getLogger(__name__)


class Lexer:
    """
    Monkey lexical analyzer.

    Holds a cursor into the source string. next_token() is the whole
    contract; tokenize() and iteration are loops over it.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            config: Whitespace and integer overflow settings, defaults if None
        """
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.pos = 0
        self.illegal_tokens: List[Token] = []

        self._is_whitespace = self.config.whitespace_predicate()
        # Index of the next token to be returned, for diagnostics only
        self._token_count = 0
        self._illegal_indices: List[int] = []

    def next_token(self) -> Token:
        """Scan and return the next token, EOF forever once input runs out."""
        self._skip_whitespace()

        ch = self._read_char()
        if ch is None:
            return EOF_TOKEN

        token = self._scan_token(ch)
        if token.type == TokenType.ILLEGAL:
            self.illegal_tokens.append(token)
            self._illegal_indices.append(self._token_count)
        self._token_count += 1

        return token

    def _scan_token(self, ch: str) -> Token:
        """Classify the token starting with the already consumed `ch`."""
        if ch in SINGLE_CHAR_TOKENS:
            return SINGLE_CHAR_TOKENS[ch]

        if ch in TWO_CHAR_TOKENS:
            alone, doubled = TWO_CHAR_TOKENS[ch]
            if self._peek_char() == '=':
                self._read_char()
                return doubled
            return alone

        if ch.isalpha():
            return self._read_identifier()

        if '0' <= ch <= '9':
            return self._read_integer()

        return Token(TokenType.ILLEGAL, ch, ch)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.

        Returns:
            List of tokens ending with the EOF token
        """
        tokens = list(self)
        tokens.append(EOF_TOKEN)
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until EOF (the EOF token itself is not yielded)."""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def _read_char(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _peek_char(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self._is_whitespace(self.source[self.pos]):
            self.pos += 1

    def _read_identifier(self) -> Token:
        """Read the rest of an identifier whose first letter is already consumed."""
        start_pos = self.pos - 1

        while self.pos < len(self.source) and _is_identifier_continue(self.source[self.pos]):
            self.pos += 1

        return classify_identifier(self.source[start_pos:self.pos])

    def _read_integer(self) -> Token:
        """Read the rest of a decimal integer whose first digit is already consumed."""
        start_pos = self.pos - 1

        while self.pos < len(self.source) and '0' <= self.source[self.pos] <= '9':
            self.pos += 1

        lexeme = self.source[start_pos:self.pos]
        value = int(lexeme)

        if value > self.config.max_integer:
            policy = self.config.integer_overflow
            if policy is OverflowPolicy.SATURATE:
                value = self.config.max_integer
            elif policy is OverflowPolicy.ILLEGAL:
                return Token(TokenType.ILLEGAL, lexeme, lexeme)

        return Token(TokenType.INT, lexeme, value)

    def has_errors(self) -> bool:
        """Check if the lexer has produced any ILLEGAL tokens so far."""
        return len(self.illegal_tokens) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get a diagnostic for every ILLEGAL token produced so far."""
        return [
            diagnose(token, index, self.config.max_integer)
            for token, index in zip(self.illegal_tokens, self._illegal_indices)
        ]

    def first_error(self) -> Optional[LexerError]:
        """Return a LexerError for the first ILLEGAL token, or None."""
        if not self.illegal_tokens:
            return None
        return error_from_token(
            self.illegal_tokens[0], self._illegal_indices[0], self.config.max_integer
        )


def _is_identifier_continue(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


def tokenize_string(source: str, config: Optional[LexerConfig] = None, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Lexer configuration
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If strict and an ILLEGAL token was produced
    """
    lexer = Lexer(source, config)
    tokens = lexer.tokenize()
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))

    if lexer.has_errors():
        logger.warning("Found %d illegal token(s)", len(lexer.illegal_tokens))
        if strict:
            raise lexer.first_error()

    return tokens


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file (read as UTF-8)
        config: Lexer configuration
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If strict and an ILLEGAL token was produced
        OSError: If file cannot be read
    """
    logger.debug("Reading %s", filepath)
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, config, strict)
