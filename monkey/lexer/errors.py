"""
Error handling for the Monkey lexer.

The lexer itself never raises: an unrecognized character comes back as an
ILLEGAL token. This module turns those tokens into readable diagnostics for
the layers that do want to stop or report, and holds the exception they
raise.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import DEFAULT_MAX_INTEGER
from .tokens import Token, TokenType, KEYWORDS


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    token_index: Optional[int] = None  # Position in the token stream

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"

        if self.token_index is not None:
            result += f"  --> token #{self.token_index}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised by strict tokenization when an illegal token is found.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        token: Optional[Token] = None,
        token_index: Optional[int] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            token_index=token_index
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Helpers that suggest what the author probably meant.
    """

    @staticmethod
    def suggest_keyword_corrections(word: str) -> List[str]:
        """Suggest keywords a typo or two away from `word`, closest first."""
        if word in KEYWORDS:
            return []

        # Short names are close to every short keyword, so allow fewer edits
        if len(word) < 2:
            limit = 0
        elif len(word) <= 3:
            limit = 1
        else:
            limit = 2

        scored = []
        for keyword in KEYWORDS:
            distance = ErrorRecovery._edit_distance(word.lower(), keyword)
            if 0 < distance <= limit:
                scored.append((distance, keyword))

        return [keyword for _, keyword in sorted(scored)][:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Integer literal out of range",
    "W001": "Identifier resembles a keyword",
}

# Characters people reach for that Monkey does not have
_UNSUPPORTED_HINTS = {
    '"': "String literals are not supported.",
    "'": "Character literals are not supported.",
    '_': "Identifiers must start with a letter; '_' is only allowed after the first character.",
    '[': "Index and array syntax is not supported.",
    ']': "Index and array syntax is not supported.",
    '.': "Floating-point literals and member access are not supported.",
    '#': "Comments are not supported.",
    '&': "Logical operators other than '!' are not supported.",
    '|': "Logical operators other than '!' are not supported.",
}


def create_illegal_character_diagnostic(char: str, token_index: Optional[int] = None) -> Diagnostic:
    """Create an error diagnostic for an illegal character."""
    help_text = _UNSUPPORTED_HINTS.get(char)

    if help_text is None:
        if char.isprintable():
            help_text = f"The character '{char}' is not valid in Monkey source code."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"Invalid character: {char!r}",
        severity="error",
        code="L001",
        help_text=help_text,
        token_index=token_index
    )


def create_integer_overflow_diagnostic(digits: str, limit: int, token_index: Optional[int] = None) -> Diagnostic:
    """Create an error diagnostic for an out-of-range integer literal."""
    return Diagnostic(
        message=f"Integer literal out of range: {digits}",
        severity="error",
        code="L002",
        help_text=f"Integer literals must not exceed {limit}.",
        token_index=token_index
    )


def diagnose(
    token: Token,
    token_index: Optional[int] = None,
    max_integer: int = DEFAULT_MAX_INTEGER
) -> Diagnostic:
    """Build the diagnostic for an ILLEGAL token."""
    if token.type != TokenType.ILLEGAL:
        raise ValueError(f"Only ILLEGAL tokens have diagnostics, got {token.type.name}")

    # ASCII digits are never illegal on their own, only as a rejected literal
    if token.lexeme.isascii() and token.lexeme.isdigit():
        return create_integer_overflow_diagnostic(token.lexeme, max_integer, token_index)

    return create_illegal_character_diagnostic(token.lexeme, token_index)


def create_keyword_typo_warning(token: Token, token_index: Optional[int] = None) -> Optional[Diagnostic]:
    """Warn when an identifier is a likely misspelling of a keyword."""
    if token.type != TokenType.IDENTIFIER:
        return None

    suggestions = ErrorRecovery.suggest_keyword_corrections(token.lexeme)
    if not suggestions:
        return None

    return Diagnostic(
        message=f"Identifier {token.lexeme!r} looks like a keyword",
        severity="warning",
        code="W001",
        help_text=f"Did you mean '{suggestions[0]}'?",
        suggestions=suggestions,
        token_index=token_index
    )


def error_from_token(
    token: Token,
    token_index: Optional[int] = None,
    max_integer: int = DEFAULT_MAX_INTEGER
) -> LexerError:
    """Wrap the diagnostic for an ILLEGAL token in a LexerError."""
    diagnostic = diagnose(token, token_index, max_integer)
    return LexerError(
        message=diagnostic.message,
        code=diagnostic.code,
        help_text=diagnostic.help_text,
        suggestions=diagnostic.suggestions,
        token=token,
        token_index=token_index
    )
