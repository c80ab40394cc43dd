"""Token kinds, classification of characters and token construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_TOKEN_CHARS = frozenset("|$'\"<>")


class TokenType(IntEnum):
    """Kinds of lexical tokens."""

    WORD = 0
    PIPE = 1
    REDIRECT_IN = 2
    REDIRECT_OUT = 3
    APPEND = 4
    HEREDOC = 5
    VARIABLE = 6
    QUOTE_SINGLE = 7
    QUOTE_DOUBLE = 8
    INVALID = 9


@dataclass
class Token:
    """A lexical token with its quoting and word-boundary flags."""

    type: TokenType
    value: str
    inside_single: bool = False
    inside_double: bool = False
    new_word: bool = False


def _at(text: str, i: int) -> str:
    """Character at ``i`` or an empty string past the end."""
    return text[i] if 0 <= i < len(text) else ""


def is_token(c: str) -> bool:
    """True for characters that start a special token."""
    return len(c) == 1 and c in _TOKEN_CHARS


def is_word(text: str) -> bool:
    """True when ``text`` can be taken as a plain word."""
    if not text:
        return True
    if text[0] == "'" and text[-1] == "'":
        return True
    if text[0] == "$":
        return True
    return not has_token(text)


def has_token(text: str) -> bool:
    """True when ``text`` contains any special token character."""
    return any(is_token(c) for c in text)


def find_token_type(text: str) -> TokenType:
    """Classify the token that starts at the beginning of ``text``."""
    first, second = _at(text, 0), _at(text, 1)
    if first == "|":
        return TokenType.PIPE
    if first == "$":
        return TokenType.VARIABLE
    if first == "'":
        return TokenType.QUOTE_SINGLE
    if first == '"':
        return TokenType.QUOTE_DOUBLE
    if first == "<":
        return TokenType.HEREDOC if second == "<" else TokenType.REDIRECT_IN
    if first == ">":
        return TokenType.APPEND if second == ">" else TokenType.REDIRECT_OUT
    return TokenType.INVALID


def new_token(
    token_type: TokenType, value: str, quote: int, new_word: bool
) -> Token:
    """Build a token from the text at the current lexing position.

    ``quote`` is 1 inside double quotes, 2 inside single quotes, 0 otherwise.
    Word tokens keep the whole ``value``; other kinds keep only their operator.
    A ``$`` followed by a name outside single quotes becomes a variable token.
    """
    first, second = _at(value, 0), _at(value, 1)
    if first == "$" and second in ("", '"', "'"):
        text = "$"
    elif token_type == TokenType.WORD:
        text = value
    elif token_type == TokenType.HEREDOC:
        text = "<<"
    elif token_type == TokenType.APPEND:
        text = ">>"
    else:
        text = first

    token = Token(
        type=TokenType(token_type),
        value=text,
        inside_double=quote == 1,
        inside_single=quote != 1
        and (quote == 2 or token_type == TokenType.QUOTE_SINGLE),
        new_word=bool(new_word),
    )

    if first == "$" and quote != 2 and second not in ("'", '"'):
        token.type = TokenType.VARIABLE
        token.value = "$"
        if second in ("", " "):
            token.type = TokenType.WORD
    return token