"""Turn an input line into a flat list of tokens.

Unquoted text is split into words, operators (``|``, ``<``, ``>``, ``<<``,
``>>``) and ``$`` markers. A ``/`` or ``?`` outside quotes becomes a token
of its own. Single-quoted text becomes one literal word. Double-quoted
text is cut at ``'``, ``$``, ``/``, ``?`` and spaces, each of which becomes
its own token, so that variables inside it can still be expanded later.
Every token records whether it starts a new shell word.
"""

from __future__ import annotations

from typing import Iterable, List

from minishell.command import EnvVar, expand_var
from minishell.tokens import Token, TokenType, find_token_type, is_token, new_token

_WORD_STOPS = frozenset(" /?")
_DOUBLE_SPECIALS = frozenset("'$/? ")
_DOUBLE_QUOTE = 1
_SINGLE_QUOTE = 2


class LexerError(ValueError):
    """Raised when a line cannot be split into tokens."""


def _space_before(text: str, i: int) -> bool:
    return i > 0 and text[i - 1] == " "


def skip(text: str, i: int) -> int:
    """Index of the first non-space character at or after ``i``."""
    length = len(text)
    while i < length and text[i] == " ":
        i += 1
    return i


def add_word(text: str, i: int) -> tuple[Token, int]:
    """Read an unquoted word starting at ``i``.

    The word ends at a token character, a space, ``/`` or ``?``; it may be
    empty. Returns the word token and the index just past the word.
    """
    end = i
    length = len(text)
    while end < length and not is_token(text[end]) and text[end] not in _WORD_STOPS:
        end += 1
    token = new_token(TokenType.WORD, text[i:end], 0, _space_before(text, i))
    return token, end


def handle_no_quote(text: str, tokens: List[Token], i: int) -> int:
    """Append the operator or ``$`` token that starts at ``i``.

    Returns the index of the operator's last character.
    """
    token_type = find_token_type(text[i:])
    new_word = i > 1 and text[i - 1] == " "
    tokens.append(new_token(token_type, text[i:], 0, new_word))
    if token_type in (TokenType.HEREDOC, TokenType.APPEND):
        i += 1
    return i


def _handle_plain(text: str, tokens: List[Token], i: int) -> int:
    if text[i] in "/?":
        tokens.append(new_token(TokenType.WORD, text[i], 0, _space_before(text, i)))
        i += 1
    token, i = add_word(text, i)
    tokens.append(token)
    return i


def _handle_single(text: str, tokens: List[Token], i: int, new_word: bool) -> int:
    end = text.find("'", i)
    if end < 0:
        raise LexerError("no closing quote")
    tokens.append(new_token(TokenType.WORD, text[i:end], _SINGLE_QUOTE, new_word))
    return end


def _handle_double(text: str, tokens: List[Token], i: int, new_word: bool) -> int:
    length = len(text)
    start = i
    while i < length and text[i] != '"':
        c = text[i]
        if c not in _DOUBLE_SPECIALS:
            i += 1
            continue
        if i > start:
            tokens.append(
                new_token(TokenType.WORD, text[start:i], _DOUBLE_QUOTE, new_word)
            )
            new_word = False
        piece = text[i:] if c == "$" else c
        tokens.append(new_token(TokenType.WORD, piece, _DOUBLE_QUOTE, new_word))
        new_word = False
        i += 1
        start = i
    if i >= length:
        raise LexerError("no closing quote")
    if i > start:
        tokens.append(new_token(TokenType.WORD, text[start:i], _DOUBLE_QUOTE, new_word))
    return i


def _handle_quote(
    text: str, tokens: List[Token], i: int, token_type: TokenType
) -> int:
    """Lex a quoted section opening at ``i``; return the closing quote's index."""
    new_word = _space_before(text, i)
    if i + 1 < len(text) and text[i + 1] == text[i]:
        tokens.append(new_token(TokenType.WORD, "", _DOUBLE_QUOTE, new_word))
        return i + 1
    if token_type == TokenType.QUOTE_DOUBLE:
        return _handle_double(text, tokens, i + 1, new_word)
    return _handle_single(text, tokens, i + 1, new_word)


def check_flags(tokens: List[Token], env: Iterable[EnvVar]) -> None:
    """Fix word boundaries around ``$`` tokens, in place.

    The name after a ``$`` takes over the ``$`` token's new-word flag. When
    the variable is unset, a quoted token right after the name inherits the
    flag too and an unquoted one is glued on. A ``$`` with nothing after it
    becomes a plain word.
    """
    env = list(env)
    for k, token in enumerate(tokens):
        if token.type != TokenType.VARIABLE:
            continue
        if k + 1 >= len(tokens):
            token.type = TokenType.WORD
            continue
        following = tokens[k + 1]
        previous = token.new_word
        value = expand_var(following.value, None, env)
        if value is None and following.value[:1] != "?" and len(token.value) == 1:
            following.new_word = previous
            if k + 2 < len(tokens):
                after = tokens[k + 2]
                if after.inside_single or after.inside_double:
                    after.new_word = previous
                else:
                    after.new_word = False
        following.new_word = previous


def lexer(line: str, env: Iterable[EnvVar] = ()) -> List[Token]:
    """Split ``line`` into tokens.

    Raises :class:`LexerError` when a quote is left open.
    """
    env = list(env)
    tokens: List[Token] = []
    length = len(line)
    i = 0
    while i < length:
        i = skip(line, i)
        if i < length and is_token(line[i]):
            token_type = find_token_type(line[i:])
            if token_type in (TokenType.QUOTE_SINGLE, TokenType.QUOTE_DOUBLE):
                i = _handle_quote(line, tokens, i, token_type)
            else:
                i = handle_no_quote(line, tokens, i)
            if i < length:
                i += 1
        i = skip(line, i)
        if i < length and not is_token(line[i]):
            i = _handle_plain(line, tokens, i)
    check_flags(tokens, env)
    return tokens