"""Syntax checks on raw input lines and token sequences."""

from __future__ import annotations

from typing import Optional, Sequence

from minishell.tokens import Token, TokenType, is_token


class ShellSyntaxError(ValueError):
    """Raised for input the shell refuses to run.

    ``at_start`` is true when the offending token opens the line.
    """

    def __init__(self, message: str, at_start: bool = False) -> None:
        super().__init__(message)
        self.at_start = at_start


_PIPE_FOLLOWERS = frozenset(
    {TokenType.WORD, TokenType.VARIABLE, TokenType.REDIRECT_IN, TokenType.REDIRECT_OUT}
)
_WORDLIKE = frozenset({TokenType.WORD, TokenType.VARIABLE})


def check_quotes(text: str) -> bool:
    """Return True when every quote in ``text`` is closed."""
    i = 0
    length = len(text)
    while i < length:
        quote = text[i]
        if quote in ("'", '"'):
            end = text.find(quote, i + 1)
            if end < 0:
                raise ShellSyntaxError("Error: no closing quotes")
            i = end
        i += 1
    return True


def _check_token(token: Token, following: Optional[Token], after: Optional[Token]) -> None:
    if token.type == TokenType.PIPE:
        if following is None or following.value == "":
            raise ShellSyntaxError("Syntax error: pipe without command")
        if following.type not in _PIPE_FOLLOWERS:
            raise ShellSyntaxError("Syntax error: pipe without command")
    elif token.type in (TokenType.HEREDOC, TokenType.APPEND):
        if following is None or following.type not in _WORDLIKE:
            raise ShellSyntaxError("Syntax error near unexpected token")
    elif token.type in (TokenType.REDIRECT_IN, TokenType.REDIRECT_OUT):
        if following is None or following.type != TokenType.WORD:
            raise ShellSyntaxError("Syntax error: expected filename")
        if (
            after is not None
            and not is_token(after.value[:1])
            and after.type != TokenType.WORD
        ):
            raise ShellSyntaxError(f"Syntax error: unexpected token `{after.value}'")


def check_tokens(tokens: Sequence[Token]) -> bool:
    """Validate a token sequence.

    Returns False for an empty sequence and True when it is valid; raises
    :class:`ShellSyntaxError` otherwise.
    """
    if not tokens:
        return False
    first = tokens[0]
    if first.type == TokenType.PIPE or (
        first.type == TokenType.VARIABLE and len(tokens) == 1
    ):
        raise ShellSyntaxError("Syntax error, invalid token at start", at_start=True)
    padded = list(tokens) + [None, None]
    for token, following, after in zip(tokens, padded[1:], padded[2:]):
        _check_token(token, following, after)
    return True