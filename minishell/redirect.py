"""Handling of redirection, here-document, append and variable tokens.

Token sequences are lists of :class:`~minishell.tokens.Token`; handlers take
the index of the token being processed and return the index of the last
token they consumed.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from minishell.command import Command, EnvVar, expand_var
from minishell.tokens import Token, TokenType


def _glued(tokens: Sequence[Token], index: int) -> bool:
    """True when a token follows ``index`` and is glued to it."""
    return index + 1 < len(tokens) and not tokens[index + 1].new_word


def append_while(tokens: Sequence[Token], index: int) -> tuple[Optional[str], int]:
    """Walk a run of glued word tokens starting at ``index``.

    Every token stepped onto is marked as starting a new word. Returns the
    value of the word the walk stops on and its index, or ``None`` and the
    unchanged index when ``index`` is not a word.
    """
    if index >= len(tokens) or tokens[index].type != TokenType.WORD:
        return None, index
    while True:
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if (
            following is not None
            and not following.new_word
            and following.type == TokenType.WORD
        ):
            index += 1
            following.new_word = True
        else:
            return tokens[index].value, index


def _target(tokens: Sequence[Token], index: int) -> tuple[Optional[str], int]:
    if index + 1 < len(tokens):
        index += 1
    if _glued(tokens, index):
        return append_while(tokens, index)
    return tokens[index].value, index


def handle_redirect(
    cmd: Command, tokens: Sequence[Token], index: int, token_type: TokenType
) -> int:
    """Record the file named after a ``<`` or ``>`` token."""
    name, index = _target(tokens, index)
    if name is not None:
        if token_type == TokenType.REDIRECT_IN:
            cmd.infile = name
        else:
            cmd.outfile = name
    return index


def handle_heredoc(cmd: Command, tokens: Sequence[Token], index: int) -> int:
    """Record the delimiter of a ``<<`` here-document."""
    cmd.heredoc = True
    if index + 1 < len(tokens):
        index += 1
    token = tokens[index]
    cmd.heredoc_delim = token.value
    if token.inside_single or token.inside_double:
        cmd.heredoc_quoted = True
    return index


def handle_append(cmd: Command, tokens: Sequence[Token], index: int) -> int:
    """Record the file named after a ``>>`` token and switch to append mode."""
    cmd.append = True
    name, index = _target(tokens, index)
    if name is not None:
        cmd.outfile = name
    return index


def handle_variable(
    cmd: Command, tokens: Sequence[Token], index: int, env: Iterable[EnvVar]
) -> None:
    """Expand the variable whose ``$`` token sits at ``index`` into the arguments.

    Glued to a previous argument, the value is appended to it; otherwise it
    becomes a new argument. Inside single quotes the ``$`` is kept literally.
    """
    token = tokens[index]
    env = list(env)
    if not token.inside_single and cmd.args and not token.new_word:
        value = expand_var(tokens[index + 1].value, cmd, env)
        if value is not None:
            cmd.args[-1] = cmd.args[-1] + value
    elif not token.inside_single:
        value = expand_var(tokens[index + 1].value, cmd, env)
        if value is not None:
            cmd.args.append(value)
    else:
        cmd.args.append(token.value)