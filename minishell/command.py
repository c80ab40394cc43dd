"""Command records, environment entries and helpers that edit them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass
class EnvVar:
    """One environment variable; hidden ones never expand."""

    key: str
    value: Optional[str]
    hidden: bool = False


@dataclass
class Command:
    """A simple command with its arguments and redirections."""

    cmd: Optional[str] = None
    args: list[str] = field(default_factory=list)
    infile: Optional[str] = None
    outfile: Optional[str] = None
    heredoc: bool = False
    heredoc_delim: Optional[str] = None
    heredoc_quoted: bool = False
    append: bool = False
    exit_code: int = 0
    exit_status2: bool = False
    next: Optional["Command"] = None


def shift_left(args: list) -> Optional[str]:
    """Drop the first argument in place and return it."""
    if not args:
        return None
    return args.pop(0)


def join_last_args(cmd: Command, index: int) -> None:
    """Glue argument ``index`` onto the one before it.

    The joined argument replaces ``index - 1``; the list ends there, as
    the removed slot terminates the argument vector.
    """
    args = cmd.args
    if index < 1 or index >= len(args):
        return
    if args[index - 1] is None or args[index] is None:
        return
    args[index - 1] = args[index - 1] + args[index]
    del args[index:]


def expand_var(
    name: str, cmd: Optional[Command], env: Iterable[EnvVar]
) -> Optional[str]:
    """Look up ``name`` in ``env``.

    A hidden variable expands to ``None``. With a command at hand, ``?``
    expands to its exit code and marks the command as having used it.
    Nothing is found in an empty environment.
    """
    for var in env:
        if name == var.key:
            if var.hidden:
                return None
            return var.value
        if cmd is not None and name == "?":
            cmd.exit_status2 = True
            return str(cmd.exit_code)
    return None