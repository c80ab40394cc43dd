# minishell

The front end of a small shell. It splits a command line into tokens,
checks lines and token lists for syntax errors, looks variables up in an
environment and fills in the redirections and arguments of a `Command`.
It also carries the small character, string, byte-buffer and linked-list
helpers the shell is built on.

## Modules

| Module | Contents |
| --- | --- |
| `minishell.lexer` | `lexer(line, env)` turns a line into a list of `Token`s; also `skip`, `add_word`, `handle_no_quote`, `check_flags` and `LexerError`. |
| `minishell.tokens` | `TokenType`, `Token`, `is_token`, `is_word`, `has_token`, `find_token_type`, `new_token`. |
| `minishell.syntax` | `check_quotes(text)` and `check_tokens(tokens)`; problems are raised as `ShellSyntaxError`. |
| `minishell.command` | The `Command` and `EnvVar` dataclasses, `expand_var`, `shift_left` and `join_last_args`. |
| `minishell.redirect` | `handle_redirect`, `handle_heredoc`, `handle_append`, `handle_variable` and `append_while`, which record `<`, `>`, `<<`, `>>` targets and `$` values on a `Command`. |
| `minishell.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`, `atoi`, `itoa`, and the writers `put_char`, `put_str`, `put_endl`, `put_nbr`. |
| `minishell.strings` | `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strtrim`, `split`, `strmapi`, `striteri`. |
| `minishell.memory` | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` on `bytearray`s. |
| `minishell.linked_list` | `LinkedList` of `Node`s with `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration. |

## Examples

Tokenising a line:

```python
from minishell.lexer import lexer

tokens = lexer("echo hi")
[(t.value, t.new_word) for t in tokens]   # [("echo", False), ("hi", True)]
```

Checking a line before tokenising it:

```python
from minishell.syntax import ShellSyntaxError, check_quotes

try:
    check_quotes('echo "unterminated')
except ShellSyntaxError as err:
    print(err)   # Error: no closing quotes
```

Classifying the start of a token:

```python
from minishell.tokens import TokenType, find_token_type

assert find_token_type(">>out") is TokenType.APPEND
assert find_token_type("<in") is TokenType.REDIRECT_IN
```

Looking up a variable:

```python
from minishell.command import Command, EnvVar, expand_var

env = [EnvVar("HOME", "/home/user")]
expand_var("HOME", None, env)                   # "/home/user"
expand_var("?", Command(exit_code=2), env)      # "2"
```

The text helpers take and return Python strings:

```python
from minishell.chars import atoi, itoa
from minishell.strings import split, strtrim

atoi("   -123aa456")       # -123
itoa(-42)                  # "-42"
split("  a  b c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"
```

## What it does not do

This package is a library only. It has no interactive prompt and no
command-line entry point, and it does not run anything: there is no
process launching, no pipe wiring, no built-in commands, no reading of
here-document bodies and no opening of redirection files. There is also no
single function that turns a whole token list into a chain of `Command`s;
the functions in `minishell.redirect` and `minishell.command` edit one
`Command` at a time.

## Tests

The tests use pytest and live in `tests/`; install the `test` extra to get
it.