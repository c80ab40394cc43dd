import pytest

from minishell.syntax import ShellSyntaxError, check_quotes, check_tokens
from minishell.tokens import Token, TokenType


def word(value):
    return Token(TokenType.WORD, value)


@pytest.mark.parametrize(
    "line", ["echo hi", "echo 'hi'", 'echo "hi"', "'a\"b'", "\"it's\"", ""]
)
def test_check_quotes_balanced(line):
    assert check_quotes(line) is True


@pytest.mark.parametrize("line", ["'", '"', "echo 'hi", 'echo "a\'b\'', "'a' \"b"])
def test_check_quotes_unclosed(line):
    with pytest.raises(ShellSyntaxError, match="no closing quotes"):
        check_quotes(line)


def test_empty_tokens_is_false():
    assert check_tokens([]) is False


def test_simple_pipeline_is_valid():
    tokens = [word("ls"), Token(TokenType.PIPE, "|"), word("wc")]
    assert check_tokens(tokens) is True


def test_pipe_at_start():
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens([Token(TokenType.PIPE, "|"), word("ls")])
    assert info.value.at_start is True
    assert str(info.value) == "Syntax error, invalid token at start"


def test_lone_variable_at_start():
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens([Token(TokenType.VARIABLE, "$")])
    assert info.value.at_start is True


def test_pipe_at_end():
    with pytest.raises(ShellSyntaxError, match="pipe without command") as info:
        check_tokens([word("ls"), Token(TokenType.PIPE, "|")])
    assert info.value.at_start is False


def test_pipe_followed_by_empty_word():
    with pytest.raises(ShellSyntaxError, match="pipe without command"):
        check_tokens([word("ls"), Token(TokenType.PIPE, "|"), word("")])


def test_pipe_followed_by_pipe():
    with pytest.raises(ShellSyntaxError, match="pipe without command"):
        check_tokens(
            [word("ls"), Token(TokenType.PIPE, "|"), Token(TokenType.PIPE, "|"), word("x")]
        )


def test_pipe_followed_by_redirect_is_valid():
    tokens = [
        word("ls"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.REDIRECT_OUT, ">"),
        word("out"),
    ]
    assert check_tokens(tokens) is True


def test_heredoc_needs_word():
    with pytest.raises(ShellSyntaxError, match="near unexpected token"):
        check_tokens([word("cat"), Token(TokenType.HEREDOC, "<<")])


def test_append_with_variable_is_valid():
    tokens = [word("echo"), Token(TokenType.APPEND, ">>"), Token(TokenType.VARIABLE, "$")]
    assert check_tokens(tokens) is True


def test_redirect_needs_filename():
    with pytest.raises(ShellSyntaxError, match="expected filename"):
        check_tokens([word("ls"), Token(TokenType.REDIRECT_OUT, ">")])


def test_redirect_followed_by_variable():
    with pytest.raises(ShellSyntaxError, match="expected filename"):
        check_tokens(
            [word("ls"), Token(TokenType.REDIRECT_IN, "<"), Token(TokenType.VARIABLE, "$")]
        )


def test_redirect_then_unexpected_token():
    tokens = [
        word("ls"),
        Token(TokenType.REDIRECT_OUT, ">"),
        word("file"),
        Token(TokenType.INVALID, "x"),
    ]
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens(tokens)
    assert str(info.value) == "Syntax error: unexpected token `x'"


def test_redirect_then_pipe_is_valid():
    tokens = [
        word("ls"),
        Token(TokenType.REDIRECT_OUT, ">"),
        word("file"),
        Token(TokenType.PIPE, "|"),
        word("wc"),
    ]
    assert check_tokens(tokens) is True