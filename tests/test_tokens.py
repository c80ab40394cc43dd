import pytest

from minishell.tokens import (
    Token,
    TokenType,
    find_token_type,
    has_token,
    is_token,
    is_word,
    new_token,
)


def test_double_quote_kind_is_eight():
    assert find_token_type('"quoted"') == 8


@pytest.mark.parametrize("c", list("|$'\"<>"))
def test_is_token_special(c):
    assert is_token(c)


@pytest.mark.parametrize("c", list("a1 /?-") + [""])
def test_is_token_plain(c):
    assert not is_token(c)


def test_has_token():
    assert has_token("echo | cat")
    assert not has_token("echo hello")
    assert not has_token("")


def test_is_word():
    assert is_word("'a|b'")
    assert is_word("$PATH|x")
    assert is_word("plain")
    assert not is_word("a>b")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("| ls", TokenType.PIPE),
        ("$HOME", TokenType.VARIABLE),
        ("'x'", TokenType.QUOTE_SINGLE),
        ('"x"', TokenType.QUOTE_DOUBLE),
        ("<< EOF", TokenType.HEREDOC),
        (">> out", TokenType.APPEND),
        ("< in", TokenType.REDIRECT_IN),
        ("> out", TokenType.REDIRECT_OUT),
        ("ls", TokenType.INVALID),
        ("", TokenType.INVALID),
    ],
)
def test_find_token_type(text, expected):
    assert find_token_type(text) == expected


def test_new_token_word_keeps_value():
    tok = new_token(TokenType.WORD, "hello", 0, True)
    assert tok == Token(TokenType.WORD, "hello", False, False, True)


def test_new_token_operator_keeps_first_char():
    tok = new_token(TokenType.PIPE, "| wc -l", 0, False)
    assert tok.type == TokenType.PIPE
    assert tok.value == "|"


def test_new_token_heredoc_and_append():
    assert new_token(TokenType.HEREDOC, "<< EOF", 0, False).value == "<<"
    assert new_token(TokenType.APPEND, ">> f", 0, False).value == ">>"


def test_new_token_variable():
    tok = new_token(TokenType.VARIABLE, "$HOME rest", 0, True)
    assert tok.type == TokenType.VARIABLE
    assert tok.value == "$"
    assert tok.new_word


def test_new_token_dollar_space_is_word():
    tok = new_token(TokenType.VARIABLE, "$ x", 0, False)
    assert tok.type == TokenType.WORD
    assert tok.value == "$"


def test_new_token_lone_dollar_is_word():
    tok = new_token(TokenType.WORD, "$", 1, False)
    assert tok.type == TokenType.WORD
    assert tok.value == "$"
    assert tok.inside_double


def test_new_token_dollar_before_quote_stays_given_type():
    tok = new_token(TokenType.VARIABLE, '$"x"', 0, False)
    assert tok.type == TokenType.VARIABLE
    assert tok.value == "$"


def test_new_token_single_quoted_dollar_not_expanded():
    tok = new_token(TokenType.WORD, "$HOME", 2, False)
    assert tok.type == TokenType.WORD
    assert tok.value == "$HOME"
    assert tok.inside_single
    assert not tok.inside_double


def test_new_token_quote_single_type_marks_single():
    tok = new_token(TokenType.QUOTE_SINGLE, "'abc'", 0, False)
    assert tok.inside_single
    assert tok.value == "'"


def test_new_token_empty_word():
    tok = new_token(TokenType.WORD, "", 1, True)
    assert tok.value == ""
    assert tok.type == TokenType.WORD
    assert tok.inside_double