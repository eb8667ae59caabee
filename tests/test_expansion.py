from tinyshell.env import Environment
from tinyshell.expansion import replace_env_vars, replace_tilde
from tinyshell.tokens import (
    DOUBLE_QUOTE,
    NO_QUOTE,
    SINGLE_QUOTE,
    Token,
    TokenType,
    tokenize,
)

HOME = "/home/alice"


def word(content, in_quote=NO_QUOTE, concat=False):
    return Token(TokenType.WORD, content, in_quote=in_quote, concat=concat)


def test_tilde_alone():
    tokens = [word("~")]
    replace_tilde(tokens, HOME)
    assert tokens[0].content == HOME


def test_tilde_slash_path():
    tokens = [word("~/docs")]
    replace_tilde(tokens, HOME)
    assert tokens[0].content == HOME + "/docs"


def test_tilde_left_alone_when_quoted_named_or_glued():
    tokens = [
        word("~", in_quote=DOUBLE_QUOTE),
        word("~bob"),
        word("~", concat=True),
        word("a~"),
    ]
    replace_tilde(tokens, HOME)
    assert [t.content for t in tokens] == ["~", "~bob", "~", "a~"]


def test_env_var_replaced_and_marked():
    env = Environment(["HOME=/home/alice"])
    tokens = [word("$HOME")]
    replace_env_vars(tokens, env, 0)
    assert tokens[0].content == "/home/alice"
    assert tokens[0].is_var is True


def test_missing_env_var_becomes_empty():
    tokens = [word("$NOPE")]
    replace_env_vars(tokens, Environment(), 0)
    assert tokens[0].content == ""
    assert tokens[0].is_var is True


def test_declared_only_var_is_empty():
    tokens = [word("$A")]
    replace_env_vars(tokens, Environment(["A"]), 0)
    assert tokens[0].content == ""


def test_status_replaced():
    tokens = [word("$?"), word("$?abc")]
    replace_env_vars(tokens, Environment(), 42)
    assert tokens[0].content == str(42)
    assert tokens[1].content == str(42) + "abc"


def test_double_quoted_var_expanded():
    tokens = [word("$USER", in_quote=DOUBLE_QUOTE)]
    replace_env_vars(tokens, Environment(["USER=alice"]), 0)
    assert tokens[0].content == "alice"


def test_single_quoted_and_bare_dollar_untouched():
    tokens = [word("$USER", in_quote=SINGLE_QUOTE), word("$"), word("$ x")]
    replace_env_vars(tokens, Environment(["USER=alice"]), 0)
    assert [t.content for t in tokens] == ["$USER", "$", "$ x"]
    assert not any(t.is_var for t in tokens)


def test_glued_dollar_before_quote_disappears():
    tokens = [word("$", concat=True), word("text", in_quote=DOUBLE_QUOTE, concat=True)]
    replace_env_vars(tokens, Environment(), 0)
    assert tokens[0].content == ""
    assert tokens[1].content == "text"


def test_expansion_of_tokenized_line():
    tokens = tokenize("echo $HOME")
    replace_env_vars(tokens, Environment(["HOME=/home/alice"]), 0)
    assert [t.content for t in tokens] == ["echo", "/home/alice"]


def test_tilde_of_tokenized_line():
    tokens = tokenize("cd ~/src")
    replace_tilde(tokens, HOME)
    assert [t.content for t in tokens] == ["cd", HOME + "/src"]