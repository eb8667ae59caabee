import pytest

from tinyshell.commands import Command, FileRedirect, Redirection


@pytest.mark.parametrize(
    "operator, kind",
    [
        ("<", Redirection.INPUT),
        (">", Redirection.OUTPUT),
        ("<<", Redirection.HEREDOC),
        (">>", Redirection.OUTPUT_APPEND),
    ],
)
def test_from_operator_known(operator, kind):
    assert Redirection.from_operator(operator) is kind


@pytest.mark.parametrize("operator", ["|", "", "none", ">>>"])
def test_from_operator_unknown(operator):
    assert Redirection.from_operator(operator) is Redirection.NONE


def test_new_command_is_empty():
    command = Command()
    assert command.argv == []
    assert command.redirects == []
    assert command.pid is None


def test_add_redirect_keeps_order():
    command = Command(argv=["cat"])
    first = FileRedirect("in.txt", Redirection.INPUT)
    second = FileRedirect("out.txt", Redirection.OUTPUT)
    command.add_redirect(first)
    command.add_redirect(second)
    assert command.redirects == [first, second]


def test_commands_do_not_share_lists():
    a = Command()
    b = Command()
    a.add_redirect(FileRedirect("x", Redirection.OUTPUT))
    assert b.redirects == []


def test_file_redirect_defaults():
    redirect = FileRedirect("EOF", Redirection.HEREDOC)
    assert redirect.content is None
    assert redirect.is_heredoc is False