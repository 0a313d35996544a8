import pytest

from pipechain.parse import Command, Pipeline, UsageError, parse_arguments, split_command


def test_split_simple_command():
    assert split_command("ls -l") == ["ls", "-l"]


def test_split_collapses_repeated_spaces():
    assert split_command("  grep   foo  ") == ["grep", "foo"]


def test_split_only_spaces_separate():
    assert split_command("a\tb c") == ["a\tb", "c"]


def test_split_empty_string_gives_no_words():
    assert split_command("") == []
    assert split_command("    ") == []


def test_parse_two_commands():
    pipeline = parse_arguments(["in.txt", "cat", "wc -l", "out.txt"])
    assert pipeline == Pipeline(
        infile="in.txt",
        outfile="out.txt",
        commands=(Command(("cat",)), Command(("wc", "-l"))),
    )


def test_parse_many_commands_keeps_order():
    args = ["in", "cat", "sort -r", "uniq -c", "head -n 3", "out"]
    pipeline = parse_arguments(args)
    assert [command.argv for command in pipeline.commands] == [
        tuple(split_command(text)) for text in args[1:-1]
    ]
    assert pipeline.infile == "in"
    assert pipeline.outfile == "out"


@pytest.mark.parametrize(
    "args",
    [[], ["in"], ["in", "out"], ["in", "cat", "out"]],
)
def test_parse_too_few_arguments(args):
    with pytest.raises(UsageError):
        parse_arguments(args)


def test_usage_error_message_mentions_usage():
    with pytest.raises(UsageError, match="Usage"):
        parse_arguments(["only"])


def test_empty_command_has_no_words():
    pipeline = parse_arguments(["in", "", "cat", "out"])
    assert pipeline.commands[0].argv == ()