"""Turn command-line arguments into a pipeline description."""

from __future__ import annotations

from dataclasses import dataclass, field

USAGE = "Usage: pipechain infile cmd1 cmd2 ... outfile"


class UsageError(ValueError):
    """Raised when the arguments do not describe a pipeline."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Command:
    """One stage of a pipeline: the words of a single command."""

    argv: tuple[str, ...]


@dataclass(frozen=True)
class Pipeline:
    """An input file, the commands it flows through and the output file."""

    infile: str
    outfile: str
    commands: tuple[Command, ...] = field(default_factory=tuple)


def split_command(text: str) -> list[str]:
    """Split a command string on spaces, dropping empty words.

    Only the space character separates words; tabs and quotes are kept.
    """
    return [word for word in text.split(" ") if word]


def parse_arguments(args: list[str]) -> Pipeline:
    """Build a pipeline from ``infile cmd1 cmd2 ... outfile``.

    At least two commands are required.
    """
    if len(args) < 4:
        raise UsageError()
    infile, *command_texts, outfile = args
    commands = tuple(Command(tuple(split_command(text))) for text in command_texts)
    return Pipeline(infile=infile, outfile=outfile, commands=commands)