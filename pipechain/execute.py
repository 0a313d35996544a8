"""Run a pipeline of commands between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from pipechain.parse import Command, Pipeline
from pipechain.paths import find_path

NOT_FOUND_STATUS = 127
FAILURE_STATUS = 1
_ERROR_PREFIX = "\033[31mError"


class PipelineError(Exception):
    """Raised when the pipeline cannot start, e.g. the input is unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class StageResult:
    """How one command of the pipeline finished."""

    command: Command
    returncode: int


def _report(error: OSError) -> None:
    reason = os.strerror(error.errno) if error.errno else str(error)
    print(f"{_ERROR_PREFIX}: {reason}", file=sys.stderr)


def _open_output(path: str) -> int | None:
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as error:
        _report(error)
        return None


def _start(
    command: Command, input_fd: int, output_fd: int | None, env: Mapping[str, str]
) -> subprocess.Popen | int:
    """Start one stage; return its process, or its status if it never ran."""
    if output_fd is None:
        return FAILURE_STATUS
    name = command.argv[0] if command.argv else ""
    executable = find_path(name, env) if name else None
    if executable is None:
        os.write(output_fd, f"Command not found: {name}\n".encode())
        return NOT_FOUND_STATUS
    try:
        return subprocess.Popen(
            list(command.argv),
            executable=executable,
            stdin=input_fd,
            stdout=output_fd,
            env=dict(env),
        )
    except OSError as error:
        _report(error)
        return FAILURE_STATUS


def run_pipeline(
    pipeline: Pipeline, env: Mapping[str, str] | None = None
) -> list[StageResult]:
    """Run every command, each reading the previous one's output.

    The first reads the input file and the last writes the output file.
    Returns one result per command, in order.
    """
    if not pipeline.commands:
        raise ValueError("a pipeline needs at least one command")
    environment = dict(os.environ if env is None else env)
    try:
        input_fd = os.open(pipeline.infile, os.O_RDONLY)
    except OSError as error:
        reason = os.strerror(error.errno) if error.errno else str(error)
        raise PipelineError(pipeline.infile, reason) from error

    started: list[subprocess.Popen | int] = []
    last = len(pipeline.commands) - 1
    for index, command in enumerate(pipeline.commands):
        if index < last:
            next_input, output_fd = os.pipe()
        else:
            next_input, output_fd = None, _open_output(pipeline.outfile)
        try:
            started.append(_start(command, input_fd, output_fd, environment))
        finally:
            os.close(input_fd)
            if output_fd is not None:
                os.close(output_fd)
        input_fd = next_input

    return [
        StageResult(
            command=command,
            returncode=stage if isinstance(stage, int) else stage.wait(),
        )
        for command, stage in zip(pipeline.commands, started)
    ]