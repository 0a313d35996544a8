"""Command-line entry point: ``pipechain infile cmd1 cmd2 ... outfile``."""

from __future__ import annotations

import os
import sys

from pipechain.execute import PipelineError, run_pipeline
from pipechain.parse import UsageError, parse_arguments


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pipeline = parse_arguments(args)
    except UsageError as error:
        print(error)
        return 1
    try:
        run_pipeline(pipeline, os.environ)
    except PipelineError as error:
        print(f"\033[31mError: {error.reason}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())