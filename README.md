# pipechain

`pipechain` runs a chain of commands with pipes between them. The first
command reads from an input file, and the last command writes to an output
file. It does the same job as this shell line:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```
pip install .
```

## Command-line use

```
pipechain infile "cmd1 args" "cmd2 args" [... "cmdN args"] outfile
```

You must give at least two commands. Each command is passed as one argument.
It is split on space characters into the program name and its arguments. Empty
words are dropped. Tabs and quotes are kept as ordinary characters. There is no
quoting and no shell expansion.

The program name is looked up in each directory listed in `PATH`, in order. A
name that starts with `/` or `.` is used as a path as it stands. In both cases
the file must exist and be executable.

Example:

```
pipechain input.txt "grep error" "sort" "uniq -c" report.txt
```

What happens in each case:

- **Output file.** It is created or truncated, and it gets mode `0644`. If it
  cannot be opened, an error is printed to standard error. The last stage is
  then not run, and the run goes on.
- **Command not found.** The line `Command not found: <name>` is written where
  that stage's output would go: the next pipe, or the output file for the last
  stage. That stage counts as exiting with status 127.
- **Input file.** If it cannot be opened, an error is printed to standard error
  and the exit status is 1.
- **Too few arguments.** A usage line is printed and the exit status is 1.
- **Otherwise.** The exit status is 0, whatever the commands returned.

## Library use

```python
import os
from pipechain.parse import parse_arguments
from pipechain.execute import run_pipeline

pipeline = parse_arguments(["input.txt", "grep error", "wc -l", "count.txt"])
results = run_pipeline(pipeline, os.environ)
for result in results:
    print(result.command.argv, result.returncode)
```

The `pipechain.parse` module:

- `parse_arguments(args)` turns an argument list into a `Pipeline`. The list is
  `infile cmd1 cmd2 ... outfile`. If the list has fewer than four items it
  raises `UsageError`.
- `Pipeline` has the fields `infile`, `outfile` and `commands`, which is a tuple
  of `Command`.
- `Command` has one field, `argv`, which is a tuple of words.
- `split_command(text)` splits one command string on spaces and drops empty
  words.

The `pipechain.paths` module:

- `get_path(env)` returns the `PATH` value of an environment mapping, or `None`.
- `find_path(name, env)` returns the executable path that would be run for
  `name`, or `None` if there is none.

The `pipechain.execute` module:

- `run_pipeline(pipeline, env=None)` starts every stage and waits for each one.
  It returns a list of `StageResult` (with the fields `command` and
  `returncode`), one for each command, in order. If `env` is `None`, the
  current environment is used. It raises `PipelineError` (with `path` and
  `reason`) if the input file cannot be opened. It raises `ValueError` if the
  pipeline has no commands.

## Running the tests

```
pip install ".[test]"
pytest
```