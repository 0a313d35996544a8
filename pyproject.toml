[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipechain"
version = "0.1.0"
description = "Run a chain of commands connected by pipes, reading from one file and writing to another"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipe", "pipeline", "shell", "subprocess", "redirection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipechain = "pipechain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pipechain"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
