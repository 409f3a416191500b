[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isismock"
version = "2.0.2"
description = "Building blocks for an IS-IS mocking tool: LSP utilities, LSDB replay testing and small command-line helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["isis", "is-is", "routing", "lsp", "lsdb", "fletcher", "checksum", "cli", "mock", "testing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Testing",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isismock"]

[tool.hatch.build.targets.sdist]
include = ["isismock", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
