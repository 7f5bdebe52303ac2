[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstrkit"
version = "0.1.0"
description = "Search, concatenation and tokenizing helpers with NUL-terminated string semantics"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "strtok", "strstr", "strchr", "memchr", "tokenizer", "nul-terminated"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cstrkit"]

[tool.pytest.ini_options]
addopts = "-ra"
