[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibash"
version = "0.1.0"
description = "A small interactive shell with pipelines, command lists and a few built-in commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "bash", "command line", "pipeline", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minibash = "minibash.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["minibash"]

[tool.pytest.ini_options]
addopts = "-ra"
