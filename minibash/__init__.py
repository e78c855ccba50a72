"""A small interactive shell: tokenizer, parser, built-in commands and an executor for pipelines and command lists."""

__version__ = "0.1.0"