"""Tokenizer and recursive-descent parser for command lines."""

from __future__ import annotations

from typing import Sequence

from .command import MAX_ARGS, Command, CommandType

_WHITESPACE = " \t\n"
_OPERATOR_CHARS = "|&;"
_WORD_BREAKS = _WHITESPACE + _OPERATOR_CHARS
_COMMAND_ENDS = frozenset({"|", "&&", "||", ";", "&"})
_MULTI_OPERATORS = frozenset({";", "&&", "||"})
_SEQUENCE_OPERATORS = {
    ";": CommandType.SEQUENCE,
    "&&": CommandType.AND,
    "||": CommandType.OR,
}


def tokenize(line: str) -> list[str]:
    """Split a command line into words and the operators | || & && ;."""
    tokens: list[str] = []
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if char in _WHITESPACE:
            i += 1
            continue
        if char in _OPERATOR_CHARS:
            if char in "|&" and i + 1 < length and line[i + 1] == char:
                tokens.append(char * 2)
                i += 2
            else:
                tokens.append(char)
                i += 1
        else:
            start = i
            while i < length and line[i] not in _WORD_BREAKS:
                i += 1
            tokens.append(line[start:i])
        if len(tokens) >= MAX_ARGS:
            raise ValueError(f"too many tokens (limit {MAX_ARGS - 1})")
    return tokens


def is_multi_command(tokens: Sequence[str]) -> bool:
    """Return True if the tokens hold a ;, && or || operator."""
    return any(token in _MULTI_OPERATORS for token in tokens)


class Parser:
    """Builds a command tree from a token list."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = list(tokens)
        self.pos = 0

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def parse_command(self) -> Command | None:
        """Parse one simple command, with an optional leading or trailing &."""
        if self._peek() is None:
            return None
        cmd = Command()
        if self._peek() == "&":
            cmd.is_background = True
            self.pos += 1
        while (token := self._peek()) is not None and token not in _COMMAND_ENDS:
            cmd.argv.append(token)
            self.pos += 1
        if self._peek() == "&":
            cmd.is_background = True
            self.pos += 1
        return cmd

    def parse_pipeline(self) -> Command | None:
        """Parse commands joined by |, grouping to the left."""
        left = self.parse_command()
        while self._peek() == "|":
            self.pos += 1
            right = self.parse_command()
            left = Command(type=CommandType.PIPELINE, left=left, right=right)
        return left

    def parse_sequence(self) -> Command | None:
        """Parse pipelines joined by ;, && or ||, grouping to the left."""
        left = self.parse_pipeline()
        while (token := self._peek()) is not None and token in _SEQUENCE_OPERATORS:
            self.pos += 1
            right = self.parse_pipeline()
            left = Command(type=_SEQUENCE_OPERATORS[token], left=left, right=right)
        return left


def parse_input(tokens: Sequence[str]) -> Command | None:
    """Parse a token list into a command tree, or None if it is empty."""
    return Parser(tokens).parse_sequence()