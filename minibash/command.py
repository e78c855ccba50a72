"""Command tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

MAX_INPUT_SIZE = 1024
MAX_ARGS = 128


class CommandType(Enum):
    """Kind of node in a command tree."""

    NORMAL = "normal"
    PIPELINE = "pipeline"
    SEQUENCE = "sequence"
    AND = "and"
    OR = "or"


_LABELS = {
    CommandType.PIPELINE: "CMD_PIPELINE",
    CommandType.SEQUENCE: "CMD_SEQUENCE (;)",
    CommandType.AND: "CMD_AND (&&)",
    CommandType.OR: "CMD_OR (||)",
}


@dataclass
class Command:
    """A simple command, or an operator joining two sub-commands."""

    type: CommandType = CommandType.NORMAL
    argv: list[str] = field(default_factory=list)
    is_background: bool = False
    left: Command | None = None
    right: Command | None = None

    @property
    def name(self) -> str | None:
        """The program name of a simple command, if any."""
        return self.argv[0] if self.argv else None

    def format_tree(self, depth: int = 0) -> str:
        """Render the tree, one node per line, indented by tabs."""
        return "".join(self._tree_lines(depth))

    def _tree_lines(self, depth: int):
        indent = "\t" * depth
        if self.type is CommandType.NORMAL:
            args = "".join(f"{arg} " for arg in self.argv)
            yield f"{indent}CMD_NORMAL (is_background: {int(self.is_background)}): {args}\n"
        else:
            yield f"{indent}{_LABELS[self.type]}\n"
        for child in (self.left, self.right):
            if child is not None:
                yield from child._tree_lines(depth + 1)


def format_tokens(tokens: Iterable[str]) -> str:
    """Render tokens one per line, each followed by a space."""
    return "".join(f"{token} \n" for token in tokens)