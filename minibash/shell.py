"""Interactive prompt loop and the command-line entry point."""

from __future__ import annotations

import argparse
import os
import socket
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .builtins import ShellExit, cat, cd, ls, pwd
from .executor import Executor
from .parser import is_multi_command, parse_input, tokenize


def _strip_line(line: str) -> str:
    return line.split("\n", 1)[0]


@dataclass
class UserInfo:
    """Who is logged in, on which host, and where the session starts."""

    username: str
    password: str = field(repr=False)
    hostname: str
    current_path: str


def get_user_info(stdin: TextIO, out: TextIO) -> UserInfo:
    """Greet the user and read a username and password."""
    out.write("Welcome to my Bash Shell!\n")
    out.write("Enter username: ")
    out.flush()
    username = _strip_line(stdin.readline())
    out.write("Enter password: ")
    out.flush()
    password = _strip_line(stdin.readline())
    return UserInfo(
        username=username,
        password=password,
        hostname=socket.gethostname(),
        current_path=os.getcwd(),
    )


class Shell:
    """Reads command lines, runs built-ins directly and hands the rest on."""

    def __init__(
        self,
        user: UserInfo,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.user = user
        self.stdin = stdin if stdin is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.executor = Executor(self.out, self.err)
        self.executor.current_path = user.current_path

    @property
    def current_path(self) -> str:
        return self.executor.current_path

    @current_path.setter
    def current_path(self, value: str) -> None:
        self.executor.current_path = value

    def prompt(self) -> str:
        """The prompt, with the home directory shown as ~."""
        home = os.environ.get("HOME")
        head = f"{self.user.username}@{self.user.hostname}:"
        if home is not None and self.current_path.startswith(home):
            return f"{head}~{self.current_path[len(home):]}$ "
        return f"{head}{self.current_path}$ "

    def run_line(self, line: str) -> bool:
        """Run one command line; return False when the session should end."""
        line = _strip_line(line)
        if not line:
            return True
        try:
            tokens = tokenize(line)
        except ValueError as exc:
            self.err.write(f"minibash: {exc}\n")
            return True
        cmd = parse_input(tokens)
        if cmd is None:
            return True

        name = None if is_multi_command(tokens) else cmd.name
        arg = cmd.argv[1] if len(cmd.argv) > 1 else None
        if name == "exit":
            self.out.write("logout\n")
            return False
        if name == "pwd":
            pwd(cmd.is_background, self.out)
        elif name == "cd":
            if cd(arg, self.err) == 0:
                self.current_path = os.getcwd()
        elif name == "ls":
            show_all = arg is not None and "-a" in arg
            ls(cmd.is_background, show_all, self.current_path, self.out)
        elif name == "cat":
            cat(cmd.is_background, arg, self.out, self.err)
        else:
            try:
                self.executor.execute(cmd)
            except ShellExit:
                return False
        return True

    def run(self) -> int:
        """Prompt and run lines until exit or end of input."""
        while True:
            self.out.write(self.prompt())
            self.out.flush()
            line = self.stdin.readline()
            if not line:
                self.out.write("\n")
                return 0
            if not self.run_line(line):
                return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on the standard streams."""
    parser = argparse.ArgumentParser(prog="minibash", description="A small interactive shell.")
    parser.parse_args(argv)
    user = get_user_info(sys.stdin, sys.stdout)
    return Shell(user, sys.stdin, sys.stdout, sys.stderr).run()


if __name__ == "__main__":
    sys.exit(main())