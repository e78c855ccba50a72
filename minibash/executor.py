"""Runs command trees by starting programs."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import Iterator, TextIO

from .builtins import ShellExit, cd
from .command import Command, CommandType

EXIT_FAILURE = 1


def _fileno(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


class Executor:
    """Executes command trees, writing to the given output streams."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.current_path = os.getcwd()
        self.background: list[subprocess.Popen] = []

    def execute(self, cmd: Command | None) -> int:
        """Run a command tree and return the exit status of the last command run."""
        if cmd is None:
            return 0
        if cmd.type is CommandType.NORMAL:
            return self._execute_normal(cmd)
        if cmd.type is CommandType.SEQUENCE:
            self.execute(cmd.left)
            return self.execute(cmd.right)
        if cmd.type is CommandType.AND:
            status = self._execute_condition(cmd.left)
            return self.execute(cmd.right) if status == 0 else status
        if cmd.type is CommandType.OR:
            status = self._execute_condition(cmd.left)
            return self.execute(cmd.right) if status != 0 else status
        return self._execute_pipeline(cmd)

    def _execute_normal(self, cmd: Command) -> int:
        if cmd.name == "exit":
            self.out.write("logout\n")
            raise ShellExit()
        if cmd.name == "cd":
            return self._cd(cmd)
        return self._run_simple(cmd, wait=not cmd.is_background)

    def _execute_condition(self, cmd: Command | None) -> int:
        if cmd is None:
            return 0
        if cmd.type is not CommandType.NORMAL:
            return self.execute(cmd)
        if cmd.name == "cd":
            return self._cd(cmd)
        return self._run_simple(cmd, wait=True)

    def _cd(self, cmd: Command) -> int:
        status = cd(cmd.argv[1] if len(cmd.argv) > 1 else None, self.err)
        if status == 0:
            self.current_path = os.getcwd()
        return status

    def _flush(self) -> None:
        self.out.flush()
        self.err.flush()

    def _launch(self, argv: list[str], label: str, **kwargs) -> subprocess.Popen | None:
        try:
            if not argv:
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))
            return subprocess.Popen(argv, stderr=_fileno(self.err), **kwargs)
        except OSError as exc:
            self.err.write(f"{label}: {exc.strerror or exc}\n")
            return None

    def _collect(self, proc: subprocess.Popen) -> int:
        output, _ = proc.communicate()
        if output:
            self.out.write(output.decode(errors="replace"))
        return proc.returncode

    def _run_simple(self, cmd: Command, wait: bool) -> int:
        self._flush()
        out_fd = _fileno(self.out)
        capture = wait and out_fd is None
        stdout = subprocess.PIPE if capture else out_fd
        proc = self._launch(cmd.argv, "execvp failed", stdout=stdout)
        if proc is None:
            return EXIT_FAILURE
        if not wait:
            self.background.append(proc)
            return 0
        return self._collect(proc)

    def _stages(self, cmd: Command | None) -> Iterator[Command | None]:
        if cmd is not None and cmd.type is CommandType.PIPELINE:
            yield from self._stages(cmd.left)
            yield from self._stages(cmd.right)
        else:
            yield cmd

    def _execute_pipeline(self, cmd: Command) -> int:
        stages = list(self._stages(cmd))
        if any(stage is None or stage.type is not CommandType.NORMAL for stage in stages):
            self.err.write("minibash: missing command in pipeline\n")
            return EXIT_FAILURE
        self._flush()
        out_fd = _fileno(self.out)
        procs: list[tuple[Command, subprocess.Popen | None]] = []
        upstream = None
        last_index = len(stages) - 1
        for index, stage in enumerate(stages):
            if index < last_index:
                stdout = subprocess.PIPE
                label = "execvp left failed"
            else:
                capture = out_fd is None and not stage.is_background
                stdout = subprocess.PIPE if capture else out_fd
                label = "execvp right failed"
            stdin = upstream if upstream is not None else (
                subprocess.DEVNULL if index else None
            )
            proc = self._launch(stage.argv, label, stdin=stdin, stdout=stdout)
            if upstream is not None:
                upstream.close()
            upstream = proc.stdout if proc is not None and index < last_index else None
            procs.append((stage, proc))

        status = 0
        for index, (stage, proc) in enumerate(procs):
            is_last = index == last_index
            if proc is None:
                status = EXIT_FAILURE if is_last else status
                continue
            if stage.is_background:
                self.background.append(proc)
                if is_last:
                    status = 0
            elif is_last and proc.stdout is not None:
                status = self._collect(proc)
            else:
                proc.wait()
                if is_last:
                    status = proc.returncode
        return status