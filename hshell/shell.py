"""The interactive and scripted command loop."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from collections.abc import Callable, Mapping
from typing import IO

from .aliases import AliasTable
from .chain import expand_variables, should_run, split_chain
from .environment import Environment
from .history import History, history_file
from .path import find_path, is_command
from .text import remove_comments, split_words

__all__ = ["PROMPT", "Shell", "main"]

PROMPT = "$ "
_ARG_DELIMS = " \t"
_BLANK = " \t\n"


def _stream_target(stream: IO[str]) -> int:
    """Return a file descriptor a child can write to, or PIPE to capture instead."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE


class Shell:
    """A small shell: builtins, aliases, variables, chaining and PATH lookup."""

    def __init__(
        self,
        name: str = "hsh",
        env: Environment | Mapping[str, str] | None = None,
        input_stream: IO[str] | None = None,
        output: IO[str] | None = None,
        error: IO[str] | None = None,
        interactive: bool = False,
    ) -> None:
        self.name = name
        if isinstance(env, Environment):
            self.env = env
        else:
            self.env = Environment.from_mapping(os.environ if env is None else env)
        self.input = sys.stdin if input_stream is None else input_stream
        self.output = sys.stdout if output is None else output
        self.error = sys.stderr if error is None else error
        self.interactive = interactive
        self.status = 0
        self.line_count = 0
        self.history = History()
        self.aliases = AliasTable()
        self._count_line = False
        self._builtins: dict[str, Callable[[list[str]], None]] = {
            "env": self._builtin_env,
            "history": self._builtin_history,
            "setenv": self._builtin_setenv,
            "unsetenv": self._builtin_unsetenv,
            "alias": self._builtin_alias,
        }

    def run(self) -> int:
        """Read and execute lines until end of input; return the last status."""
        while True:
            if self.interactive:
                self.output.write(PROMPT)
                self.output.flush()
            line = self._read_line()
            if line is None:
                if self.interactive:
                    self.output.write("\n")
                break
            self.execute_line(line)
        self._save_history()
        self.output.flush()
        self.error.flush()
        return self.status

    def _read_line(self) -> str | None:
        while True:
            try:
                line = self.input.readline()
            except KeyboardInterrupt:
                self.output.write("\n" + PROMPT)
                self.output.flush()
                continue
            return line or None

    def _save_history(self) -> None:
        path = history_file(self.env.get("HOME"))
        if path is None:
            return
        with contextlib.suppress(OSError):
            self.history.save(path)

    def execute_line(self, line: str) -> int:
        """Run one input line, with its chained commands; return the resulting status."""
        if line.endswith("\n"):
            line = line[:-1]
        self._count_line = True
        line = remove_comments(line)
        self.history.add(line)
        for command in split_chain(line):
            if not should_run(command.op, self.status):
                break
            self.run_command(command.text)
        return self.status

    def run_command(self, text: str) -> int:
        """Run a single command (no chaining); return the resulting status."""
        argv = split_words(text, _ARG_DELIMS) or [text]
        argv[0] = self.aliases.expand(argv[0])
        argv = expand_variables(argv, self.status, os.getpid(), self.env)
        builtin = self._builtins.get(argv[0])
        if builtin is not None:
            self.line_count += 1
            builtin(argv)
        else:
            self._find_command(text, argv)
        return self.status

    def print_error(self, command: str, message: str) -> None:
        """Write ``name: line: command: message`` to the error stream."""
        self.error.write(f"{self.name}: {self.line_count}: {command}: {message}")

    def _find_command(self, text: str, argv: list[str]) -> None:
        if self._count_line:
            self.line_count += 1
            self._count_line = False
        if not text.strip(_BLANK):
            return
        search = self.env.get("PATH")
        path = find_path(search, argv[0])
        if path is not None:
            self._spawn(path, argv)
        elif (
            self.interactive or search or argv[0].startswith("/")
        ) and is_command(argv[0]):
            self._spawn(argv[0], argv)
        else:
            self.status = 127
            self.print_error(argv[0], "not found\n")

    def _spawn(self, path: str, argv: list[str]) -> None:
        self.output.flush()
        self.error.flush()
        stdout = _stream_target(self.output)
        stderr = _stream_target(self.error)
        try:
            completed = subprocess.run(
                argv,
                executable=path,
                env=self.env.to_dict(),
                stdout=stdout,
                stderr=stderr,
                check=False,
            )
        except PermissionError:
            self.status = 126
            self.print_error(argv[0], "Permission denied\n")
            return
        except OSError:
            self.status = 1
            return
        if stdout == subprocess.PIPE and completed.stdout:
            self.output.write(completed.stdout.decode("utf-8", errors="replace"))
        if stderr == subprocess.PIPE and completed.stderr:
            self.error.write(completed.stderr.decode("utf-8", errors="replace"))
        code = completed.returncode
        self.status = code if code >= 0 else -code
        if self.status == 126:
            self.print_error(argv[0], "Permission denied\n")

    def _builtin_env(self, argv: list[str]) -> None:
        self.output.write("".join(entry + "\n" for entry in self.env))

    def _builtin_history(self, argv: list[str]) -> None:
        self.output.write(self.history.format())

    def _builtin_setenv(self, argv: list[str]) -> None:
        if len(argv) != 3:
            self.error.write("Incorrect number of arguements\n")
            return
        self.env.set(argv[1], argv[2])

    def _builtin_unsetenv(self, argv: list[str]) -> None:
        if len(argv) == 1:
            self.error.write("Too few arguements.\n")
            return
        for name in argv[1:]:
            self.env.unset(name)

    def _builtin_alias(self, argv: list[str]) -> None:
        if len(argv) == 1:
            self.output.write(self.aliases.format_all())
            return
        for word in argv[1:]:
            if "=" in word:
                self.aliases.define(word)
            else:
                with contextlib.suppress(KeyError):
                    self.output.write(self.aliases.format_entry(word))


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def main(argv: list[str] | None = None) -> int:
    """Run the shell on a script file given as the only argument, or on stdin."""
    args = list(sys.argv if argv is None else argv)
    name = args[0] if args else "hsh"
    env = Environment.from_mapping(os.environ)
    with contextlib.ExitStack() as stack:
        if len(args) == 2:
            try:
                stream: IO[str] = stack.enter_context(
                    open(args[1], encoding="utf-8", errors="replace")
                )
            except PermissionError:
                return 126
            except FileNotFoundError:
                sys.stderr.write(f"{name}: 0: Can't open {args[1]}\n")
                sys.stderr.flush()
                return 127
            except OSError:
                return 1
            interactive = False
        else:
            stream = sys.stdin
            interactive = _stdin_is_tty()
        shell = Shell(name, env, stream, sys.stdout, sys.stderr, interactive)
        path = history_file(env.get("HOME"))
        if path is not None:
            shell.history.load(path)
        status = shell.run()
    if not interactive and status:
        return status
    return 0