"""A small interactive command shell with built-ins and variable expansion."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Iterable, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import TextIO

PROMPT = "myshell> "
DEFAULT_LOG = "assem.log"
EXPORT_USAGE = "export: invalid format, use export VAR=VALUE"
TERMINATION_MESSAGE = "Child process was terminated"

_WHITESPACE = " \t\n\v\f\r"
_WORD_PATTERN = re.compile(r'[ \t\n\v\f\r]*(?:"([^"]*)"?|([^ \t\n\v\f\r]+))')
_INLINE_VARIABLE = re.compile(r"\$([^ \t\n\v\f\r]*)")


@dataclass
class CommandLine:
    """A tokenized command: its arguments, whether it runs in the background,
    and a diagnostic produced while tokenizing, if any."""

    args: list[str] = field(default_factory=list)
    background: bool = False
    error: str | None = None


def substitute_variables(
    args: Iterable[str], environ: MutableMapping[str, str]
) -> list[str]:
    """Expand arguments that start with ``$`` using ``environ``.

    A bare ``$NAME`` whose value contains spaces becomes several arguments;
    an unknown ``$NAME`` is kept as written. An argument that starts with
    ``$`` and contains spaces has every ``$NAME`` inside it replaced in place,
    unknown names expanding to nothing.
    """
    result: list[str] = []
    for arg in args:
        if not arg.startswith("$"):
            result.append(arg)
        elif " " in arg:
            result.append(
                _INLINE_VARIABLE.sub(lambda m: environ.get(m.group(1), ""), arg)
            )
        else:
            value = environ.get(arg[1:])
            if value is None:
                result.append(arg)
            elif " " in value:
                result.extend(part for part in value.split(" ") if part)
            else:
                result.append(value)
    return result


def _tokenize_export(line: str, environ: MutableMapping[str, str]) -> CommandLine:
    rest = line[6:].lstrip(_WHITESPACE).split("\n", 1)[0]
    parts = [part for part in rest.split("=") if part]
    error = None
    if len(parts) >= 2:
        environ[parts[0]] = parts[1]
    else:
        error = EXPORT_USAGE
    return CommandLine(["export", rest], False, error)


def tokenize(line: str, environ: MutableMapping[str, str]) -> CommandLine:
    """Split a command line into arguments.

    Double quotes group words, a lone ``&`` marks a background command, and
    variables are substituted unless the command is ``export``. An
    ``export VAR=VALUE`` line sets the variable immediately.
    """
    if line.startswith("export") and len(line) > 6 and line[6] in _WHITESPACE:
        return _tokenize_export(line, environ)

    args: list[str] = []
    background = False
    for match in _WORD_PATTERN.finditer(line):
        quoted, plain = match.groups()
        word = quoted if quoted is not None else plain
        if word == "&":
            background = True
        else:
            args.append(word)

    if args and args[0] != "export":
        args = substitute_variables(args, environ)
    return CommandLine(args, background)


class Shell:
    """An interactive shell session that logs child terminations to a file."""

    def __init__(
        self,
        log_path: str | os.PathLike[str] = DEFAULT_LOG,
        environ: MutableMapping[str, str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.environ: MutableMapping[str, str] = (
            os.environ if environ is None else environ
        )
        self.stdout: TextIO = sys.stdout if stdout is None else stdout
        self.stderr: TextIO = sys.stderr if stderr is None else stderr
        self._log = open(log_path, "a", encoding="utf-8")
        self._background: list[subprocess.Popen] = []

    def __enter__(self) -> Shell:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _log_termination(self) -> None:
        self._log.write(TERMINATION_MESSAGE + "\n")
        self._log.flush()

    def _reap(self) -> None:
        running = []
        for proc in self._background:
            if proc.poll() is None:
                running.append(proc)
            else:
                self._log_termination()
        self._background = running

    def _change_directory(self, rest: Sequence[str]) -> None:
        target = rest[0] if rest else None
        if target is None or target == "~":
            home = self.environ.get("HOME")
            if home:
                try:
                    os.chdir(home)
                except OSError:
                    pass
        elif target == "..":
            try:
                os.chdir("..")
            except OSError:
                pass
        else:
            try:
                os.chdir(target)
            except OSError as exc:
                self.stderr.write(f"cd: {exc.strerror}\n")

    def _export(self, rest: Sequence[str]) -> None:
        if not rest:
            return
        name, sep, value = rest[0].partition("=")
        if not sep:
            return
        if value and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        if name:
            self.environ[name] = value

    def run_builtin(self, args: Sequence[str]) -> bool:
        """Run ``exit``, ``cd``, ``export`` or ``echo``; return whether it was one.

        ``exit`` raises ``SystemExit(0)``.
        """
        name = args[0]
        if name == "exit":
            raise SystemExit(0)
        if name == "cd":
            self._change_directory(args[1:])
            return True
        if name == "export":
            self._export(args[1:])
            return True
        if name == "echo":
            self.stdout.write("".join(f"{arg} " for arg in args[1:]) + "\n")
            return True
        return False

    def run_external(self, args: Sequence[str], background: bool) -> None:
        """Start an external program, waiting for it unless ``background``."""
        self.stdout.flush()
        try:
            proc = subprocess.Popen(list(args), env=dict(self.environ))
        except OSError as exc:
            self.stderr.write(f"execvp failed: {exc.strerror}\n")
            if not background:
                self.stderr.write("Command failed with exit code 1\n")
            return

        if background:
            self._background.append(proc)
            self.stdout.write(f"backgroundHandler process with pid {proc.pid}\n")
            return

        returncode = proc.wait()
        self._log_termination()
        if returncode > 0:
            self.stderr.write(f"Command failed with exit code {returncode}\n")

    def execute(self, line: str) -> None:
        """Tokenize and run one command line."""
        self._reap()
        if line.endswith("\n"):
            line = line[:-1]
        command = tokenize(line, self.environ)
        if command.error:
            self.stderr.write(command.error + "\n")
        if not command.args:
            return
        if self.run_builtin(command.args):
            return
        self.run_external(command.args, command.background)

    def repl(self, stream: TextIO) -> None:
        """Prompt for and run commands from ``stream`` until EOF or ``exit``."""
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = stream.readline()
            if not line:
                break
            try:
                self.execute(line)
            except SystemExit:
                break

    def close(self) -> None:
        """Record finished background children and close the log."""
        if not self._log.closed:
            self._reap()
            self._log.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive session on standard input."""
    try:
        shell = Shell()
    except OSError as exc:
        print(f"fopen failed to open file shell.log: {exc.strerror}", file=sys.stderr)
        return 1
    with shell:
        shell.repl(sys.stdin)
    return 0