"""Commands executed in lab containers and their collected results."""

from __future__ import annotations

import json
import logging
import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from clabtools.exceptions import ClabError, IncorrectInputError

_log = logging.getLogger(__name__)

_SEPARATOR = "\n+++++++++++++++++++++++++++++\n\n"


class ExecFormat(str, Enum):
    """Output formats for execution results."""

    JSON = "json"
    PLAIN = "plain"


class ExecNotSupportedError(ClabError):
    """The node kind does not support command execution."""

    def __init__(self, message: str = "exec not supported for this kind") -> None:
        super().__init__(message)


def parse_exec_output_format(s: str) -> ExecFormat:
    """Parse a user supplied output format; "table" maps to plain."""
    value = s.strip().lower()
    if value == ExecFormat.JSON.value:
        return ExecFormat.JSON
    if value in (ExecFormat.PLAIN.value, "table"):
        return ExecFormat.PLAIN
    raise IncorrectInputError(
        f'cannot parse "{s}" as execution output format, '
        f'supported output formats ["json" "plain"]'
    )


@dataclass
class ExecCmd:
    """A command split into its arguments."""

    cmd: list[str] = field(default_factory=list)

    @classmethod
    def from_string(cls, cmd: str) -> "ExecCmd":
        """Split a shell-style command string; raises ValueError on bad quoting."""
        return cls(shlex.split(cmd))

    def cmd_string(self) -> str:
        return " ".join(self.cmd)


class _NotJSON(Exception):
    pass


def _reject_constant(name: str) -> Any:
    raise _NotJSON(name)


def _stdout_value(text: str) -> Any:
    """Return stdout as parsed JSON when it is valid JSON, else the raw string."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, _NotJSON):
        return text


@dataclass
class ExecResult:
    """The outcome of running one command."""

    cmd: list[str] = field(default_factory=list)
    return_code: int = 0
    stdout: str = ""
    stderr: str = ""

    def cmd_string(self) -> str:
        return " ".join(self.cmd)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cmd": list(self.cmd),
            "return-code": self.return_code,
            "stdout": _stdout_value(self.stdout),
            "stderr": self.stderr,
        }

    def dump(self, fmt: ExecFormat | str) -> str:
        if fmt == ExecFormat.JSON:
            return json.dumps(self.to_dict(), indent=2)
        if fmt == ExecFormat.PLAIN:
            return str(self)
        return ""

    def __str__(self) -> str:
        return (
            f"Cmd: {self.cmd_string()}\nReturnCode: {self.return_code}\n"
            f"StdOut:\n{self.stdout}\nStdErr:\n{self.stderr}\n"
        )


@dataclass
class ExecCollection:
    """Execution results grouped by container name."""

    entries: dict[str, list[ExecResult]] = field(default_factory=dict)

    def add(self, container: str, result: ExecResult) -> None:
        self.entries.setdefault(container, []).append(result)

    def add_all(self, container: str, results: Iterable[ExecResult]) -> None:
        self.entries.setdefault(container, []).extend(results)

    def dump(self, fmt: ExecFormat | str) -> str:
        if fmt == ExecFormat.JSON:
            data = {
                name: [r.to_dict() for r in self.entries[name]]
                for name in sorted(self.entries)
            }
            return json.dumps(data, indent=2)
        if fmt == ExecFormat.PLAIN:
            blocks = [
                f"Node: {name}\n" + "".join(str(r) for r in results)
                for name, results in self.entries.items()
                if results
            ]
            return _SEPARATOR.join(blocks)
        return ""

    def log(self, logger: logging.Logger | None = None) -> None:
        """Log each result: failures at ERROR, successes at INFO."""
        logger = logger or _log
        for name, results in self.entries.items():
            for r in results:
                if r.return_code != 0 or r.stderr:
                    logger.error(
                        'Failed to execute command "%s" on the node "%s". rc=%d,\n'
                        "stdout:\n%s\nstderr:\n%s",
                        r.cmd_string(), name, r.return_code, r.stdout, r.stderr,
                    )
                else:
                    logger.info(
                        'Executed command "%s" on the node "%s". stdout:\n%s',
                        r.cmd_string(), name, r.stdout,
                    )