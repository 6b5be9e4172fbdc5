from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_USAGE = 2  # argparse errors
EXIT_COMMAND_FAILURE = 3


class ErrorKind(str, Enum):
    COMMAND_FAILURE = "command_failure"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True, slots=True)
class AppError(Exception):
    """A controlled, user-facing error.

    Carries the process exit code the CLI should terminate with.
    """

    exit_code: int
    code: str
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code} ({self.exit_code}): {self.message}"


@dataclass(frozen=True, slots=True)
class CommandFailure(AppError):
    """The filesystem-usage command produced no usable output.

    Fatal for a collection pass: nothing collected so far is emitted.
    """

    exit_code: int = EXIT_COMMAND_FAILURE
    code: str = ErrorKind.COMMAND_FAILURE.value
    message: str = "filesystem usage command failed"
    command: str = ""
