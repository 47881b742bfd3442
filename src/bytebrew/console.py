#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console helpers shared by the bytebrew commands."""

from __future__ import annotations

import sys
from typing import Any, NoReturn

import click
from provide.foundation.console import perr
from provide.foundation.logger import get_logger

from bytebrew.config.defaults import STDIN_MARKER


class CommandLogger:
    """Structured logger for a CLI command, resolved on every call.

    The lookup follows the log level applied by the CLI group, including for
    loggers created at import time.
    """

    def __init__(self, name: str) -> None:
        self.name = f"bytebrew.commands.{name}"

    def __getattr__(self, attr: str) -> Any:
        return getattr(get_logger(self.name), attr)


def get_command_logger(name: str) -> CommandLogger:
    """Get a structured logger scoped to a CLI command."""
    return CommandLogger(name)


def read_value(value: str | None) -> str:
    """Return the argument, or standard input when it is omitted or ``-``.

    Only the trailing line break is removed from standard input.
    """
    if value is None or value == STDIN_MARKER:
        return sys.stdin.read().rstrip("\r\n")
    return value


def fail(log: Any, action: str, error: Exception) -> NoReturn:
    """Log and report a failed command, then abort with exit code 1."""
    log.error(f"{action} failed", error=str(error), error_type=type(error).__name__)
    perr(f"❌ {action} failed: {error}")
    raise click.Abort() from error


# 🌶️📦🔚
