#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bytebrew runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from bytebrew.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT_XOR,
    VALID_LOG_LEVELS,
)

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"0", "false", "no", "off", ""}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_flag(value: str | bool) -> bool:
    """Interpret an environment flag."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise ValueError(f"Invalid boolean flag: {value}")


@define
class BytebrewRuntimeConfig(RuntimeConfig):
    """bytebrew runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="BYTEBREW_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for bytebrew operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    strict_xor: bool = field(
        default=DEFAULT_STRICT_XOR,
        env_var="BYTEBREW_STRICT_XOR",
        converter=parse_flag,
        metadata={"help": "Reject XOR inputs of unequal length instead of truncating"},
    )


# 🌶️📦🔚
