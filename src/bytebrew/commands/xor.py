#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XOR commands for the bytebrew CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from bytebrew.codecs import hex_decode, hex_encode
from bytebrew.config import BytebrewRuntimeConfig
from bytebrew.config.defaults import STDIN_MARKER, TEXT_ENCODING
from bytebrew.console import fail, get_command_logger, read_value
from bytebrew.exceptions import BytebrewError
from bytebrew.utils.xor import fixed_xor, repeating_key_xor

# Get structured logger for xor commands
log = get_command_logger("xor")


@click.command("xor")
@click.argument("left")
@click.argument("right")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on unequal lengths instead of truncating (default from BYTEBREW_STRICT_XOR)",
)
def xor_command(left: str, right: str, strict: bool | None) -> None:
    """XOR two hex-encoded buffers and print the result as hex.

    Either LEFT or RIGHT (not both) may be "-" to read it from standard input.
    """
    if left == STDIN_MARKER and right == STDIN_MARKER:
        raise click.UsageError("Only one of LEFT and RIGHT can be read from standard input")

    if strict is None:
        strict = BytebrewRuntimeConfig.from_env().strict_xor

    log.debug("XOR started", strict=strict)

    try:
        result = fixed_xor(hex_decode(read_value(left)), hex_decode(read_value(right)), strict=strict)
    except BytebrewError as e:
        fail(log, "XOR", e)

    pout(hex_encode(result))


@click.command("xor-key")
@click.argument("data", required=False)
@click.option(
    "--key",
    "-k",
    required=True,
    help="Repeating key, as UTF-8 text",
)
def xor_key_command(data: str | None, key: str) -> None:
    """XOR hex-encoded DATA with a repeating KEY and print the result as hex."""
    try:
        result = repeating_key_xor(hex_decode(read_value(data)), key.encode(TEXT_ENCODING))
    except BytebrewError as e:
        fail(log, "Repeating-key XOR", e)

    log.debug("Repeating-key XOR complete", size=len(result), key_size=len(key))
    pout(hex_encode(result))


# 🌶️📦🔚
