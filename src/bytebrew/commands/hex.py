#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Hex commands for the bytebrew CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from bytebrew.codecs import hex_decode, hex_encode
from bytebrew.config.defaults import TEXT_ENCODING
from bytebrew.console import fail, get_command_logger, read_value
from bytebrew.exceptions import CodecError

# Get structured logger for hex commands
log = get_command_logger("hex")


@click.group("hex")
def hex_group() -> None:
    """Convert between text and hexadecimal."""
    pass


@hex_group.command("encode")
@click.argument("text", required=False)
def hex_encode_command(text: str | None) -> None:
    """Encode UTF-8 TEXT as lowercase hex (reads stdin if omitted)."""
    data = read_value(text).encode(TEXT_ENCODING)
    log.debug("Encoding to hex", size=len(data))
    pout(hex_encode(data))


@hex_group.command("decode")
@click.argument("value", required=False)
def hex_decode_command(value: str | None) -> None:
    """Decode hex VALUE and print it as UTF-8 text (reads stdin if omitted)."""
    try:
        data = hex_decode(read_value(value))
    except CodecError as e:
        fail(log, "Hex decode", e)

    log.debug("Decoded hex", size=len(data))
    pout(data.decode(TEXT_ENCODING, errors="replace"))


# 🌶️📦🔚
