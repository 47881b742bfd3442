#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base64 commands for the bytebrew CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from bytebrew.codecs import base64_decode, base64_encode, hex_decode, hex_encode
from bytebrew.config.defaults import TEXT_ENCODING
from bytebrew.console import fail, get_command_logger, read_value
from bytebrew.exceptions import CodecError

# Get structured logger for base64 commands
log = get_command_logger("base64")


@click.group("base64")
def base64_group() -> None:
    """Convert to and from standard Base64."""
    pass


@base64_group.command("encode")
@click.argument("value", required=False)
@click.option(
    "--from-hex",
    is_flag=True,
    help="Treat VALUE as hex-encoded bytes instead of UTF-8 text",
)
def base64_encode_command(value: str | None, from_hex: bool) -> None:
    """Encode VALUE as Base64 (reads stdin if omitted)."""
    text = read_value(value)
    try:
        data = hex_decode(text) if from_hex else text.encode(TEXT_ENCODING)
    except CodecError as e:
        fail(log, "Base64 encode", e)

    log.debug("Encoding to Base64", size=len(data), from_hex=from_hex)
    pout(base64_encode(data))


@base64_group.command("decode")
@click.argument("value", required=False)
@click.option(
    "--to-hex",
    is_flag=True,
    help="Print the decoded bytes as hex instead of UTF-8 text",
)
def base64_decode_command(value: str | None, to_hex: bool) -> None:
    """Decode Base64 VALUE (reads stdin if omitted)."""
    try:
        data = base64_decode(read_value(value))
    except CodecError as e:
        fail(log, "Base64 decode", e)

    log.debug("Decoded Base64", size=len(data), to_hex=to_hex)
    pout(hex_encode(data) if to_hex else data.decode(TEXT_ENCODING, errors="replace"))


# 🌶️📦🔚
