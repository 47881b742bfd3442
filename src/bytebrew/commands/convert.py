#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Codec conversion command for the bytebrew CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from bytebrew.codecs import CODECS, get_codec
from bytebrew.console import fail, get_command_logger, read_value
from bytebrew.exceptions import BytebrewError

# Get structured logger for this command
log = get_command_logger("convert")

CODEC_CHOICE = click.Choice(sorted(CODECS), case_sensitive=False)


@click.command("convert")
@click.argument("value", required=False)
@click.option("--from", "source", required=True, type=CODEC_CHOICE, help="Encoding of VALUE")
@click.option("--to", "target", required=True, type=CODEC_CHOICE, help="Encoding to print")
def convert_command(value: str | None, source: str, target: str) -> None:
    """Re-encode VALUE from one text encoding to another."""
    log.debug("Convert started", source=source, target=target)

    try:
        data = get_codec(source).decode(read_value(value))
    except BytebrewError as e:
        fail(log, "Convert", e)

    pout(get_codec(target).encode(data))


# 🌶️📦🔚
