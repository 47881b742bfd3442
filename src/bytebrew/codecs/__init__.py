#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Text codecs and the codec registry."""

from __future__ import annotations

from collections.abc import Callable

from attrs import frozen

from bytebrew.codecs.b64 import base64_decode, base64_encode
from bytebrew.codecs.hex import hex_decode, hex_digit_value, hex_encode
from bytebrew.exceptions import UnknownCodec


@frozen
class Codec:
    """A named pair of bytes-to-text and text-to-bytes functions."""

    name: str
    encode: Callable[[bytes], str]
    decode: Callable[[str], bytes]


CODECS: dict[str, Codec] = {
    "hex": Codec(name="hex", encode=hex_encode, decode=hex_decode),
    "base64": Codec(name="base64", encode=base64_encode, decode=base64_decode),
}


def get_codec(name: str) -> Codec:
    """Look up a registered codec by name."""
    try:
        return CODECS[name.lower()]
    except KeyError:
        raise UnknownCodec(name) from None


__all__ = [
    "CODECS",
    "Codec",
    "base64_decode",
    "base64_encode",
    "get_codec",
    "hex_decode",
    "hex_digit_value",
    "hex_encode",
]

# 🌶️📦🔚
