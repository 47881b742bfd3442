#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Hexadecimal text codec.

Bytes are written as two lowercase characters each, high nibble first, with
no separators and no ``0x`` prefix. Decoding accepts either case.
"""

from __future__ import annotations

from provide.foundation import logger

from bytebrew.config.defaults import HEX_ALPHABET, HEX_GROUP_SIZE
from bytebrew.exceptions import InvalidCharacter, InvalidEncoding


def hex_digit_value(char: str, position: int | None = None) -> int:
    """
    Convert a single hex character to its nibble value.

    Args:
        char: One character from ``0-9``, ``a-f`` or ``A-F``
        position: Offset of the character in its source string, for error reporting

    Returns:
        Integer in the range 0-15

    Raises:
        InvalidCharacter: If the character is not a hex digit
    """
    if len(char) == 1:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "a" <= char <= "f":
            return 10 + ord(char) - ord("a")
        if "A" <= char <= "F":
            return 10 + ord(char) - ord("A")

    logger.debug("Rejected invalid hex character", character=char, position=position)
    where = f" at position {position}" if position is not None else ""
    raise InvalidCharacter(f"Invalid hex character {char!r}{where}", character=char, position=position)


def hex_decode(text: str) -> bytes:
    """
    Decode hexadecimal text into bytes.

    Args:
        text: Even-length string of hex digits (case-insensitive)

    Returns:
        Decoded bytes, one per character pair

    Raises:
        InvalidEncoding: If the text has odd length
        InvalidCharacter: If the text contains a non-hex character
    """
    if len(text) % HEX_GROUP_SIZE != 0:
        logger.debug("Rejected odd-length hex input", length=len(text))
        raise InvalidEncoding(f"Hex input has odd length {len(text)}", length=len(text))

    result = bytearray(len(text) // HEX_GROUP_SIZE)
    for i in range(0, len(text), HEX_GROUP_SIZE):
        high = hex_digit_value(text[i], i)
        low = hex_digit_value(text[i + 1], i + 1)
        result[i // HEX_GROUP_SIZE] = (high << 4) | low

    return bytes(result)


def hex_encode(data: bytes) -> str:
    """Encode bytes as lowercase hexadecimal text."""
    chars = []
    for byte in memoryview(data).tobytes():
        chars.append(HEX_ALPHABET[byte >> 4])
        chars.append(HEX_ALPHABET[byte & 0x0F])
    return "".join(chars)


# 🌶️📦🔚
