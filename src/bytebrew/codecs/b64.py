#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Standard Base64 codec.

Uses the canonical ``A-Za-z0-9+/`` alphabet with ``=`` padding, no line
wrapping and no embedded whitespace.
"""

from __future__ import annotations

from provide.foundation import logger

from bytebrew.config.defaults import (
    BASE64_ALPHABET,
    BASE64_BYTE_GROUP,
    BASE64_CHAR_GROUP,
    BASE64_FIELD_MASK,
    BASE64_PAD,
)
from bytebrew.exceptions import InvalidCharacter, InvalidEncoding

# Reverse lookup, character -> 6-bit value
BASE64_VALUES = {char: value for value, char in enumerate(BASE64_ALPHABET)}


def _pack_group(group: bytes) -> int:
    """Pack up to three bytes into a 24-bit word, zero-filling missing bytes."""
    word = 0
    for shift, byte in zip((16, 8, 0), group, strict=False):
        word |= byte << shift
    return word


def base64_encode(data: bytes) -> str:
    """
    Encode bytes as standard Base64 text.

    Input is processed in 3-byte groups. A final group of two bytes produces
    three characters and one ``=``; a final group of one byte produces two
    characters and ``==``. Empty input gives an empty string.

    Args:
        data: Bytes to encode

    Returns:
        Base64 text whose length is a multiple of four
    """
    data = memoryview(data).tobytes()
    chars = []

    for i in range(0, len(data), BASE64_BYTE_GROUP):
        group = data[i : i + BASE64_BYTE_GROUP]
        word = _pack_group(group)
        fields = [
            (word >> 18) & BASE64_FIELD_MASK,
            (word >> 12) & BASE64_FIELD_MASK,
            (word >> 6) & BASE64_FIELD_MASK,
            word & BASE64_FIELD_MASK,
        ]
        # n bytes carry data in the first n + 1 fields
        chars.extend(BASE64_ALPHABET[field] for field in fields[: len(group) + 1])

    padding = (BASE64_BYTE_GROUP - len(data) % BASE64_BYTE_GROUP) % BASE64_BYTE_GROUP
    return "".join(chars) + BASE64_PAD * padding


def _padding_count(text: str) -> int:
    """Count trailing padding and reject padding anywhere else."""
    stripped = text.rstrip(BASE64_PAD)
    padding = len(text) - len(stripped)

    if padding > 2:
        logger.debug("Rejected Base64 input with excessive padding", padding=padding)
        raise InvalidEncoding(f"Base64 input has {padding} padding characters", length=len(text))

    misplaced = stripped.find(BASE64_PAD)
    if misplaced != -1:
        logger.debug("Rejected Base64 input with misplaced padding", position=misplaced)
        raise InvalidEncoding(
            f"Base64 padding at position {misplaced} is not at the end of the input",
            length=len(text),
        )

    return padding


def base64_decode(text: str) -> bytes:
    """
    Decode standard Base64 text into bytes.

    Args:
        text: Base64 string, length a multiple of four

    Returns:
        Decoded bytes

    Raises:
        InvalidEncoding: If the length is not a multiple of four or padding is misplaced
        InvalidCharacter: If a character is outside the Base64 alphabet
    """
    if len(text) % BASE64_CHAR_GROUP != 0:
        logger.debug("Rejected Base64 input with bad length", length=len(text))
        raise InvalidEncoding(
            f"Base64 input length {len(text)} is not a multiple of {BASE64_CHAR_GROUP}",
            length=len(text),
        )

    padding = _padding_count(text)
    data_length = len(text) - padding
    result = bytearray()

    for i in range(0, len(text), BASE64_CHAR_GROUP):
        word = 0
        for offset in range(BASE64_CHAR_GROUP):
            position = i + offset
            word <<= 6
            if position >= data_length:
                continue
            char = text[position]
            value = BASE64_VALUES.get(char)
            if value is None:
                logger.debug("Rejected invalid Base64 character", character=char, position=position)
                raise InvalidCharacter(
                    f"Invalid Base64 character {char!r} at position {position}",
                    character=char,
                    position=position,
                )
            word |= value

        result.append((word >> 16) & 0xFF)
        result.append((word >> 8) & 0xFF)
        result.append(word & 0xFF)

    if padding:
        del result[-padding:]

    return bytes(result)


# 🌶️📦🔚
