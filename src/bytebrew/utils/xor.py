#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XOR combination of byte buffers."""

from __future__ import annotations

from provide.foundation import logger

from bytebrew.exceptions import InvalidKey, LengthMismatch


def fixed_xor(xs: bytes, ys: bytes, *, strict: bool = False) -> bytes:
    """
    XOR two buffers byte by byte.

    Unequal lengths are not an error by default: the result is truncated to
    the shorter buffer. Callers that need equal lengths pass ``strict=True``.

    Args:
        xs: First buffer
        ys: Second buffer
        strict: Raise instead of truncating when lengths differ

    Returns:
        Bytes of length ``min(len(xs), len(ys))``

    Raises:
        LengthMismatch: If ``strict`` is set and the lengths differ
    """
    if len(xs) != len(ys):
        if strict:
            raise LengthMismatch(len(xs), len(ys))
        logger.debug("Truncating XOR to shorter buffer", left=len(xs), right=len(ys))

    return bytes(x ^ y for x, y in zip(xs, ys, strict=False))


def repeating_key_xor(data: bytes, key: bytes) -> bytes:
    """
    XOR data with a repeating key.

    Args:
        data: Bytes to transform
        key: Non-empty key, cycled over the data

    Returns:
        Bytes of the same length as ``data``

    Raises:
        InvalidKey: If the key is empty
    """
    if not key:
        raise InvalidKey("XOR key must not be empty")
    return bytes(data[i] ^ key[i % len(key)] for i in range(len(data)))


def xor_encode(data: bytes, key: bytes) -> bytes:
    """XOR encode data with a repeating key."""
    return repeating_key_xor(data, key)


def xor_decode(data: bytes, key: bytes) -> bytes:
    """
    XOR decode data with a repeating key.

    Since XOR is symmetric, this is the same as encoding.
    """
    return repeating_key_xor(data, key)


# 🌶️📦🔚
