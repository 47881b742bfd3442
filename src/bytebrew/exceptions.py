#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for bytebrew."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class BytebrewError(FoundationError):
    """Base exception for all bytebrew errors."""

    pass


class CodecError(BytebrewError, ValueError):
    """Raised when text cannot be decoded into bytes."""

    pass


class InvalidEncoding(CodecError):
    """Raised when encoded text is structurally malformed.

    Covers odd-length hex input, Base64 input whose length is not a multiple
    of four, and misplaced or excessive Base64 padding.
    """

    def __init__(self, message: str, *, length: int | None = None) -> None:
        super().__init__(message)
        self.length = length


class InvalidCharacter(CodecError):
    """Raised when encoded text contains a character outside its alphabet."""

    def __init__(self, message: str, *, character: str, position: int | None = None) -> None:
        super().__init__(message)
        self.character = character
        self.position = position


class LengthMismatch(BytebrewError, ValueError):
    """Raised by strict XOR when the two buffers differ in length."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Buffer lengths differ: {left} != {right}")
        self.left = left
        self.right = right


class InvalidKey(BytebrewError, ValueError):
    """Raised for unusable XOR keys."""

    pass


class UnknownCodec(BytebrewError, KeyError):
    """Raised when a codec name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown codec: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return f"Unknown codec: {self.name!r}"


# 🌶️📦🔚
