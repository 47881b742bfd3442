#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bytebrew: hex, Base64 and XOR primitives for byte buffers."""

from __future__ import annotations

from provide.foundation.utils import get_version

from bytebrew.codecs import (
    CODECS,
    Codec,
    base64_decode,
    base64_encode,
    get_codec,
    hex_decode,
    hex_digit_value,
    hex_encode,
)
from bytebrew.exceptions import (
    BytebrewError,
    CodecError,
    InvalidCharacter,
    InvalidEncoding,
    InvalidKey,
    LengthMismatch,
    UnknownCodec,
)
from bytebrew.utils.xor import fixed_xor, repeating_key_xor, xor_decode, xor_encode

__version__ = get_version("bytebrew", caller_file=__file__)

__all__ = [
    "CODECS",
    "BytebrewError",
    "Codec",
    "CodecError",
    "InvalidCharacter",
    "InvalidEncoding",
    "InvalidKey",
    "LengthMismatch",
    "UnknownCodec",
    "__version__",
    "base64_decode",
    "base64_encode",
    "fixed_xor",
    "get_codec",
    "hex_decode",
    "hex_digit_value",
    "hex_encode",
    "repeating_key_xor",
    "xor_decode",
    "xor_encode",
]

# 🌶️📦🔚
