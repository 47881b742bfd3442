#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Byte buffer utilities."""

from __future__ import annotations

# Re-export XOR utilities
from bytebrew.utils.xor import (
    fixed_xor,
    repeating_key_xor,
    xor_decode,
    xor_encode,
)

__all__ = [
    "fixed_xor",
    "repeating_key_xor",
    "xor_decode",
    "xor_encode",
]

# 🌶️📦🔚
