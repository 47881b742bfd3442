#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values and alphabets for bytebrew."""

from __future__ import annotations

# =================================
# Hex alphabet
# =================================
HEX_ALPHABET = "0123456789abcdef"  # Encode output is lowercase only
HEX_GROUP_SIZE = 2  # Characters per byte

# =================================
# Base64 alphabet
# =================================
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_PAD = "="
BASE64_BYTE_GROUP = 3  # Input bytes per quartet
BASE64_CHAR_GROUP = 4  # Output characters per quartet
BASE64_FIELD_MASK = 0b111111

# =================================
# XOR defaults
# =================================
DEFAULT_STRICT_XOR = False  # Truncate to the shorter buffer

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# =================================
# CLI defaults
# =================================
STDIN_MARKER = "-"
TEXT_ENCODING = "utf-8"


# 🌶️📦🔚
