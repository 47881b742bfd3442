#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the bytebrew CLI."""

from __future__ import annotations

from bytebrew.commands.base64 import base64_group
from bytebrew.commands.convert import convert_command
from bytebrew.commands.hex import hex_group
from bytebrew.commands.xor import xor_command, xor_key_command

__all__ = [
    "base64_group",
    "convert_command",
    "hex_group",
    "xor_command",
    "xor_key_command",
]

# 🌶️📦🔚
