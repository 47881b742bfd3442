#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bytebrew configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from bytebrew.config.runtime import BytebrewRuntimeConfig, parse_flag, parse_log_level

__all__ = [
    "BytebrewRuntimeConfig",
    "parse_flag",
    "parse_log_level",
]

# 🌶️📦🔚
