#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for bytebrew tests."""

from __future__ import annotations

from collections.abc import Iterator

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    # Reset again after test to ensure clean state
    reset_foundation_setup_for_testing()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove bytebrew environment variables for the duration of a test."""
    for name in ("BYTEBREW_LOG_LEVEL", "BYTEBREW_STRICT_XOR", "PROVIDE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
