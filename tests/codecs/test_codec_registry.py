#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the codec registry."""

from __future__ import annotations

import attrs
import pytest

from bytebrew.codecs import CODECS, Codec, get_codec
from bytebrew.exceptions import BytebrewError, UnknownCodec


class TestCodecRegistry:
    """Test codec lookup."""

    def test_registered_names(self) -> None:
        """Test that hex and base64 are registered."""
        assert set(CODECS) == {"hex", "base64"}

    def test_lookup_is_case_insensitive(self) -> None:
        """Test that names are matched regardless of case."""
        assert get_codec("HEX") is CODECS["hex"]
        assert get_codec("Base64") is CODECS["base64"]

    def test_codec_functions(self) -> None:
        """Test that registered codecs encode and decode."""
        hex_codec = get_codec("hex")
        assert hex_codec.encode(b"\x12") == "12"
        assert hex_codec.decode("12") == b"\x12"

        b64_codec = get_codec("base64")
        assert b64_codec.encode(b"\0") == "AA=="
        assert b64_codec.decode("AA==") == b"\0"

    def test_unknown_codec(self) -> None:
        """Test that unknown names raise UnknownCodec."""
        with pytest.raises(UnknownCodec) as exc_info:
            get_codec("rot13")
        assert exc_info.value.name == "rot13"
        assert "rot13" in str(exc_info.value)

    def test_unknown_codec_hierarchy(self) -> None:
        """Test that UnknownCodec is both a bytebrew error and a KeyError."""
        with pytest.raises(KeyError):
            get_codec("nope")
        with pytest.raises(BytebrewError):
            get_codec("nope")

    def test_codec_is_frozen(self) -> None:
        """Test that codec records are immutable."""
        codec = get_codec("hex")
        assert isinstance(codec, Codec)
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            codec.name = "other"  # type: ignore[misc]
