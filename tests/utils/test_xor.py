#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for XOR utilities."""

from __future__ import annotations

import pytest

from bytebrew.exceptions import BytebrewError, InvalidKey, LengthMismatch
from bytebrew.utils import fixed_xor, repeating_key_xor, xor_decode, xor_encode


class TestFixedXor:
    """Test byte-wise XOR of two buffers."""

    @pytest.mark.unit
    def test_equal_lengths(self) -> None:
        """Test XOR of equal-length buffers."""
        assert fixed_xor(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"

    @pytest.mark.unit
    def test_empty(self) -> None:
        """Test that empty inputs give empty output."""
        assert fixed_xor(b"", b"") == b""

    @pytest.mark.unit
    def test_truncates_to_shorter_right(self) -> None:
        """Unequal lengths are truncated, not rejected, unless strict is requested."""
        xs = bytes([1, 2, 3])
        ys = bytes([4, 5])
        assert fixed_xor(xs, ys) == bytes([1 ^ 4, 2 ^ 5])

    @pytest.mark.unit
    def test_truncates_to_shorter_left(self) -> None:
        """Test truncation when the first buffer is shorter."""
        assert fixed_xor(b"\x01", b"\x01\x02\x03") == b"\x00"

    @pytest.mark.unit
    def test_truncates_against_empty(self) -> None:
        """Test that an empty buffer yields empty output."""
        assert fixed_xor(b"abc", b"") == b""

    @pytest.mark.unit
    def test_strict_rejects_mismatch(self) -> None:
        """Test that strict mode raises with both lengths."""
        with pytest.raises(LengthMismatch) as exc_info:
            fixed_xor(b"abc", b"ab", strict=True)
        assert exc_info.value.left == 3
        assert exc_info.value.right == 2
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.unit
    def test_strict_accepts_equal_lengths(self) -> None:
        """Test that strict mode is transparent for equal lengths."""
        assert fixed_xor(b"ab", b"ab", strict=True) == b"\x00\x00"

    @pytest.mark.unit
    def test_self_inverse(self) -> None:
        """Test that XOR with the same buffer twice restores the input."""
        xs = b"attack at dawn"
        ys = b"\x13" * len(xs)
        assert fixed_xor(fixed_xor(xs, ys), ys) == xs

    @pytest.mark.unit
    def test_accepts_bytes_like(self) -> None:
        """Test bytearray inputs and bytes output."""
        result = fixed_xor(bytearray(b"\x01"), memoryview(b"\x03"))
        assert result == b"\x02"
        assert isinstance(result, bytes)


class TestRepeatingKeyXor:
    """Test XOR with a cycled key."""

    @pytest.mark.unit
    def test_known_vector(self) -> None:
        """Test the ICE repeating-key vector."""
        plaintext = b"Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal"
        expected = bytes.fromhex(
            "0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324272765272"
            "a282b2f20430a652e2c652a3124333a653e2b2027630c692b20283165286326302e27282f"
        )
        assert repeating_key_xor(plaintext, b"ICE") == expected

    @pytest.mark.unit
    def test_preserves_length(self) -> None:
        """Test that output length equals data length."""
        assert len(repeating_key_xor(b"hello world", b"k")) == 11

    @pytest.mark.unit
    def test_empty_data(self) -> None:
        """Test that empty data gives empty output."""
        assert repeating_key_xor(b"", b"key") == b""

    @pytest.mark.unit
    def test_empty_key_rejected(self) -> None:
        """Test that an empty key raises InvalidKey."""
        with pytest.raises(InvalidKey):
            repeating_key_xor(b"data", b"")
        with pytest.raises(BytebrewError):
            repeating_key_xor(b"data", b"")

    @pytest.mark.unit
    def test_encode_decode_roundtrip(self) -> None:
        """Test that decoding reverses encoding."""
        data = b"Test data for XOR encoding"
        key = b"secret"
        encoded = xor_encode(data, key)
        assert encoded != data
        assert xor_decode(encoded, key) == data
