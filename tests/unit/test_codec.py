"""Unit tests for encoding/decoding."""

from __future__ import annotations

import pickle

import pytest

import uulite.codec.encoder as encoder_module
from uulite import (
    CodecError,
    InvalidCharacterError,
    TruncatedInputError,
    decode,
    decode_char,
    encode,
    encode_char,
)


class TestCharMapping:
    """Test the 6-bit unit <-> character mapping."""

    def test_encode_zero_is_backtick(self) -> None:
        """Test zero maps to the backtick glyph."""
        assert encode_char(0) == "`"

    def test_encode_offset(self) -> None:
        """Test non-zero values are offset by 32."""
        assert encode_char(1) == "!"
        assert encode_char(3) == "#"
        assert encode_char(45) == "M"
        assert encode_char(63) == "_"

    def test_encode_out_of_range(self) -> None:
        """Test values that do not fit in 6 bits."""
        with pytest.raises(ValueError, match="6 bits"):
            encode_char(64)

        with pytest.raises(ValueError):
            encode_char(-1)

    def test_decode_both_zero_forms(self) -> None:
        """Test space and backtick both decode to zero."""
        assert decode_char(" ") == 0
        assert decode_char("`") == 0
        assert decode_char(0x20) == 0
        assert decode_char(0x60) == 0

    def test_decode_accepts_int_and_str(self) -> None:
        """Test decoding from a byte value or a character."""
        assert decode_char("#") == 3
        assert decode_char(ord("#")) == 3
        assert decode_char("_") == 63

    def test_decode_invalid(self) -> None:
        """Test characters outside the alphabet."""
        for bad in ("a", "~", "\n", "\x1f", "\x7f", "é"):
            with pytest.raises(ValueError, match="Invalid character"):
                decode_char(bad)

    def test_decode_multiple_characters(self) -> None:
        """Test a string longer than one character is rejected."""
        with pytest.raises(ValueError, match="single character"):
            decode_char("ab")

    def test_all_units_invertible(self) -> None:
        """Test decode_char(encode_char(v)) == v for every unit."""
        for value in range(64):
            assert decode_char(encode_char(value)) == value


class TestEncodeDecode:
    """Test basic encode/decode functionality."""

    def test_cat(self) -> None:
        """Test the classic 'cat' vector."""
        assert encode(b"cat") == "#8V%T"
        assert decode("#8V%T") == b"cat"
        assert decode(b"#8V%T") == b"cat"

    def test_partial_group(self) -> None:
        """Test a line whose last group is padded."""
        encoded = ".;W)K+`HQ.38X*2X*,C4`"

        assert encode(b"ork,\n1968).\n25") == encoded
        assert decode(encoded) == b"ork,\n1968).\n25"

    def test_zero_bytes_survive(self) -> None:
        """Test real zero bytes are kept, not trimmed as padding."""
        assert encode(b"\x00\x00\x00") == "#````"
        assert decode("#````") == b"\x00\x00\x00"
        assert decode("\"````") == b"\x00\x00"

    def test_legacy_space_zero(self) -> None:
        """Test data written with spaces for zero."""
        assert decode("#    ") == b"\x00\x00\x00"
        assert decode(encode(b"\x00ab\x00").replace("`", " ")) == b"\x00ab\x00"

    def test_empty_input(self) -> None:
        """Test empty input gives zero lines."""
        assert encode(b"") == ""
        assert decode("") == b""
        assert decode(b"") == b""

    def test_zero_length_line(self) -> None:
        """Test a line declaring zero bytes reads no data."""
        assert decode("`") == b""
        assert decode(" ") == b""
        assert decode("#8V%T\n`\n") == b"cat"

    def test_45_bytes_one_line(self) -> None:
        """Test a full chunk fits on exactly one line."""
        encoded = encode(bytes(range(45)))
        lines = encoded.split("\n")

        assert len(lines) == 1
        assert len(lines[0]) == 61
        assert decode_char(lines[0][0]) == 45

    def test_46_bytes_two_lines(self) -> None:
        """Test one byte over a chunk starts a second line."""
        encoded = encode(bytes(range(46)))
        lines = encoded.split("\n")

        assert len(lines) == 2
        assert decode_char(lines[0][0]) == 45
        assert decode_char(lines[1][0]) == 1
        assert len(lines[1]) == 5

    def test_no_trailing_newline(self) -> None:
        """Test the last line is not followed by a newline."""
        assert not encode(bytes(100)).endswith("\n")

    def test_trailing_newline_accepted(self) -> None:
        """Test decoding tolerates a final newline."""
        assert decode("#8V%T\n") == b"cat"

    def test_crlf_separators(self) -> None:
        """Test CRLF line endings."""
        assert decode("#8V%T\r\n#8V%T\r\n") == b"catcat"

    def test_non_bytes_rejected(self) -> None:
        """Test an int is not taken as a count of zero bytes."""
        with pytest.raises(TypeError):
            encode(5)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            encode("cat")  # type: ignore[arg-type]

    def test_bytearray_and_memoryview(self) -> None:
        """Test bytes-like inputs."""
        assert encode(bytearray(b"cat")) == "#8V%T"
        assert decode(bytearray(b"#8V%T")) == b"cat"
        assert decode(memoryview(b"#8V%T")) == b"cat"

    def test_all_byte_values(self, sample_payload: bytes) -> None:
        """Test every byte value round-trips."""
        data = bytes(range(256)) + sample_payload
        assert decode(encode(data)) == data


class TestDecodeErrors:
    """Test error reporting for malformed input."""

    def test_invalid_data_character(self) -> None:
        """Test the location of a bad data character."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode("#8V%T\n#8v%T")

        err = exc_info.value
        assert err.line == 1
        assert err.character == 1
        assert "'v' (0x76)" in err.message
        assert str(err).endswith("at line 1 character 1")

    def test_invalid_length_prefix(self) -> None:
        """Test a bad length character is reported at offset 0."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode("#8V%T\n#8V%T\na8V%T")

        assert exc_info.value.line == 2
        assert exc_info.value.character == 0

    def test_invalid_character_later_group(self) -> None:
        """Test offsets count data characters across groups."""
        line = encode(b"abcdef")
        bad = line[:7] + "~" + line[8:]

        with pytest.raises(InvalidCharacterError) as exc_info:
            decode(bad)

        assert exc_info.value.line == 0
        assert exc_info.value.character == 6

    def test_non_ascii_str(self) -> None:
        """Test a non-ASCII character in str input."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode("#8VéT")

        assert exc_info.value.character == 2

    def test_truncated_input(self) -> None:
        """Test input ending inside a group."""
        with pytest.raises(TruncatedInputError) as exc_info:
            decode("#8V%")

        assert exc_info.value.line == 0
        assert exc_info.value.character == 3
        assert "declared length 3" in exc_info.value.message

    def test_truncated_line(self) -> None:
        """Test a newline arriving before the declared payload."""
        with pytest.raises(TruncatedInputError) as exc_info:
            decode("#8V%T\n#8V\n#8V%T")

        assert exc_info.value.line == 1
        assert exc_info.value.character == 2

    def test_prefix_without_data(self) -> None:
        """Test a length character with no data after it."""
        with pytest.raises(TruncatedInputError) as exc_info:
            decode("M")

        assert exc_info.value.character == 0

    def test_errors_pickle(self) -> None:
        """Test located errors survive a pickle round-trip."""
        for error in (
            InvalidCharacterError("bad", 1, 2),
            TruncatedInputError("short", 3, 4),
        ):
            restored = pickle.loads(pickle.dumps(error))

            assert type(restored) is type(error)
            assert (restored.message, restored.line, restored.character) == (
                error.message,
                error.line,
                error.character,
            )
            assert str(restored) == str(error)

    def test_relocated(self) -> None:
        """Test shifting an error keeps its type and message."""
        moved = TruncatedInputError("short", 1, 2).relocated(5)

        assert isinstance(moved, TruncatedInputError)
        assert str(moved) == "short at line 6 character 2"

    def test_errors_share_base(self) -> None:
        """Test both error kinds are CodecErrors."""
        assert issubclass(InvalidCharacterError, CodecError)
        assert issubclass(TruncatedInputError, CodecError)
        assert not issubclass(TruncatedInputError, InvalidCharacterError)


class TestEncodeErrors:
    """Test error reporting from the encoder."""

    def test_unit_failure_is_located(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a failing unit mapping reports line and character."""
        real_encode_char = encoder_module.encode_char

        def failing_encode_char(value: int) -> str:
            if value == 1:
                raise ValueError("Value 1 rejected")
            return real_encode_char(value)

        monkeypatch.setattr(encoder_module, "encode_char", failing_encode_char)

        # Only the second line's length prefix (1 byte) is non-zero
        with pytest.raises(InvalidCharacterError) as exc_info:
            encode(bytes(46))

        assert exc_info.value.line == 1
        assert exc_info.value.character == 0
        assert isinstance(exc_info.value.__cause__, ValueError)
