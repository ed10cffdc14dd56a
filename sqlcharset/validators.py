"""
sqlcharset.validators - check and truncate strings for a character set

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from enum import IntEnum
from collections import namedtuple
from dataclasses import dataclass, field

from .encoding import encodings, utf8


# emitted in place of each invalid character
REPLACEMENT = b'?'


class TruncateStrategy(IntEnum):
    """How to handle a string that is not valid in the charset."""

    # return an empty string
    EMPTY = 0
    # return the valid prefix
    TRIM = 1
    # return the whole string with each invalid character replaced by '?'
    REPLACE = 2

    @classmethod
    def create(cls, value):
        """Convert strategy value or (case-insensitive) name to TruncateStrategy."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"'{value}' is not a valid {cls.__name__}") from None
        return cls(value)


class ValidationOutcome(namedtuple('ValidationOutcome', 'result invalid_pos')):
    """Truncated string and offset of first invalid byte, or -1 if none."""

    @property
    def valid(self):
        return self.invalid_pos == -1


def _to_bytes(string):
    """
    Bytes to scan and the error handler to decode results with.
    A str is taken to be utf-8 with escaped undecodable bytes;
    other lone surrogates are kept as their (ill-formed) 3-byte encoding.
    """
    if isinstance(string, str):
        try:
            return string.encode('utf-8', 'surrogateescape'), 'surrogateescape'
        except UnicodeEncodeError:
            return string.encode('utf-8', 'surrogatepass'), 'surrogatepass'
    if isinstance(string, bytes):
        return string, None
    return bytes(string), None


def _apply_strategy(data, units, strategy):
    """Build the truncated result from (offset, width, valid) units."""
    result = bytearray()
    invalid_pos = -1
    for offset, width, valid in units:
        if valid:
            if strategy == TruncateStrategy.REPLACE:
                result += data[offset:offset+width]
            continue
        if invalid_pos == -1:
            invalid_pos = offset
        if strategy == TruncateStrategy.EMPTY:
            return b'', invalid_pos
        if strategy == TruncateStrategy.TRIM:
            return data[:offset], invalid_pos
        result += REPLACEMENT
    return bytes(result), invalid_pos


class StringValidator:
    """Check whether strings are valid in a specific charset."""

    def validate(self, string):
        """Offset of the first invalid byte in string, -1 if all valid."""
        return self.truncate(string, TruncateStrategy.EMPTY).invalid_pos

    def truncate(self, string, strategy):
        """
        Truncate or repair string so that it is valid in the charset.

        string: bytes, or str which is scanned as its utf-8 encoding
        strategy: TruncateStrategy or its name
        returns: ValidationOutcome(result, invalid_pos); result has the type of string
        """
        strategy = TruncateStrategy.create(strategy)
        data, errors = _to_bytes(string)
        units = self._scan(data)
        if units is None:
            return ValidationOutcome(string, -1)
        result, invalid_pos = _apply_strategy(data, units, strategy)
        if invalid_pos == -1:
            return ValidationOutcome(string, -1)
        if isinstance(string, str):
            result = result.decode('utf-8', errors)
        return ValidationOutcome(result, invalid_pos)

    def _scan(self, data):
        """
        Iterate over units of data as (offset, width, valid),
        or return None if a quick check shows the whole of data is valid.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class ASCIIValidator(StringValidator):
    """Accept only bytes up to 0x7F."""

    # provides the width of the source character to replace
    codec: object = field(default=encodings['utf-8'].codec, repr=False, compare=False)

    def _scan(self, data):
        if data.isascii():
            return None
        return self._units(data)

    def _units(self, data):
        start, offset = 0, 0
        while offset < len(data):
            if data[offset] <= 0x7f:
                offset += 1
                continue
            if offset > start:
                yield start, offset - start, True
            # one unit for the whole multi-byte source character
            width = min(self.codec.char_length(data, offset), len(data) - offset)
            yield offset, width, False
            offset += width
            start = offset
        if offset > start:
            yield start, offset - start, True


@dataclass(frozen=True)
class UTF8Validator(StringValidator):
    """
    Accept well-formed utf-8.

    is_utf8mb4: full utf-8; if False, the legacy sql charset of at most 3 bytes per character
    check_mb4_in_utf8: if not is_utf8mb4, reject 4-byte characters
    """

    is_utf8mb4: bool = True
    check_mb4_in_utf8: bool = False

    @property
    def _reject_mb4(self):
        return self.check_mb4_in_utf8 and not self.is_utf8mb4

    def _scan(self, data):
        if not data:
            return None
        if utf8.is_valid(data):
            # 4-byte characters, if rejected, can only start with bytes from 0xF0
            if not self._reject_mb4 or max(data) < 0xf0:
                return None
        return self._units(data)

    def _units(self, data):
        reject_mb4 = self._reject_mb4
        for offset, codepoint, width in utf8.iter_chars(data):
            valid = codepoint is not None and not (reject_mb4 and width > 3)
            yield offset, width, valid


@dataclass(frozen=True)
class OtherValidator(StringValidator):
    """
    Accept characters that can be encoded in the named charset.
    Charsets without a registered codec accept everything.
    """

    charset: str
    registry: object = field(default=encodings, repr=False, compare=False)

    def _scan(self, data):
        if not data:
            return None
        # look up on every call, don't cache the codec
        encoding = self.registry.lookup(self.charset)
        if not encoding:
            logging.debug(
                "No codec registered for charset '%s'; accepting input.", self.charset
            )
            return None
        return self._units(data, encoding.codec)

    @staticmethod
    def _units(data, codec):
        # encoders may keep state: use a fresh one per scan
        encoder = codec.new_encoder()
        buffer = bytearray()
        offset = 0
        while offset < len(data):
            width = min(codec.char_length(data, offset), len(data) - offset)
            _, _, error = encoder.transform(buffer, data[offset:offset+width], True)
            buffer.clear()
            yield offset, width, error is None
            offset += width
