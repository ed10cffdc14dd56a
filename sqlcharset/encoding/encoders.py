"""
sqlcharset.encoding.encoders - codecs from utf-8 to target charsets

(c) 2020--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import codecs
from functools import cached_property

from .base import Codec, Transformer


# marks an undefined position in a charmap decoding table
_UNDEFINED = '\ufffe'


class _CopyTransformer(Transformer):
    """Copy source bytes through unchanged."""

    def transform(self, dst, src, at_eof=True):
        dst.extend(src)
        return len(src), len(src), None


class _ReplacementTransformer(Transformer):
    """Copy well-formed utf-8, replace anything else with U+FFFD."""

    def transform(self, dst, src, at_eof=True):
        encoded = str(src, 'utf-8', 'replace').encode('utf-8')
        dst.extend(encoded)
        return len(encoded), len(src), None


class _IncrementalTransformer(Transformer):
    """Transform through a Python incremental encoder."""

    def __init__(self, encoder, overrides, source_errors):
        self._encoder = encoder
        self._overrides = overrides
        self._source_errors = source_errors

    def transform(self, dst, src, at_eof=True):
        try:
            text = str(src, 'utf-8', self._source_errors)
            if text in self._overrides:
                encoded = self._overrides[text]
            else:
                encoded = self._encoder.encode(text, at_eof)
        except UnicodeError as err:
            # don't carry partial state of a failed character into the next one
            self._encoder.reset()
            return 0, 0, err
        dst.extend(encoded)
        return len(encoded), len(src), None


class _CharmapTransformer(Transformer):
    """Transform through a charmap encoding table."""

    def __init__(self, encoding_table):
        self._table = encoding_table

    def transform(self, dst, src, at_eof=True):
        try:
            encoded, _ = codecs.charmap_encode(str(src, 'utf-8'), 'strict', self._table)
        except UnicodeError as err:
            return 0, 0, err
        dst.extend(encoded)
        return len(encoded), len(src), None


class NopCodec(Codec):
    """Passthrough for utf-8 and binary: any byte sequence is representable."""

    def new_encoder(self):
        return _CopyTransformer()


class ReplacementCodec(Codec):
    """
    The 'replacement' encoding for labels that must not be decoded,
    such as iso-2022-kr and iso-2022-cn. Encoding never fails.
    """

    def __init__(self):
        super().__init__('replacement')

    def new_encoder(self):
        return _ReplacementTransformer()


class PythonCodec(Codec):
    """
    Charset backed by a codec from the Python codec registry.

    overrides: dict of single characters to encode differently from the Python codec
    source_errors: error handler for malformed utf-8 source; 'strict' rejects it
    """

    def __init__(self, name, codec_name=None, *, overrides=None, source_errors='strict'):
        super().__init__(name)
        self.codec_name = codec_name or name
        self.overrides = overrides or {}
        self.source_errors = source_errors

    @cached_property
    def _factory(self):
        return codecs.getincrementalencoder(self.codec_name)

    def new_encoder(self):
        return _IncrementalTransformer(self._factory(), self.overrides, self.source_errors)

    def __repr__(self):
        """Representation."""
        return f"{type(self).__name__}(name='{self.name}', codec_name='{self.codec_name}')"


class CharmapCodec(Codec):
    """Single-byte charset defined by a 256-character decoding table."""

    def __init__(self, name, decoding_table):
        super().__init__(name)
        if len(decoding_table) != 256:
            raise ValueError(
                f'Decoding table for {name} must have 256 entries, not {len(decoding_table)}.'
            )
        self._decoding_table = decoding_table

    @cached_property
    def _encoding_table(self):
        return codecs.charmap_build(self._decoding_table)

    def new_encoder(self):
        return _CharmapTransformer(self._encoding_table)


def whatwg_windows(name, codec_name):
    """
    Windows codepage as used on the web:
    undefined positions in 0x80--0x9F map to the C1 control of the same value.
    """
    table = []
    for byte in range(256):
        char = bytes((byte,)).decode(codec_name, 'replace')
        if char == '\ufffd':
            char = chr(byte) if 0x80 <= byte <= 0x9f else _UNDEFINED
        table.append(char)
    return CharmapCodec(name, ''.join(table))


def x_user_defined():
    """Charset mapping 0x80--0xFF to the private use range U+F780--U+F7FF."""
    return CharmapCodec(
        'x-user-defined',
        ''.join(
            chr(_b) if _b < 0x80 else chr(0xF780 + _b - 0x80)
            for _b in range(256)
        )
    )


def whatwg_euro(name, codec_name, euro):
    """
    Multi-byte codepage as used on the web: the Python codec extended with the euro sign.

    euro: encoded form of U+20AC
    """
    return PythonCodec(name, codec_name, overrides={'\u20ac': euro})
