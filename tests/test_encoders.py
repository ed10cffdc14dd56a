"""
sqlcharset test suite
codec tests
"""

import unittest

from sqlcharset.encoding import (
    NopCodec, PythonCodec, CharmapCodec, ReplacementCodec, lookup
)
from sqlcharset.encoding.encoders import whatwg_windows, whatwg_euro, x_user_defined
from .base import BaseTester, EMOJI


def encode(codec, char):
    """Encode a single character through a fresh encoder."""
    dst = bytearray()
    written, consumed, error = codec.new_encoder().transform(dst, char.encode('utf-8'))
    return bytes(dst), written, consumed, error


class TestCodecs(BaseTester):
    """Test codec encoders."""

    def test_nop(self):
        dst = bytearray()
        result = NopCodec('binary').new_encoder().transform(dst, b'\xff\xfe')
        assert result == (2, 2, None), result
        assert dst == b'\xff\xfe'

    def test_python_codec(self):
        encoded, written, consumed, error = encode(PythonCodec('gbk'), '中')
        assert error is None, error
        assert encoded == '中'.encode('gbk')
        assert written == 2
        assert consumed == 3

    def test_python_codec_unrepresentable(self):
        dst = bytearray()
        written, consumed, error = PythonCodec('gbk').new_encoder().transform(dst, EMOJI)
        assert isinstance(error, UnicodeEncodeError), error
        assert (written, consumed) == (0, 0)
        assert not dst

    def test_python_codec_malformed_source(self):
        dst = bytearray()
        _, _, error = PythonCodec('gbk').new_encoder().transform(dst, b'\xff')
        assert isinstance(error, UnicodeDecodeError), error

    def test_stateful_encoder(self):
        """Encoders with shift states keep working across characters."""
        encoder = PythonCodec('iso-2022-jp', 'iso2022_jp').new_encoder()
        dst = bytearray()
        for char in 'aあb':
            _, _, error = encoder.transform(dst, char.encode('utf-8'))
            assert error is None, error
        _, _, error = encoder.transform(dst, 'é'.encode('utf-8'))
        assert error is not None
        _, _, error = encoder.transform(dst, 'い'.encode('utf-8'))
        assert error is None, error

    def test_fresh_encoders(self):
        codec = PythonCodec('big5', 'big5hkscs')
        assert codec.new_encoder() is not codec.new_encoder()

    def test_whatwg_euro(self):
        """The euro sign is added to codecs that lack it."""
        codec = whatwg_euro('gbk', 'gbk', b'\x80')
        overridden = PythonCodec('ascii', overrides={'\u20ac': b'E'})
        assert encode(overridden, '\u20ac')[0] == b'E'
        assert encode(codec, '\u20ac')[:2] == (b'\x80', 1)
        assert encode(codec, '\u4e2d')[0] == '\u4e2d'.encode('gbk')
        assert encode(codec, EMOJI.decode('utf-8'))[3] is not None

    def test_malformed_source(self):
        """Malformed utf-8 is rejected unless the codec replaces it."""
        dst = bytearray()
        _, _, error = PythonCodec('utf-16le', 'utf_16_le').new_encoder().transform(dst, b'\xff')
        assert isinstance(error, UnicodeDecodeError), error
        codec = PythonCodec('utf-16le', 'utf_16_le', source_errors='replace')
        result = codec.new_encoder().transform(dst, b'\xff')
        assert result == (2, 1, None), result
        assert dst == b'\xfd\xff'

    def test_whatwg_windows(self):
        """Undefined C1 positions map to themselves in web windows codepages."""
        codec = whatwg_windows('windows-1252', 'cp1252')
        assert encode(codec, '\x81')[0] == b'\x81'
        assert encode(codec, '€')[0] == b'\x80'
        assert encode(codec, 'é')[0] == b'\xe9'
        assert encode(codec, 'ā')[3] is not None

    def test_whatwg_windows_undefined(self):
        """Undefined positions outside the C1 range stay undefined."""
        codec = whatwg_windows('windows-874', 'cp874')
        # 0xDB is undefined in windows-874: no thai character encodes to it
        for cp in range(0xe00, 0xe80):
            encoded, _, _, error = encode(codec, chr(cp))
            assert error is not None or encoded != b'\xdb', hex(cp)
        assert encode(codec, '\u0e01')[0] == b'\xa1'
        assert encode(codec, '\x81')[0] == b'\x81'

    def test_x_user_defined(self):
        codec = x_user_defined()
        assert encode(codec, 'A')[0] == b'A'
        assert encode(codec, '\uf780')[0] == b'\x80'
        assert encode(codec, '\uf7ff')[0] == b'\xff'
        assert encode(codec, 'é')[3] is not None

    def test_charmap_table_size(self):
        with self.assertRaises(ValueError):
            CharmapCodec('short', 'abc')

    def test_replacement(self):
        """The replacement encoding accepts anything."""
        dst = bytearray()
        _, _, error = ReplacementCodec().new_encoder().transform(dst, b'\xff')
        assert error is None
        assert dst == '\ufffd'.encode('utf-8')

    def test_char_length(self):
        """All codecs measure characters in the utf-8 source."""
        codec = lookup('gbk').codec
        assert codec.char_length(b'a\xe4\xb8\xad', 1) == 3
        assert codec.char_length(b'\xe4\xb8') == 1

    def test_utf16(self):
        encoded, _, _, error = encode(lookup('utf-16').codec, EMOJI.decode('utf-8'))
        assert error is None
        assert encoded == EMOJI.decode('utf-8').encode('utf-16-le')
        encoded, _, _, error = encode(lookup('utf-16be').codec, 'A')
        assert encoded == b'\x00A'


if __name__ == '__main__':
    unittest.main()
