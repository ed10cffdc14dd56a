"""
sqlcharset.encoding.base - base classes and functions for encoding

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple

from . import utf8


class NotFoundError(KeyError):
    """Encoding not found."""


# characters stripped from both ends of a label before matching
_LABEL_WHITESPACE = '\t\n\r\f '

# lowercase ASCII letters only, leave other letters alone
_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz'
)


def normalise_label(label):
    """Reduce an encoding label to its matching form."""
    return str(label).strip(_LABEL_WHITESPACE).translate(_ASCII_LOWER)


class CanonicalEncoding(namedtuple('CanonicalEncoding', 'codec name')):
    """Codec and canonical name an encoding label resolves to."""

    def __bool__(self):
        """Not-found result is falsy."""
        return self.codec is not None


NOT_FOUND = CanonicalEncoding(None, '')


class Transformer:
    """
    Encoder from UTF-8 source bytes to a target charset.
    Transformer objects may carry state and must not be shared between calls.
    """

    def transform(self, dst, src, at_eof=True):
        """
        Append the target-charset encoding of src to dst.

        dst: bytearray to extend
        src: UTF-8 encoded bytes
        at_eof: no more input will follow src
        returns: (bytes written, bytes consumed, error or None)
        """
        raise NotImplementedError


class Codec:
    """Transcoding capability for one charset."""

    def __init__(self, name):
        """Set codec name."""
        self.name = name

    @staticmethod
    def char_length(data, offset=0):
        """Length of the UTF-8 character starting at offset; 1 if malformed."""
        return utf8.char_length(data, offset)

    def new_encoder(self):
        """Create a fresh encoder from UTF-8."""
        raise NotImplementedError

    def __repr__(self):
        """Representation."""
        return f"{type(self).__name__}(name='{self.name}')"
