"""
sqlcharset.encoding - encoding labels and codecs

(c) 2020--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .base import NotFoundError, CanonicalEncoding, NOT_FOUND, Codec, Transformer, normalise_label
from .registry import EncodingRegistry
from .encoders import NopCodec, PythonCodec, CharmapCodec, ReplacementCodec
from .definitions import encodings
from . import utf8


def lookup(label):
    """
    Resolve an encoding label to its codec and canonical name.
    Returns a falsy CanonicalEncoding(None, '') if the label is not recognised.
    """
    return encodings.lookup(label)
