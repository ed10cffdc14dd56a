"""
sqlcharset.charsets - sql charset names

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .encoding import normalise_label, encodings
from .validators import ASCIIValidator, UTF8Validator, OtherValidator


CHARSET_UTF8MB4 = 'utf8mb4'
# legacy sql utf-8 of at most 3 bytes per character
CHARSET_UTF8 = 'utf8'
CHARSET_GBK = 'gbk'
CHARSET_LATIN1 = 'latin1'
CHARSET_BINARY = 'binary'
CHARSET_ASCII = 'ascii'

DEFAULT_CHARSET = CHARSET_UTF8MB4

# charsets with a fixed meaning in sql, whether or not they are encoding labels
SQL_CHARSETS = (
    CHARSET_UTF8MB4, CHARSET_UTF8, CHARSET_GBK,
    CHARSET_LATIN1, CHARSET_BINARY, CHARSET_ASCII,
)


def is_known_charset(charset, registry=encodings):
    """Charset is a sql charset name or a registered encoding label."""
    return normalise_label(charset) in SQL_CHARSETS or charset in registry


def validator_for(charset, check_mb4_in_utf8=True):
    """
    Select the string validator for a column or connection charset.

    charset: sql charset name
    check_mb4_in_utf8: reject 4-byte characters in the legacy utf8 charset
    """
    name = normalise_label(charset)
    if name == CHARSET_ASCII:
        return ASCIIValidator()
    if name == CHARSET_UTF8MB4:
        return UTF8Validator(is_utf8mb4=True)
    if name == CHARSET_UTF8:
        return UTF8Validator(is_utf8mb4=False, check_mb4_in_utf8=check_mb4_in_utf8)
    return OtherValidator(charset)
