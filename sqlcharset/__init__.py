"""
sqlcharset - charset validation and truncation for sql strings

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .encoding import lookup, encodings, NotFoundError, CanonicalEncoding
from .validators import (
    TruncateStrategy, ValidationOutcome, StringValidator,
    ASCIIValidator, UTF8Validator, OtherValidator,
)
from .charsets import validator_for, is_known_charset, SQL_CHARSETS
