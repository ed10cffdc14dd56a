"""
sqlcharset.encoding.utf8 - structural utf-8 utilities

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


def _sequence_length(lead):
    """Expected sequence length for a lead byte, 0 if it can't start a character."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _second_byte_range(lead):
    """Allowed range of the second byte, excludes overlongs, surrogates and > U+10FFFF."""
    if lead == 0xE0:
        return 0xA0, 0xBF
    if lead == 0xED:
        return 0x80, 0x9F
    if lead == 0xF0:
        return 0x90, 0xBF
    if lead == 0xF4:
        return 0x80, 0x8F
    return 0x80, 0xBF


def decode_char(data, offset=0):
    """
    Decode the character starting at offset.

    returns: (code point, width) or (None, 1) for a malformed or truncated sequence,
             (None, 0) at end of data.
    """
    if offset >= len(data):
        return None, 0
    lead = data[offset]
    width = _sequence_length(lead)
    if width == 1:
        return lead, 1
    if not width or offset + width > len(data):
        return None, 1
    low, high = _second_byte_range(lead)
    if not low <= data[offset+1] <= high:
        return None, 1
    for trail in data[offset+2:offset+width]:
        if not 0x80 <= trail <= 0xBF:
            return None, 1
    # strip the length marker off the lead byte
    codepoint = lead & (0x7F >> width)
    for trail in data[offset+1:offset+width]:
        codepoint = (codepoint << 6) | (trail & 0x3F)
    return codepoint, width


def char_length(data, offset=0):
    """Number of bytes in the character at offset; 1 for a malformed lead byte."""
    _, width = decode_char(data, offset)
    return width


def is_valid(data):
    """Data is well-formed UTF-8."""
    if data.isascii():
        return True
    try:
        str(data, 'utf-8')
    except UnicodeDecodeError:
        return False
    return True


def iter_chars(data):
    """Iterate over (offset, code point or None, width) for each character in data."""
    offset = 0
    while offset < len(data):
        codepoint, width = decode_char(data, offset)
        yield offset, codepoint, width
        offset += width
