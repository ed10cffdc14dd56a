"""
sqlcharset.encoding.definitions - encoding label definitions

(c) 2020--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .registry import EncodingRegistry
from .encoders import (
    NopCodec, PythonCodec, ReplacementCodec,
    whatwg_windows, whatwg_euro, x_user_defined,
)


# iso-8859-8 visual and logical ordering share a codec
_iso8859_8 = PythonCodec('iso-8859-8', 'iso8859_8')


# labels follow the WHATWG encoding standard, as used by html and sql engines
# plus the sql-specific utf8, utf8mb4 and binary
# https://encoding.spec.whatwg.org/#names-and-labels
_ENCODINGS = (

    # unicode and binary: any byte sequence passes through unchanged
    (NopCodec('utf-8'), 'utf-8', (
        'unicode-1-1-utf-8', 'utf-8', 'utf8', 'utf8mb4',
    )),
    (NopCodec('binary'), 'binary', (
        'binary',
    )),

    # legacy single-byte encodings
    (PythonCodec('ibm866', 'cp866'), 'ibm866', (
        '866', 'cp866', 'csibm866', 'ibm866',
    )),
    (PythonCodec('iso-8859-2', 'iso8859_2'), 'iso-8859-2', (
        'csisolatin2', 'iso-8859-2', 'iso-ir-101', 'iso8859-2', 'iso88592',
        'iso_8859-2', 'iso_8859-2:1987', 'l2', 'latin2',
    )),
    (PythonCodec('iso-8859-3', 'iso8859_3'), 'iso-8859-3', (
        'csisolatin3', 'iso-8859-3', 'iso-ir-109', 'iso8859-3', 'iso88593',
        'iso_8859-3', 'iso_8859-3:1988', 'l3', 'latin3',
    )),
    (PythonCodec('iso-8859-4', 'iso8859_4'), 'iso-8859-4', (
        'csisolatin4', 'iso-8859-4', 'iso-ir-110', 'iso8859-4', 'iso88594',
        'iso_8859-4', 'iso_8859-4:1988', 'l4', 'latin4',
    )),
    (PythonCodec('iso-8859-5', 'iso8859_5'), 'iso-8859-5', (
        'csisolatincyrillic', 'cyrillic', 'iso-8859-5', 'iso-ir-144',
        'iso8859-5', 'iso88595', 'iso_8859-5', 'iso_8859-5:1988',
    )),
    (PythonCodec('iso-8859-6', 'iso8859_6'), 'iso-8859-6', (
        'arabic', 'asmo-708', 'csiso88596e', 'csiso88596i', 'csisolatinarabic',
        'ecma-114', 'iso-8859-6', 'iso-8859-6-e', 'iso-8859-6-i', 'iso-ir-127',
        'iso8859-6', 'iso88596', 'iso_8859-6', 'iso_8859-6:1987',
    )),
    (PythonCodec('iso-8859-7', 'iso8859_7'), 'iso-8859-7', (
        'csisolatingreek', 'ecma-118', 'elot_928', 'greek', 'greek8',
        'iso-8859-7', 'iso-ir-126', 'iso8859-7', 'iso88597', 'iso_8859-7',
        'iso_8859-7:1987', 'sun_eu_greek',
    )),
    (_iso8859_8, 'iso-8859-8', (
        'csiso88598e', 'csisolatinhebrew', 'hebrew', 'iso-8859-8', 'iso-8859-8-e',
        'iso-ir-138', 'iso8859-8', 'iso88598', 'iso_8859-8', 'iso_8859-8:1988',
        'visual',
    )),
    (_iso8859_8, 'iso-8859-8-i', (
        'csiso88598i', 'iso-8859-8-i', 'logical',
    )),
    (PythonCodec('iso-8859-10', 'iso8859_10'), 'iso-8859-10', (
        'csisolatin6', 'iso-8859-10', 'iso-ir-157', 'iso8859-10', 'iso885910',
        'l6', 'latin6',
    )),
    (PythonCodec('iso-8859-13', 'iso8859_13'), 'iso-8859-13', (
        'iso-8859-13', 'iso8859-13', 'iso885913',
    )),
    (PythonCodec('iso-8859-14', 'iso8859_14'), 'iso-8859-14', (
        'iso-8859-14', 'iso8859-14', 'iso885914',
    )),
    (PythonCodec('iso-8859-15', 'iso8859_15'), 'iso-8859-15', (
        'csisolatin9', 'iso-8859-15', 'iso8859-15', 'iso885915', 'iso_8859-15',
        'l9',
    )),
    (PythonCodec('iso-8859-16', 'iso8859_16'), 'iso-8859-16', (
        'iso-8859-16',
    )),
    (PythonCodec('koi8-r', 'koi8_r'), 'koi8-r', (
        'cskoi8r', 'koi', 'koi8', 'koi8-r', 'koi8_r',
    )),
    (PythonCodec('koi8-u', 'koi8_u'), 'koi8-u', (
        'koi8-u',
    )),
    (PythonCodec('macintosh', 'mac_roman'), 'macintosh', (
        'csmacintosh', 'mac', 'macintosh', 'x-mac-roman',
    )),
    # iso-8859-11 and tis-620 are resolved to their windows superset
    (whatwg_windows('windows-874', 'cp874'), 'windows-874', (
        'dos-874', 'iso-8859-11', 'iso8859-11', 'iso885911', 'tis-620',
        'windows-874',
    )),
    (whatwg_windows('windows-1250', 'cp1250'), 'windows-1250', (
        'cp1250', 'windows-1250', 'x-cp1250',
    )),
    (whatwg_windows('windows-1251', 'cp1251'), 'windows-1251', (
        'cp1251', 'windows-1251', 'x-cp1251',
    )),
    # latin-1 and even ascii labels are windows-1252, not strict iso-8859-1
    (whatwg_windows('windows-1252', 'cp1252'), 'windows-1252', (
        'ansi_x3.4-1968', 'ascii', 'cp1252', 'cp819', 'csisolatin1', 'ibm819',
        'iso-8859-1', 'iso-ir-100', 'iso8859-1', 'iso88591', 'iso_8859-1',
        'iso_8859-1:1987', 'l1', 'latin1', 'us-ascii', 'windows-1252',
        'x-cp1252',
    )),
    (whatwg_windows('windows-1253', 'cp1253'), 'windows-1253', (
        'cp1253', 'windows-1253', 'x-cp1253',
    )),
    # likewise iso-8859-9 is windows-1254
    (whatwg_windows('windows-1254', 'cp1254'), 'windows-1254', (
        'cp1254', 'csisolatin5', 'iso-8859-9', 'iso-ir-148', 'iso8859-9',
        'iso88599', 'iso_8859-9', 'iso_8859-9:1989', 'l5', 'latin5',
        'windows-1254', 'x-cp1254',
    )),
    (whatwg_windows('windows-1255', 'cp1255'), 'windows-1255', (
        'cp1255', 'windows-1255', 'x-cp1255',
    )),
    (whatwg_windows('windows-1256', 'cp1256'), 'windows-1256', (
        'cp1256', 'windows-1256', 'x-cp1256',
    )),
    (whatwg_windows('windows-1257', 'cp1257'), 'windows-1257', (
        'cp1257', 'windows-1257', 'x-cp1257',
    )),
    (whatwg_windows('windows-1258', 'cp1258'), 'windows-1258', (
        'cp1258', 'windows-1258', 'x-cp1258',
    )),
    (PythonCodec('x-mac-cyrillic', 'mac_cyrillic'), 'x-mac-cyrillic', (
        'x-mac-cyrillic', 'x-mac-ukrainian',
    )),

    # legacy multi-byte chinese (simplified)
    # web gbk encodes the euro sign as in windows-936
    (whatwg_euro('gbk', 'gbk', b'\x80'), 'gbk', (
        'chinese', 'csgb2312', 'csiso58gb231280', 'gb2312', 'gb_2312',
        'gb_2312-80', 'gbk', 'iso-ir-58', 'x-gbk',
    )),
    (PythonCodec('gb18030'), 'gb18030', (
        'gb18030',
    )),
    (PythonCodec('hz-gb-2312', 'hz'), 'hz-gb-2312', (
        'hz-gb-2312',
    )),

    # legacy multi-byte chinese (traditional)
    # web big5 includes the hong kong supplement and the euro sign
    (whatwg_euro('big5', 'big5hkscs', b'\xa3\xe1'), 'big5', (
        'big5', 'big5-hkscs', 'cn-big5', 'csbig5', 'x-x-big5',
    )),

    # legacy multi-byte japanese
    (PythonCodec('euc-jp', 'euc_jp'), 'euc-jp', (
        'cseucpkdfmtjapanese', 'euc-jp', 'x-euc-jp',
    )),
    (PythonCodec('iso-2022-jp', 'iso2022_jp'), 'iso-2022-jp', (
        'csiso2022jp', 'iso-2022-jp',
    )),
    # web shift_jis is the microsoft variant
    (PythonCodec('shift_jis', 'cp932'), 'shift_jis', (
        'csshiftjis', 'ms_kanji', 'shift-jis', 'shift_jis', 'sjis',
        'windows-31j', 'x-sjis',
    )),

    # legacy multi-byte korean
    # web euc-kr is the unified hangul code extension
    (PythonCodec('euc-kr', 'cp949'), 'euc-kr', (
        'cseuckr', 'csksc56011987', 'euc-kr', 'iso-ir-149', 'korean',
        'ks_c_5601-1987', 'ks_c_5601-1989', 'ksc5601', 'ksc_5601',
        'windows-949',
    )),

    # stateful encodings deemed unsafe
    (ReplacementCodec(), 'replacement', (
        'csiso2022kr', 'iso-2022-kr', 'iso-2022-cn', 'iso-2022-cn-ext',
    )),

    # utf-16, byte order marks are not interpreted
    # malformed utf-8 source encodes as U+FFFD, so these never reject
    (PythonCodec('utf-16be', 'utf_16_be', source_errors='replace'), 'utf-16be', (
        'utf-16be',
    )),
    (PythonCodec('utf-16le', 'utf_16_le', source_errors='replace'), 'utf-16le', (
        'utf-16', 'utf-16le',
    )),

    (x_user_defined(), 'x-user-defined', (
        'x-user-defined',
    )),
)


encodings = EncodingRegistry(_ENCODINGS)
