"""
Check and truncate strings for a sql character set
(c) 2023 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import logging
import argparse
from pathlib import Path

import sqlcharset
from sqlcharset.scripting import wrap_main, ScriptError
from sqlcharset.charsets import DEFAULT_CHARSET, is_known_charset


def _read_inputs(files):
    """Yield (name, bytes) for each input file, or standard input if none given."""
    if not files:
        yield '<stdin>', sys.stdin.buffer.read()
        return
    for file in files:
        yield file, Path(file).read_bytes()


def _split(name, data, lines):
    """Split input into strings to check, optionally by line."""
    if not lines:
        yield name, data
        return
    for number, line in enumerate(data.splitlines(), 1):
        yield f'{name}:{number}', line


def lookup(args):
    """Print the canonical name for each label."""
    missing = 0
    for label in args.label:
        encoding = sqlcharset.lookup(label)
        if encoding:
            print(f'{label}: {encoding.name}')
        else:
            print(f'{label}: not found')
            missing += 1
    if missing:
        raise ScriptError(status=1)


def list_encodings(args):
    """Print the canonical encoding names, with their labels if requested."""
    for name in sqlcharset.encodings.names():
        if args.aliases:
            print(f'{name}: ' + ' '.join(sqlcharset.encodings.aliases(name)))
        else:
            print(name)


def _get_validator(args):
    if not is_known_charset(args.charset):
        logging.warning(
            "Unknown charset '%s': all input will be accepted.", args.charset
        )
    return sqlcharset.validator_for(args.charset, check_mb4_in_utf8=args.mb4_check)


def check(args):
    """Print the first invalid offset for each input."""
    validator = _get_validator(args)
    logging.debug('Checking with %r', validator)
    invalid = 0
    for name, data in _read_inputs(args.file):
        for where, string in _split(name, data, args.lines):
            invalid_pos = validator.validate(string)
            if invalid_pos == -1:
                if not args.quiet:
                    print(f'{where}: valid')
            else:
                print(f'{where}: invalid at byte {invalid_pos}')
                invalid += 1
    if invalid:
        raise ScriptError(status=1)


def truncate(args):
    """Write the truncated input to standard output."""
    validator = _get_validator(args)
    logging.debug('Truncating with %r, strategy %s', validator, args.strategy.name)
    for name, data in _read_inputs(args.file):
        result, invalid_pos = validator.truncate(data, args.strategy)
        if invalid_pos != -1:
            logging.info('%s: first invalid byte at %d', name, invalid_pos)
        sys.stdout.buffer.write(result)
    sys.stdout.flush()


def _add_charset_arguments(parser):
    parser.add_argument(
        '--charset', '-c', type=str, default=DEFAULT_CHARSET,
        help=f'sql charset to check against (default: {DEFAULT_CHARSET})'
    )
    parser.add_argument(
        '--no-mb4-check', dest='mb4_check', action='store_false',
        help='accept 4-byte characters in the legacy utf8 charset'
    )
    parser.add_argument(
        'file', nargs='*', type=str,
        help='files to read. if not given, read from standard input'
    )


def main(argv=None):
    # parse command line
    parser = argparse.ArgumentParser(
        prog='sqlcharset',
        description='Check and truncate strings for a sql character set.',
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'sqlcharset v{sqlcharset.__version__}',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    lookup_parser = subparsers.add_parser(
        'lookup', help='resolve encoding labels to their canonical name'
    )
    lookup_parser.add_argument('label', nargs='+', type=str, help='encoding label')
    lookup_parser.set_defaults(func=lookup)

    list_parser = subparsers.add_parser(
        'list', help='list the canonical encoding names'
    )
    list_parser.add_argument(
        '--aliases', '-a', action='store_true',
        help='also list the labels for each encoding'
    )
    list_parser.set_defaults(func=list_encodings)

    check_parser = subparsers.add_parser(
        'check', help='report the first invalid byte offset'
    )
    _add_charset_arguments(check_parser)
    check_parser.add_argument(
        '--lines', action='store_true',
        help='check each line separately'
    )
    check_parser.add_argument(
        '--quiet', '-q', action='store_true',
        help='only report invalid input'
    )
    check_parser.set_defaults(func=check)

    truncate_parser = subparsers.add_parser(
        'truncate', help='write input made valid for the charset'
    )
    _add_charset_arguments(truncate_parser)
    truncate_parser.add_argument(
        '--strategy', '-s', type=sqlcharset.TruncateStrategy.create,
        default=sqlcharset.TruncateStrategy.REPLACE,
        help=(
            'what to do with invalid input: `empty` to drop it, '
            '`trim` to keep the valid prefix, '
            '`replace` to replace invalid characters with ? (default)'
        )
    )
    truncate_parser.set_defaults(func=truncate)

    args = parser.parse_args(argv)
    with wrap_main(args.debug):
        args.func(args)


if __name__ == '__main__':
    main()
