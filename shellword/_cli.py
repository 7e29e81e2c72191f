# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import argparse
import os
import sys
import traceback
from argparse import RawDescriptionHelpFormatter
from signal import SIGINT
from textwrap import dedent
from typing import List, Tuple

import colorama

from ._argparse_color import add_color_to_formatter_class
from ._flags import EscapeFlags
from ._messenger import Messenger
from ._metadata import APP, DESCRIPTION, VERSION
from ._multibyte import resolve_encoding
from ._shell import encode_word, escape_word, select_strategy


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f'{value} is not a positive number')
    return value


def _parse_command_line(colorize: bool, args=None):
    _EPILOG = dedent(f"""\
        examples:
          $ {APP} 'hello world' "it's" "$(printf 'tab\\there')"
          $ find . -print0 | {APP} --null

        Software libre licensed under GPL v3 or later.
    """)

    if args is None:
        args = sys.argv[1:]

    formatter_class = RawDescriptionHelpFormatter
    if colorize:
        formatter_class = add_color_to_formatter_class(formatter_class)

    parser = argparse.ArgumentParser(prog=APP, add_help=False,
                                     description=DESCRIPTION, epilog=_EPILOG,
                                     formatter_class=formatter_class)

    modes = parser.add_argument_group('modes').add_mutually_exclusive_group()
    modes.add_argument('--help', '-h', action='help', help='show this help message and exit')
    modes.add_argument('--version', action='version', version='%(prog)s ' + VERSION)

    input_ = parser.add_argument_group('input')
    input_.add_argument('words', metavar='WORD', nargs='*',
                        help='word to quote; if none are given, records are read'
                             ' from standard input instead')
    input_.add_argument('--null', '-0', dest='delimiter', default=b'\n',
                        action='store_const', const=b'\0',
                        help='separate records on standard input by NUL bytes'
                             ' rather than newlines')
    input_.add_argument('--encoding', metavar='ENCODING', dest='encoding', default=None,
                        help='encoding to decode multibyte characters with'
                             ' (default: encoding of the current locale)')

    output = parser.add_argument_group('output')
    output.add_argument('--display', dest='shell', default=True, action='store_false',
                        help='escape for display only, not for use in a shell;'
                             ' whitespace is left as is and no quotes are added')
    output.add_argument('--limit', metavar='BYTES', dest='limit', type=_positive_int,
                        default=None,
                        help='write each word into a buffer of that many bytes'
                             ' (terminator included), truncating if need be')

    switches = parser.add_argument_group('flags')
    switches.add_argument('--debug', dest='debug', action='store_true',
                          help='enable debugging output')
    switches.add_argument('--verbose', '-v', dest='verbose', action='store_true',
                          help='enable verbose output')

    return parser.parse_args(args)


def _split_records(data: bytes, delimiter: bytes) -> List[bytes]:
    if not data:  # protect against this: b''.split(b'\n') -> [b'']
        return []
    records = data.split(delimiter)
    if data.endswith(delimiter):
        records.pop()
    return records


def _encode(config, word: bytes, flags: EscapeFlags) -> Tuple[bytes, bool]:
    if config.limit is None:
        return escape_word(word, flags, encoding=config.encoding), False

    buffer = bytearray(config.limit)
    end = encode_word(buffer, word, flags, encoding=config.encoding)
    truncated = end == config.limit
    if truncated:
        end -= 1  # i.e. drop the terminator
    return bytes(buffer[:end]), truncated


def _innermost_main(config, messenger, stdin, stdout):
    flags = EscapeFlags.SHELL if config.shell else EscapeFlags.NONE
    config.encoding = resolve_encoding(config.encoding)

    if config.limit == 1:
        messenger.tell_info('A limit of 1 byte leaves room for the terminator only'
                            '; all words will come out empty.')

    if config.words:
        words = [os.fsencode(word) for word in config.words]
        separator = b' '
    else:
        words = _split_records(stdin.read(), config.delimiter)
        separator = b'\n'

    tokens = []
    for index, word in enumerate(words, start=1):
        if b'\0' in word:
            messenger.tell_info(f'Word {index} contains a NUL byte'
                                '; only the part before it will be quoted.')
            word = word[:word.index(b'\0')]

        token, truncated = _encode(config, word, flags)
        tokens.append(token)

        if config.verbose:
            strategy = select_strategy(word, flags, config.encoding)
            messenger.tell_word(index, os.fsdecode(token), strategy, truncated)
        elif truncated:
            messenger.tell_info(f'Word {index} was truncated to fit {config.limit} bytes.')

    if tokens:
        stdout.write(separator.join(tokens) + b'\n')
        stdout.flush()


def _inner_main():
    colorize = 'NO_COLOR' not in os.environ
    if colorize:
        colorama.init()

    messenger = Messenger(colorize=colorize)

    config = _parse_command_line(colorize=colorize)
    try:
        _innermost_main(config, messenger, stdin=sys.stdin.buffer, stdout=sys.stdout.buffer)
    except Exception as e:
        if config.debug:
            traceback.print_exc()
        messenger.tell_error(str(e))
        sys.exit(1)


def main():
    try:
        _inner_main()
    except KeyboardInterrupt:
        sys.exit(128 + SIGINT)
