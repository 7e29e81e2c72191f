# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

"""
Quoting styles for shell words.

Every style is a generator of byte pieces that, when concatenated,
form the quoted word.  None of them writes anywhere; writing into
bounded output is left to the caller.
"""

from typing import Iterator, Optional

from ._flags import EscapeFlags
from ._multibyte import DecodeState, decode_one
from ._scan import is_printable_text

_SINGLE_QUOTE = ord("'")
_BACKSLASH = ord('\\')

# https://www.gnu.org/software/bash/manual/html_node/ANSI_002dC-Quoting.html
_NAMED_ESCAPES = {
    0x07: b'\\a',
    0x08: b'\\b',
    0x1B: b'\\e',
    0x0C: b'\\f',
    0x0A: b'\\n',
    0x0D: b'\\r',
    0x09: b'\\t',
    0x0B: b'\\v',
    _SINGLE_QUOTE: b"\\'",
    _BACKSLASH: b'\\\\',
}


def bare(run: bytes) -> Iterator[bytes]:
    yield run


def double_quoted(run: bytes) -> Iterator[bytes]:
    yield b'"'
    yield run
    yield b'"'


def single_quoted(run: bytes) -> Iterator[bytes]:
    """
    Quote ``run`` as 'text' with every embedded single quote
    moved outside of the quotes as \\'
    """
    quote_open = False
    i = 0

    while i < len(run):
        chunk_end = run.find(b"'", i)
        if chunk_end == -1:
            chunk_end = len(run)

        if chunk_end > i:
            if not quote_open:
                yield b"'"
                quote_open = True
            yield run[i:chunk_end]
            i = chunk_end

        while i < len(run) and run[i] == _SINGLE_QUOTE:
            if quote_open:
                yield b"'"
                quote_open = False
            yield b"\\'"
            i += 1

    if quote_open:
        yield b"'"


def _escape_byte(byte: int) -> bytes:
    escape = _NAMED_ESCAPES.get(byte)
    if escape is None:
        escape = b'\\x%02X' % byte
    return escape


def dollar_quoted(run: bytes, flags: EscapeFlags,
                  encoding: Optional[str] = None) -> Iterator[bytes]:
    """
    Quote ``run`` as $'text', escaping anything that is not a printable
    character, including bytes that do not decode at all
    """
    yield b"$'"

    state = DecodeState(encoding)
    i = 0
    while i < len(run):
        decoded = decode_one(run, i, state)
        character_bytes = run[i:decoded.cursor]
        i = decoded.cursor

        verbatim = (decoded.ok
                    and is_printable_text(decoded.character, flags)
                    and _SINGLE_QUOTE not in character_bytes
                    and _BACKSLASH not in character_bytes)

        if verbatim:
            yield character_bytes
        else:
            for byte in character_bytes:
                yield _escape_byte(byte)

    yield b"'"
