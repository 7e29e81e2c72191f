# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from typing import FrozenSet, Optional

from ._flags import EscapeFlags
from ._multibyte import DecodeState, decode_one

_ASCII_PRINTABLE = frozenset(range(0x20, 0x7F))
_ASCII_WHITESPACE = frozenset(b' \t\n\v\f\r')

# https://pubs.opengroup.org/onlinepubs/9699919799/utilities/V3_chap02.html#tag_18_02
_UNSAFE_WITHOUT_QUOTES = frozenset(b'|&;<>()$`\\"\' *?[#~=%!')
# https://pubs.opengroup.org/onlinepubs/9699919799/utilities/V3_chap02.html#tag_18_02_03
_UNSAFE_INSIDE_DOUBLE_QUOTES = frozenset(b'`$\\"!')


def is_printable_byte(byte: int, flags: EscapeFlags) -> bool:
    if byte in _ASCII_PRINTABLE:
        return True

    return not (flags & EscapeFlags.SHELL) and byte in _ASCII_WHITESPACE


def is_printable_text(text: str, flags: EscapeFlags) -> bool:
    if text.isprintable():
        return True
    return not (flags & EscapeFlags.SHELL) and text.isspace()


def printable_prefix_length(run: bytes, flags: EscapeFlags,
                            encoding: Optional[str] = None) -> int:
    """
    Return the number of bytes at the start of ``run`` that make up
    printable characters only
    """
    # Fast path: no decoding needed for 7-bit ASCII
    i = 0
    for byte in run:
        if byte >= 0x80:
            break
        if not is_printable_byte(byte, flags):
            return i
        i += 1

    state = DecodeState(encoding)
    while i < len(run):
        decoded = decode_one(run, i, state)
        if not decoded.ok or not is_printable_text(decoded.character, flags):
            break
        i = decoded.cursor

    return i


def _length_until_any_of(run: bytes, stop_bytes: FrozenSet[int]) -> int:
    for i, byte in enumerate(run):
        if byte in stop_bytes:
            return i
    return len(run)


def bare_safe_length(run: bytes) -> int:
    return _length_until_any_of(run, _UNSAFE_WITHOUT_QUOTES)


def double_quote_safe_length(run: bytes) -> int:
    return _length_until_any_of(run, _UNSAFE_INSIDE_DOUBLE_QUOTES)
