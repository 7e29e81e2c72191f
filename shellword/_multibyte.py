# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import codecs
import locale
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ShellwordException(Exception):
    pass


class UnknownEncodingException(ShellwordException):
    def __init__(self, encoding):
        super().__init__(f'There is no codec for encoding {encoding!r}.')


def resolve_encoding(encoding: Optional[str] = None) -> str:
    if encoding is None:
        encoding = locale.getpreferredencoding(False)
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise UnknownEncodingException(encoding)


class DecodeState:
    """
    Shift state of a multibyte decoding pass over a single string
    """

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = resolve_encoding(encoding)
        self._decoder = codecs.getincrementaldecoder(self.encoding)(errors='strict')

    def feed(self, byte_run: bytes) -> str:
        return self._decoder.decode(byte_run, final=False)

    def reset(self):
        self._decoder.reset()


class DecodeStatus(Enum):
    DECODED = 'decoded'
    INVALID = 'invalid'
    INCOMPLETE = 'incomplete'


@dataclass(frozen=True)
class Decoded:
    status: DecodeStatus
    cursor: int
    character: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.DECODED


def decode_one(run: bytes, cursor: int, state: DecodeState) -> Decoded:
    """
    Decode the character starting at ``run[cursor]``.

    An invalid sequence consumes exactly one byte and resets ``state``
    so that the next call resynchronizes at the following byte.
    A sequence cut short by the end of ``run`` consumes the rest of ``run``.
    """
    position = cursor
    while position < len(run):
        try:
            text = state.feed(run[position:position + 1])
        except UnicodeDecodeError:
            state.reset()
            return Decoded(DecodeStatus.INVALID, cursor + 1)

        position += 1
        if text:
            return Decoded(DecodeStatus.DECODED, position, text)

    return Decoded(DecodeStatus.INCOMPLETE, len(run))
