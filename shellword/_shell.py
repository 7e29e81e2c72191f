# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import os
import sys
from enum import Enum
from typing import Iterator, Optional

from ._flags import EscapeFlags
from ._multibyte import resolve_encoding
from ._quote import bare, dollar_quoted, double_quoted, single_quoted
from ._scan import bare_safe_length, double_quote_safe_length, printable_prefix_length
from ._writer import OutputRegion

_EMPTY_WORD = b'""'


class Strategy(Enum):
    BARE = 'bare'
    DOUBLE_QUOTED = 'double-quoted'
    SINGLE_QUOTED = 'single-quoted'
    ESCAPED = 'escaped'


def _limit_run(source: bytes, max_len: Optional[int]) -> bytes:
    run = bytes(source if max_len is None else source[:max_len])
    terminator_offset = run.find(b'\0')
    if terminator_offset != -1:
        run = run[:terminator_offset]
    return run


def select_strategy(run: bytes, flags: EscapeFlags = EscapeFlags.SHELL,
                    encoding: Optional[str] = None) -> Strategy:
    if printable_prefix_length(run, flags, encoding) < len(run):
        return Strategy.ESCAPED
    elif not (flags & EscapeFlags.SHELL) or bare_safe_length(run) == len(run):
        return Strategy.BARE
    elif double_quote_safe_length(run) == len(run):
        return Strategy.DOUBLE_QUOTED
    else:
        return Strategy.SINGLE_QUOTED


def _pieces_for(strategy: Strategy, run: bytes, flags: EscapeFlags,
                encoding: Optional[str]) -> Iterator[bytes]:
    if strategy is Strategy.ESCAPED:
        return dollar_quoted(run, flags, encoding)
    elif strategy is Strategy.BARE:
        return bare(run)
    elif strategy is Strategy.DOUBLE_QUOTED:
        return double_quoted(run)
    else:
        return single_quoted(run)


def encode_word(dest, source: bytes, flags: EscapeFlags = EscapeFlags.SHELL, *,
                start: int = 0, limit: Optional[int] = None,
                max_len: Optional[int] = None, encoding: Optional[str] = None) -> int:
    """
    Write ``source`` into ``dest[start:limit]`` as a single shell word.

    At most ``max_len`` bytes of ``source`` are encoded, and never more
    than up to its first NUL byte.  The output is always NUL-terminated
    inside of the region.  Returns the cursor past the encoded word;
    a cursor equal to ``limit`` means that the word was truncated.
    """
    run = _limit_run(source, max_len)
    encoding = resolve_encoding(encoding)
    region = OutputRegion(dest, start, limit)

    strategy = select_strategy(run, flags, encoding)
    for piece in _pieces_for(strategy, run, flags, encoding):
        region.append(piece)

    if region.cursor == region.start:
        region.append(_EMPTY_WORD)

    return region.cursor


def escape_word(source: bytes, flags: EscapeFlags = EscapeFlags.SHELL, *,
                max_len: Optional[int] = None, encoding: Optional[str] = None) -> bytes:
    run = _limit_run(source, max_len)

    # Worst case is \xNN for every byte plus $'', plus the terminator
    buffer = bytearray(4 * len(run) + 4)

    end = encode_word(buffer, run, flags, encoding=encoding)
    assert end < len(buffer)
    return bytes(buffer[:end])


def escape_for_shell_display(text: str) -> str:
    """
    Format text for display as part of a shell command
    close to what a human would write and expect to read.

    In detail, the requirements are:
    1. Do not quote at all if the text is safe as a bare word
       and is not the empty string.
    2. Prefer double quotes over single quotes, i.e. use single
       quotes only when the text cannot go inside of double quotes.
    3. Fall back to $'...' with escapes for anything unprintable,
       including bytes that do not decode.
    """
    escaped = escape_word(os.fsencode(text), encoding=sys.getfilesystemencoding())
    return os.fsdecode(escaped)
