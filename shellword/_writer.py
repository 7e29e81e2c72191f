# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from typing import Optional

_TERMINATOR = 0


class OutputRegion:
    """
    Write cursor over a caller-owned buffer of fixed capacity.

    Appends never write outside of ``[start, limit)`` and always leave
    a NUL-terminated result behind.  Once the region is full, the cursor
    is pinned at ``limit`` and further appends have no effect, so callers
    detect truncation by comparing the cursor against the limit.
    """

    def __init__(self, buffer, start: int = 0, limit: Optional[int] = None):
        if limit is None:
            limit = len(buffer)
        if not (0 <= start <= limit <= len(buffer)):
            raise ValueError(f'Region [{start}, {limit}) does not fit'
                             f' a buffer of {len(buffer)} bytes.')
        self._buffer = buffer
        self.start = start
        self.cursor = start
        self.limit = limit

    @property
    def full(self) -> bool:
        return self.cursor == self.limit

    def append(self, data: bytes, max_bytes: Optional[int] = None) -> int:
        space = self.limit - self.cursor
        count = space if max_bytes is None else min(space, max_bytes)
        count = min(count, len(data))

        terminator_offset = data.find(b'\0', 0, count)
        if terminator_offset != -1:
            count = terminator_offset

        self._buffer[self.cursor:self.cursor + count] = data[:count]

        if count < space:
            self._buffer[self.cursor + count] = _TERMINATOR
            self.cursor += count
        else:
            # Truncated: sacrifice the last byte for the terminator
            if self.limit > self.start:
                self._buffer[self.limit - 1] = _TERMINATOR
            self.cursor = self.limit

        return self.cursor

    def getvalue(self) -> bytes:
        end = self.cursor
        if self.full and end > self.start:
            end -= 1
        return bytes(self._buffer[self.start:end])
