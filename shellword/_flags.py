# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from enum import IntFlag


class EscapeFlags(IntFlag):
    NONE = 0

    # Produce tokens that a POSIX shell parses back to the original bytes
    # (rather than text that is merely safe to display)
    SHELL = 1
