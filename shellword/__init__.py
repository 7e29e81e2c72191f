# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from ._flags import EscapeFlags
from ._multibyte import ShellwordException, UnknownEncodingException
from ._shell import Strategy, encode_word, escape_for_shell_display, escape_word, select_strategy
from ._writer import OutputRegion

__all__ = [
    'EscapeFlags',
    'OutputRegion',
    'ShellwordException',
    'Strategy',
    'UnknownEncodingException',
    'encode_word',
    'escape_for_shell_display',
    'escape_word',
    'select_strategy',
]
