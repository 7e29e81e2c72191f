# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from unittest import TestCase

from parameterized import parameterized

from .._flags import EscapeFlags
from .._scan import bare_safe_length, double_quote_safe_length, printable_prefix_length

_SHELL = EscapeFlags.SHELL
_DISPLAY = EscapeFlags.NONE


class PrintablePrefixLengthTest(TestCase):

    @parameterized.expand([
        ('empty', b'', _SHELL, 0),
        ('plain', b'hello', _SHELL, 5),
        ('space', b'a b', _SHELL, 3),
        ('tab_shell', b'a\tb', _SHELL, 1),
        ('tab_display', b'a\tb', _DISPLAY, 3),
        ('newline_display', b'a\nb', _DISPLAY, 3),
        ('delete', b'ab\x7f', _DISPLAY, 2),
        ('multibyte', b'caf\xc3\xa9', _SHELL, 5),
        ('control_after_multibyte', b'caf\xc3\xa9\x01', _SHELL, 5),
        ('invalid', b'ab\xff', _SHELL, 2),
        ('invalid_then_more', b'\xffabc', _SHELL, 0),
        ('incomplete', b'ab\xe2\x82', _SHELL, 2),
        ('next_line_shell', b'\xc2\x85', _SHELL, 0),
        ('next_line_display', b'\xc2\x85', _DISPLAY, 2),
        ('zero_width_space', b'x\xe2\x80\x8b', _SHELL, 1),
    ])
    def test(self, _label, run, flags, expected_length):
        self.assertEqual(printable_prefix_length(run, flags, 'utf-8'), expected_length)

    def test_latin_1_control_range(self):
        self.assertEqual(printable_prefix_length(b'\xe9\x85', _SHELL, 'latin-1'), 1)

    def test_repeatable(self):
        run = b'tab\there'
        self.assertEqual(printable_prefix_length(run, _SHELL, 'utf-8'),
                         printable_prefix_length(run, _SHELL, 'utf-8'))


class BareSafeLengthTest(TestCase):

    @parameterized.expand([
        ('empty', b'', 0),
        ('file_name', b'hello-world_1.txt', 17),
        ('path', b'/usr/lib/x86_64,y+z@host:1', 26),
        ('space', b'a b', 1),
        ('tilde', b'~user', 0),
        ('assignment', b'a=b', 1),
        ('percent', b'100%', 3),
        ('glob', b'*.c', 0),
        ('bracket', b'a[1]', 1),
        ('quote', b"it's", 2),
        ('multibyte', b'caf\xc3\xa9', 5),
    ])
    def test(self, _label, run, expected_length):
        self.assertEqual(bare_safe_length(run), expected_length)


class DoubleQuoteSafeLengthTest(TestCase):

    @parameterized.expand([
        ('empty', b'', 0),
        ('single_quote', b"it's", 4),
        ('space_and_glob', b'a b*', 4),
        ('dollar', b'$HOME', 0),
        ('bang', b'a!b', 1),
        ('backslash', b'a\\b', 1),
        ('backtick', b'a`b`', 1),
        ('double_quote', b'say "hi"', 4),
    ])
    def test(self, _label, run, expected_length):
        self.assertEqual(double_quote_safe_length(run), expected_length)
