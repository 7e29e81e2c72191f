# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import sys

import colorama

_INFO_COLOR = colorama.Fore.WHITE + colorama.Style.BRIGHT
_ERROR_COLOR = colorama.Fore.RED + colorama.Style.BRIGHT
_WORD_COLOR = colorama.Fore.CYAN
_RESET_COLOR = colorama.Style.RESET_ALL


class Messenger:

    def __init__(self, colorize, file=None):
        self._colorize = colorize
        self._file = file

        # Multi-line block of text should by separated from consecutive output (if any)
        # by a blank line to give it some "air".  This flag is a tiny state machine.
        self._air_needed = False

    def _print(self, *args):
        print(*args, file=self._file or sys.stderr)

    def produce_air(self):
        if self._air_needed:
            self._print()
            self._air_needed = False

    def request_air(self, future_message):
        if '\n' in future_message:
            self._air_needed = True

    def _produce_and_request_air(self, future_message):
        self.produce_air()
        self.request_air(future_message)

    def tell_info(self, message):
        self._produce_and_request_air(message)
        if self._colorize:
            message = f'{_INFO_COLOR}{message}{_RESET_COLOR}'
        self._print(message)

    def tell_word(self, index, word, strategy, truncated):
        self._produce_and_request_air('')
        epilog = '  # truncated' if truncated else ''
        message = f'# [{index}] {strategy.value}: {word}'
        if self._colorize:
            message = f'{_WORD_COLOR}{message}{_RESET_COLOR}'
        message += epilog
        self._print(message)

    def tell_error(self, message):
        self._produce_and_request_air(message)
        message = f'Error: {message}'
        if self._colorize:
            message = f'{_ERROR_COLOR}{message}{_RESET_COLOR}'
        self._print(message)
