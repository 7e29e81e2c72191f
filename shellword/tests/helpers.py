# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import os
import shutil
import subprocess

BASH = shutil.which('bash')


def parse_with_bash(token: bytes) -> bytes:
    """
    Have Bash parse ``token`` as a single word and return the bytes it expands to
    """
    env = dict(os.environ)
    env['LC_ALL'] = 'C'  # i.e. leave all bytes >=0x80 alone
    return subprocess.check_output([BASH, '-c', b'printf %s ' + token], env=env)
