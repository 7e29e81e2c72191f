# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

APP = 'shellword'
DESCRIPTION = 'Quote arbitrary bytes (e.g. file names) as safe shell words'
VERSION = '1.0.0'
