# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

# `python3 -m arf` has no meaningful invocation name; the mode is taken from ARF_MODE instead.

from os import environ
from sys import argv

from .launch import main


main([environ.get('ARF_MODE', ''), *argv[1:]])
