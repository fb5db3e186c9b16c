# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
arf is a multicall launcher that runs an unmodified program with one of the arf/ero instrumentation libraries preloaded.
Installed as `arf`, `ero` and `mtero`; the invocation name selects the mode, flag table and library.
'''

from .modes import Mode, resolve_mode
