# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from arf.env import env_defaults
from arf.modes import ARF, ERO, MTERO
from utest import utest


utest({'G_SLICE': 'always-malloc'}, env_defaults, ERO, {})
utest({'G_SLICE': 'always-malloc'}, env_defaults, MTERO, {'PATH': '/bin'})
utest({'G_SLICE': 'always-malloc'}, env_defaults, ERO, {'G_SLICE': ''})

# Existing values are never overwritten.
utest({}, env_defaults, ERO, {'G_SLICE': 'debug-blocks'})
utest({}, env_defaults, MTERO, {'G_SLICE': 'always-malloc'})

# arf has no defaults.
utest({}, env_defaults, ARF, {})
utest({}, env_defaults, ARF, {'G_SLICE': ''})
