# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Mapping

from .modes import Mode


G_SLICE = 'G_SLICE'

# GLib's slice allocator caches freed blocks, which the profilers would report as leaks.
profiler_defaults = {
  G_SLICE: 'always-malloc',
}


def env_defaults(mode:Mode, environ:Mapping[str,str]) -> dict[str,str]:
  '''
  Return the default assignments for `mode` that are not already set to a non-empty value in `environ`.
  Only the profiling modes have defaults.
  '''
  if not mode.is_profiler: return {}
  return { k: v for k, v in profiler_defaults.items() if not environ.get(k) }
