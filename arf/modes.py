# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum
from os.path import basename as _basename


class Mode(Enum):
  '''
  The operating mode of the launcher, determined by the name it was invoked as.
  Each value is the invocation name; the library token names the preload library `lib<token>.so`.
  '''
  ARF = 'arf'
  ERO = 'ero'
  MTERO = 'mtero'

  @property
  def invocation_name(self) -> str: return self.value

  @property
  def lib_token(self) -> str: return _lib_tokens[self]

  @property
  def lib_name(self) -> str: return f'lib{self.lib_token}.so'

  @property
  def is_profiler(self) -> bool: return self is not Mode.ARF


ARF = Mode.ARF
ERO = Mode.ERO
MTERO = Mode.MTERO

_lib_tokens = {
  ARF: 'arf',
  ERO: 'ero',
  MTERO: 'ero_mt',
}


class UnknownInvocation(ValueError):
  'The launcher was invoked under a name that does not select a mode.'

  def __init__(self, name:str) -> None:
    super().__init__(name)
    self.name = name

  @property
  def diagnosis(self) -> str:
    names = ', '.join(f'`{m.invocation_name}`' for m in Mode)
    return f'unrecognized invocation name: {self.name!r}; expected one of: {names}.'


def resolve_mode(invocation:str) -> Mode|None:
  'Match the final path component of `invocation` against the mode names. Returns None if there is no match.'
  name = _basename(invocation)
  for mode in Mode:
    if name == mode.invocation_name: return mode
  return None


def mode_for_invocation(invocation:str) -> Mode:
  'Like `resolve_mode`, but raise UnknownInvocation instead of returning None.'
  mode = resolve_mode(invocation)
  if mode is None: raise UnknownInvocation(_basename(invocation))
  return mode
