# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Translation of leading command line flags into environment assignments for the instrumentation libraries.
Flags are consumed strictly left to right; the first argument that is not a flag of the active mode
begins the target command, and is never interpreted, even if it looks like a flag.
'''

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from .modes import ARF, ERO, Mode, MTERO


@dataclass(frozen=True)
class Switch:
  'A flag that matches an exact literal and assigns "1".'
  name:str
  var:str

  def match(self, arg:str) -> str|None:
    return '1' if arg == self.name else None


@dataclass(frozen=True)
class Valued:
  'A flag of the form `-name=value`; the value is the text after the first "=", optionally transformed.'
  name:str
  var:str
  metavar:str = 'N'
  transform:Callable[[str],str]|None = None

  @property
  def prefix(self) -> str: return self.name + '='

  def match(self, arg:str) -> str|None:
    prefix = self.prefix
    if not arg.startswith(prefix): return None
    val = arg[len(prefix):]
    return val if self.transform is None else self.transform(val)


Flag = Switch|Valued


signal_numbers = {
  'HUP': 1,
  'INT': 2,
  'USR1': 10,
  'USR2': 12,
  'TERM': 15,
}


def signal_number(name:str) -> str:
  '''
  Map a case-insensitive symbolic signal name to its number as a string.
  Any other value is presumed to be a numeric signal and is returned unchanged.
  '''
  try: return str(signal_numbers[name.upper()])
  except KeyError: return name


arf_flags:tuple[Flag, ...] = (
  Switch('-mangled', 'ARF_MANGLED'),
  Switch('-printvars', 'ARF_PRINTVARS'),
  Valued('-maxpath', 'ARF_MAXPATH'),
  Valued('-maxary', 'ARF_MAXARRAY'),
  Valued('-maxstr', 'ARF_MAXSTRING', 'M'),
)

ero_flags:tuple[Flag, ...] = (
  Valued('-maxpath', 'ARF_MAXPATH'),
  Switch('-start', 'LIBERO_START'),
  Valued('-signal', 'LIBERO_SIGNAL', 'NAME', transform=signal_number),
  Valued('-tick', 'LIBERO_TICK', 'S'),
  Valued('-karmas', 'LIBERO_KARMA_DEPTH'),
  Valued('-depth', 'LIBERO_DEPTH'),
  Switch('-terse', 'LIBERO_TERSE'),
)

flag_tables:dict[Mode, tuple[Flag, ...]] = {
  ARF: arf_flags,
  ERO: ero_flags,
  MTERO: ero_flags,
}


def match_flag(table:Iterable[Flag], arg:str) -> tuple[str,str]|None:
  'Return the (var, value) assignment of the first flag in `table` that matches `arg`, or None.'
  for flag in table:
    val = flag.match(arg)
    if val is not None: return (flag.var, val)
  return None


def translate_flags(mode:Mode, args:Sequence[str]) -> tuple[dict[str,str], list[str]]:
  '''
  Consume the leading flags of `args` for `mode`.
  Returns the environment assignments (last write wins) and the remaining arguments, in original order.
  '''
  table = flag_tables[mode]
  assignments:dict[str,str] = {}
  for i, arg in enumerate(args):
    assignment = match_flag(table, arg)
    if assignment is None: return assignments, list(args[i:])
    var, val = assignment
    assignments[var] = val
  return assignments, []


def usage(mode:Mode) -> str:
  'A usage line listing the flags for `mode`.'
  flags = ' '.join(f'[{f.name}]' if isinstance(f, Switch) else f'[{f.prefix}{f.metavar}]' for f in flag_tables[mode])
  return f'usage: {mode.invocation_name} {flags} <program> [<args>...]'
