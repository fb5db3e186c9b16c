# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from sys import exit, stderr
from typing import Any, NoReturn


# std err.

def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)

def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)

def errLL(*items:Any, flush=False) -> None:
  "Write items to std err; sep='\\n', end='\\n'."
  print(*items, sep='\n', end='\n', file=stderr, flush=flush)


def exit_error(label:str, *items:Any, code=1) -> NoReturn:
  'Write `<label> error: <items>` to std err and exit with `code`.'
  errSL(f'{label} error:', *items, flush=True)
  exit(code)
