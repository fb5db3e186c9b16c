# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Preload chains: the values of the environment variables that list libraries to inject into a process.

`LD_PRELOAD` is read by the dynamic loader and is a plain `:`-separated list.

`SANDBOX_LD_PRELOAD` is read by the sandboxing layer, which expects a two-tier list:
a head, then a `,`, then a `:`-separated tail. The first library appended to a value without a comma
is joined with `,`; every later one is joined with `:`.
The sandbox parses on exactly this convention, so parse and join must reproduce the inherited text exactly.
'''

from dataclasses import dataclass
from typing import Mapping


LD_PRELOAD = 'LD_PRELOAD'
SANDBOX_LD_PRELOAD = 'SANDBOX_LD_PRELOAD'


@dataclass(frozen=True)
class PreloadChain:
  'A `:`-separated list of libraries.'
  entries:tuple[str, ...] = ()

  @classmethod
  def parse(cls, value:str) -> 'PreloadChain':
    return cls(tuple(value.split(':')) if value else ())

  def append(self, lib:str) -> 'PreloadChain':
    return PreloadChain((*self.entries, lib))

  def join(self) -> str: return ':'.join(self.entries)


@dataclass(frozen=True)
class SandboxChain:
  '''
  A two-tier list: `head` is the text before the first `,`.
  `tail` is None if there is no comma; otherwise it holds the `:`-separated entries after it.
  '''
  head:str = ''
  tail:tuple[str, ...]|None = None

  @classmethod
  def parse(cls, value:str) -> 'SandboxChain':
    head, comma, rest = value.partition(',')
    if not comma: return cls(head, None)
    return cls(head, tuple(rest.split(':')))

  def append(self, lib:str) -> 'SandboxChain':
    if self.tail is not None: return SandboxChain(self.head, (*self.tail, lib))
    if not self.head: return SandboxChain(lib, None) # Empty chain: the library becomes the head.
    return SandboxChain(self.head, (lib,))

  def join(self) -> str:
    if self.tail is None: return self.head
    return self.head + ',' + ':'.join(self.tail)


def extend_preload(value:str, lib:str) -> str:
  'Append `lib` to an `LD_PRELOAD` value.'
  return PreloadChain.parse(value).append(lib).join()


def extend_sandbox_preload(value:str, lib:str) -> str:
  'Append `lib` to a `SANDBOX_LD_PRELOAD` value.'
  return SandboxChain.parse(value).append(lib).join()


def preload_env(environ:Mapping[str,str], lib:str) -> dict[str,str]:
  'Return the assignments that add `lib` to both preload chains inherited from `environ`.'
  return {
    LD_PRELOAD: extend_preload(environ.get(LD_PRELOAD, ''), lib),
    SANDBOX_LD_PRELOAD: extend_sandbox_preload(environ.get(SANDBOX_LD_PRELOAD, ''), lib),
  }
