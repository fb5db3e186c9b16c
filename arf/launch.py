# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The launcher pipeline: resolve the mode from the invocation name, translate flags, apply defaults,
locate the preload library, extend the preload chains, and replace this process with the target program.
'''

from dataclasses import dataclass
from os import environ
from os.path import basename as _basename
from sys import argv as _argv, exit
from types import MappingProxyType
from typing import Mapping, NoReturn, Sequence

from .env import env_defaults
from .flags import translate_flags, usage
from .io import errL, errLL, exit_error
from .locate import LibraryNotFound, locate_library, search_dirs_for_env
from .modes import Mode, mode_for_invocation, UnknownInvocation
from .preload import preload_env
from .task import exec_replace, fmt_cmd, TaskLaunchError


ARF_NOTE_EXEC = 'ARF_NOTE_EXEC'


class MissingProgram(ValueError):
  'No target program remained after the flags were consumed.'

  def __init__(self, mode:Mode) -> None:
    super().__init__(mode)
    self.mode = mode


@dataclass(frozen=True)
class Launch:
  '''
  A fully prepared launch.
  `env` is the complete environment of the target program;
  `assignments` is the subset of it that the launcher set, in the order it was set.
  '''
  mode:Mode
  lib_path:str
  cmd:tuple[str, ...]
  env:Mapping[str,str]
  assignments:Mapping[str,str]


def prepare_launch(mode:Mode, args:Sequence[str], inherited:Mapping[str,str]) -> Launch:
  '''
  Build the launch for `mode` from the arguments following the invocation name and the inherited environment.
  Raises MissingProgram or LibraryNotFound.
  '''
  flag_assignments, cmd = translate_flags(mode, args)
  if not cmd: raise MissingProgram(mode)

  assignments = env_defaults(mode, inherited)
  assignments.update(flag_assignments)

  lib_path = locate_library(mode.lib_name, search_dirs_for_env(inherited))
  assignments.update(preload_env(inherited, lib_path))

  env = dict(inherited)
  env.update(assignments)
  return Launch(mode=mode, lib_path=lib_path, cmd=tuple(cmd),
    env=MappingProxyType(env), assignments=MappingProxyType(assignments))


def main(argv:Sequence[str]|None=None) -> NoReturn:
  if argv is None: argv = _argv
  invocation = argv[0] if argv else ''
  label = _basename(invocation) or 'arf'

  try:
    mode = mode_for_invocation(invocation)
    launch = prepare_launch(mode, argv[1:], environ)
  except UnknownInvocation as e: exit_error(label, e.diagnosis)
  except MissingProgram as e:
    errL(usage(e.mode))
    exit(2)
  except LibraryNotFound as e: exit_error(label, e.diagnosis)

  if environ.get(ARF_NOTE_EXEC):
    errL(f'{label} exec: {fmt_cmd(launch.cmd)}')
    errLL(*(f'  {k}={v}' for k, v in launch.assignments.items()))

  try: exec_replace(launch.cmd, launch.env)
  except TaskLaunchError as e: exit_error(label, f'could not launch `{e.path}`: {e.diagnosis}')
