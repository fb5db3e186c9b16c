# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import access as _access, execvpe as _execvpe, R_OK, supports_effective_ids as _supports_effective_ids, X_OK
from os.path import dirname as _dir_name, exists as _path_exists, isfile as _is_file
from shlex import quote as sh_quote
from shutil import which as _which
from sys import stderr, stdout
from typing import Mapping, NoReturn, Sequence


def fmt_cmd(cmd:Sequence[str]) -> str: return ' '.join(sh_quote(word) for word in cmd)


def exec_replace(cmd:Sequence[str], env:Mapping[str,str]) -> NoReturn:
  '''
  Replace the current process with `cmd`, with `env` as its complete environment.
  A bare command name is looked up in the `PATH` of `env`.
  This only returns by raising a TaskLaunchError subclass that diagnoses the failure.
  '''
  cmd = tuple(cmd)
  if not cmd: raise TaskMissingCommand()
  # Flush so that buffered output is not lost when the process image is replaced.
  stderr.flush()
  stdout.flush()
  try: _execvpe(cmd[0], cmd, dict(env))
  # execvpe may raise FileNotFoundError, PermissionError, or OSError.
  # The distinction is more confusing than helpful; therefore we handle them all as OSError.
  except OSError as e:
    _diagnose_launch_error(cmd[0], env.get('PATH'), e) # Raises a more specific exception or else returns.
    raise TaskLaunchUndiagnosedError(cmd[0]) from e


def _diagnose_launch_error(cmd_path:str, search_path:str|None, e:OSError) -> None:
  path = cmd_path
  if not _dir_name(cmd_path): # Invoked as installed command.
    found = _which(cmd_path, path=search_path)
    if found is None:
      if _path_exists(cmd_path): raise TaskFileInvokedAsInstalledCommand(cmd_path) from e
      raise TaskInstalledCommandNotFound(cmd_path) from e
    path = found

  if not _path_exists(path): raise TaskFileNotFound(path) from e
  if not _is_file(path): raise TaskNotAFile(path) from e
  if not _is_permitted(path, X_OK): raise TaskFileNotExecutable(path) from e

  bad_format = (e.strerror == 'Exec format error')
  if bad_format and not _is_permitted(path, R_OK): raise TaskFileNotReadable(path) from e # Read bit is necessary for scripts.

  if bad_format or isinstance(e, FileNotFoundError):
    # A 'file not found' error for an existing file is usually due to a bad shebang interpreter path.
    try:
      with open(path, 'rb') as f:
        lead_bytes = f.read(256) # Realistically a shebang line should not be longer than this.
    except OSError:
      raise TaskLaunchUndiagnosedError(path) from e
    line, newline, _ = lead_bytes.partition(b'\n')
    if line and (not newline or b'\0' in line): raise TaskFileBinaryIllFormed(path, line) from e
    if not line.startswith(b'#!'): raise TaskFileHashbangMissing(path, line) from e
    raise TaskFileHashbangIllFormed(path, line) from e


def _is_permitted(path:str, mode:int) -> bool:
  return _access(path, mode, effective_ids=(_access in _supports_effective_ids))


# Exceptions.


class TaskLaunchError(Exception):
  '''
  Exception indicating that `exec_replace` failed.
  `exec_replace` attempts to diagnose failures and raises a subclass of TaskLaunchError from the original.
  '''

  path: str

  def __init__(self, path:str, *args) -> None:
    super().__init__(path, *args)
    self.path = path

  @property
  def diagnosis(self) -> str:
    return 'launch failed.'


class TaskLaunchUndiagnosedError(TaskLaunchError):

  @property
  def diagnosis(self) -> str:
    cause = self.__cause__
    return f'launch failed: {cause.strerror}.' if isinstance(cause, OSError) and cause.strerror else 'launch failed (undiagnosed).'


class TaskMissingCommand(TaskLaunchError):

  def __init__(self) -> None:
    super().__init__('')

  @property
  def diagnosis(self) -> str: return 'no program was specified.'


class TaskFileBinaryIllFormed(TaskLaunchError):

  def __init__(self, path:str, first_line:bytes) -> None:
    super().__init__(path, first_line)
    self.first_line = first_line

  @property
  def diagnosis(self) -> str:
    return f'file appears to be a binary of the wrong format, or corrupt; first line: {_try_decode_repr(self.first_line)}'


class TaskFileInvokedAsInstalledCommand(TaskLaunchError):

  @property
  def diagnosis(self) -> str: return 'file exists in the current directory but invocation is missing a leading `./`.'


class TaskFileHashbangMissing(TaskLaunchError):

  def __init__(self, path:str, first_line:bytes) -> None:
    super().__init__(path, first_line)
    self.first_line = first_line

  @property
  def diagnosis(self) -> str:
    return f'script is missing shebang line (`#!...`); first line: {_try_decode_repr(self.first_line)}'


class TaskFileHashbangIllFormed(TaskLaunchError):

  def __init__(self, path:str, first_line:bytes) -> None:
    super().__init__(path, first_line)
    self.first_line = first_line

  @property
  def diagnosis(self) -> str:
    return f'script shebang line may be ill-formed; first line: {_try_decode_repr(self.first_line)}'


class TaskFileNotExecutable(TaskLaunchError):

  @property
  def diagnosis(self) -> str: return 'file is not executable.'


class TaskFileNotFound(TaskLaunchError):

  @property
  def diagnosis(self) -> str: return 'file was not found.'


class TaskFileNotReadable(TaskLaunchError):

  @property
  def diagnosis(self) -> str: return 'file is not readable.'


class TaskInstalledCommandNotFound(TaskLaunchError):

  @property
  def diagnosis(self) -> str: return 'executable was not found in PATH.'


class TaskNotAFile(TaskLaunchError):

  @property
  def diagnosis(self) -> str: return 'invocation path refers to a non-file.'


def _try_decode_repr(b:bytes) -> str:
  try: return repr(b.decode())
  except UnicodeError: return repr(b)
