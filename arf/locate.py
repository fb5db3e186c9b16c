# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os.path import abspath as _abspath, isfile as _is_file, join as _path_join, normpath as _norm_path
from typing import Iterable, Mapping


system_lib_dirs = ('/root', '/tmp', '/usr/local/lib', '/usr/lib')


class LibraryNotFound(Exception):
  'The preload library was not found in any of the search directories.'

  def __init__(self, lib_name:str, dirs:Iterable[str]) -> None:
    dirs = tuple(dirs)
    super().__init__(lib_name, dirs)
    self.lib_name = lib_name
    self.dirs = dirs

  @property
  def diagnosis(self) -> str:
    return f'library not found: {self.lib_name}; searched: {", ".join(self.dirs)}'


def search_dirs(home:str|None) -> list[str]:
  '''
  The ordered list of directories to search for a preload library.
  The `$HOME` entries are omitted if `home` is unset or empty.
  '''
  dirs = ['.']
  if home: dirs.extend((_path_join(home, 'lib/arf'), _path_join(home, 'lib')))
  dirs.extend(system_lib_dirs)
  return dirs


def search_dirs_for_env(environ:Mapping[str,str]) -> list[str]:
  return search_dirs(environ.get('HOME'))


def find_library(lib_name:str, dirs:Iterable[str]) -> str|None:
  'Return the path to `lib_name` in the first of `dirs` that contains it, or None.'
  for dir in dirs:
    path = _path_join(dir, lib_name)
    if _is_file(path): return path
  return None


def locate_library(lib_name:str, dirs:Iterable[str]) -> str:
  '''
  Return the absolute path to `lib_name` in the first of `dirs` that contains it.
  Raises LibraryNotFound if no directory contains it.
  '''
  dirs = tuple(dirs)
  path = find_library(lib_name, dirs)
  if path is None: raise LibraryNotFound(lib_name, dirs)
  return _abspath(_norm_path(path))
