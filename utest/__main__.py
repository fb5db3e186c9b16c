#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, walk
from os.path import isfile as is_file, join as path_join, relpath as rel_path
from subprocess import run
from sys import executable
from typing import Iterable, Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = env.setdefault('UTEST_WORK_DIR', getcwd())
  # Tests import the project packages from the work dir, not from the scratch cwd.
  env['PYTHONPATH'] = ':'.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_test_files(args.paths):
    print(path)
    c = run([executable, rel_path(path, utest_cwd)], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_files(paths:Iterable[str]) -> Iterator[str]:
  for path in paths:
    if is_file(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
