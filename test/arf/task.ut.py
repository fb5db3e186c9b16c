# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

# Every case here must fail to exec; a successful exec would replace the test process.

from os import chdir, chmod, makedirs, symlink
from os.path import realpath
from tempfile import mkdtemp

from arf.task import (exec_replace, fmt_cmd, TaskFileHashbangIllFormed, TaskFileHashbangMissing, TaskFileInvokedAsInstalledCommand,
  TaskFileNotExecutable, TaskFileNotFound, TaskInstalledCommandNotFound, TaskMissingCommand, TaskNotAFile)
from utest import utest, utest_exc


utest("prog 'a b' '$X'", fmt_cmd, ['prog', 'a b', '$X'])
utest('', fmt_cmd, [])


root = realpath(mkdtemp(prefix='arf-task-', dir='.')) # Not in /tmp, which may be mounted noexec.
chdir(root)
makedirs('empty-bin')
env = {'PATH': f'{root}/empty-bin'}

utest_exc(TaskMissingCommand(), exec_replace, [], env)

utest_exc(TaskInstalledCommandNotFound('nonexistent'), exec_replace, ['nonexistent'], env)
utest_exc(TaskInstalledCommandNotFound('-bogus'), exec_replace, ['-bogus', 'prog'], env)
utest_exc(TaskFileNotFound('./nonexistent'), exec_replace, ['./nonexistent'], env)

makedirs('dir')
symlink('dir', 'dir.link')
utest_exc(TaskNotAFile('./dir'), exec_replace, ['./dir'], env)
utest_exc(TaskNotAFile('./dir.link'), exec_replace, ['./dir.link'], env)


with open('empty.py', 'w'): pass
symlink('empty.py', 'empty.link')

utest_exc(TaskFileInvokedAsInstalledCommand('empty.py'), exec_replace, ['empty.py'], env)
utest_exc(TaskFileInvokedAsInstalledCommand('empty.link'), exec_replace, ['empty.link'], env)

chmod('empty.py', 0o600)
utest_exc(TaskFileNotExecutable('./empty.py'), exec_replace, ['./empty.py'], env)
utest_exc(TaskFileNotExecutable('./empty.link'), exec_replace, ['./empty.link'], env)

chmod('empty.py', 0o700)
utest_exc(TaskFileHashbangMissing('./empty.py', b''), exec_replace, ['./empty.py'], env)

with open('hashbang-missing.py', 'w') as f:
  f.write('xyz\n')
chmod('hashbang-missing.py', 0o700)
utest_exc(TaskFileHashbangMissing('./hashbang-missing.py', b'xyz'), exec_replace, ['./hashbang-missing.py'], env)

with open('hashbang-ill-formed.py', 'w') as f:
  f.write('#!/nonexistent/interpreter\n')
chmod('hashbang-ill-formed.py', 0o700)
utest_exc(TaskFileHashbangIllFormed('./hashbang-ill-formed.py', b'#!/nonexistent/interpreter'),
  exec_replace, ['./hashbang-ill-formed.py'], env)

# Commands found on PATH are diagnosed at their resolved location.
with open('empty-bin/no-shebang', 'w') as f:
  f.write('xyz\n')
chmod('empty-bin/no-shebang', 0o700)
utest_exc(TaskFileHashbangMissing(f'{root}/empty-bin/no-shebang', b'xyz'), exec_replace, ['no-shebang'], env)


utest('executable was not found in PATH.', lambda: TaskInstalledCommandNotFound('x').diagnosis)
utest('file is not executable.', lambda: TaskFileNotExecutable('x').diagnosis)
