# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import chdir, makedirs
from os.path import join as path_join, realpath
from tempfile import mkdtemp

from arf.locate import find_library, LibraryNotFound, locate_library, search_dirs, search_dirs_for_env
from utest import utest, utest_exc


utest(['.', '/home/u/lib/arf', '/home/u/lib', '/root', '/tmp', '/usr/local/lib', '/usr/lib'], search_dirs, '/home/u')
utest(['.', '/root', '/tmp', '/usr/local/lib', '/usr/lib'], search_dirs, None)
utest(['.', '/root', '/tmp', '/usr/local/lib', '/usr/lib'], search_dirs, '')
utest(['.', '/h/lib/arf', '/h/lib', '/root', '/tmp', '/usr/local/lib', '/usr/lib'], search_dirs_for_env, {'HOME': '/h'})


def touch(path:str) -> None:
  with open(path, 'w'): pass


root = realpath(mkdtemp(prefix='arf-locate-'))
chdir(root)
for d in ['a', 'b', 'c', 'sub/libx.so']:
  makedirs(d)
touch('b/libx.so')
touch('c/libx.so')
touch('libcwd.so')

# First match in order wins.
utest(path_join(root, 'b/libx.so'), locate_library, 'libx.so', ['a', 'b', 'c'])
utest(path_join(root, 'c/libx.so'), locate_library, 'libx.so', ['a', 'c', 'b'])
utest('b/libx.so', find_library, 'libx.so', ['a', 'b', 'c'])

# Directories with a matching name are not libraries.
utest(path_join(root, 'b/libx.so'), locate_library, 'libx.so', ['sub', 'b'])

# The current directory entry resolves to an absolute path.
utest(path_join(root, 'libcwd.so'), locate_library, 'libcwd.so', ['.', 'a'])

# Nonexistent directories are skipped.
utest(path_join(root, 'c/libx.so'), locate_library, 'libx.so', ['missing', 'c'])

utest(None, find_library, 'libx.so', ['a'])
utest_exc(LibraryNotFound('libx.so', ('a', 'missing')), locate_library, 'libx.so', ['a', 'missing'])
utest_exc(LibraryNotFound('libx.so', ()), locate_library, 'libx.so', [])

utest('library not found: libero.so; searched: ., /usr/lib', lambda: LibraryNotFound('libero.so', ['.', '/usr/lib']).diagnosis)
