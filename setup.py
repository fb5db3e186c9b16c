# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='arf-launch',
  version='0.1.0',
  description='arf is a multicall launcher that runs programs with the arf and ero instrumentation libraries preloaded.',
  python_requires='>=3.10',
  packages=['arf', 'utest'],
  entry_points={
    'console_scripts': [
      'arf=arf.launch:main',
      'ero=arf.launch:main',
      'mtero=arf.launch:main',
    ],
  },
)
