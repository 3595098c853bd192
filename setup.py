# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='spli',
  version='0.1.0',
  description='spli is a streaming reader for a small Lisp surface syntax.',
  python_requires='>=3.11',

  packages=['spli', 'spli.bin', 'utest'],
  entry_points={
    'console_scripts': [
      'spli=spli.bin.spli:main',
    ],
  },
)
