#!/usr/bin/env python

from setuptools import setup

with open('bimap/version.txt') as v:
    version = v.read().strip()

classifiers = '''
Development Status :: 3 - Alpha
License :: Public Domain
Programming Language :: Python :: 3
'''

setup(name='py-bimap',
      version=version,
      description='A one-to-one map queryable from either side',
      author='Toby Burress',
      author_email='kurin@delete.org',
      classifiers=[c for c in classifiers.split('\n') if c],
      package_data={'bimap': ['version.txt']},
      packages=['bimap'],
      install_requires=[],
      extras_require={'test': ['pytest', 'mock']})
