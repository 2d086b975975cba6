#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

SBPATCHES_PATH = HERE / "sbpatches"


def get_version(path):
    "Read __version__ from a version file without importing the package."
    ns = {}
    with open(path) as f:
        exec(f.read(), {}, ns)
    return ns['__version__']


VERSION = get_version(SBPATCHES_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='sbpatches',
      version=VERSION,
      description="Build Starbound json patch files from a mod's edited asset tree",
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(),
      package_data={
          'sbpatches': ['patch_format.schema.json'],
      },
      python_requires='>=3.7',
      install_requires=[
          'colorama',
          'jsonpointer>=2.0',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonpatch',
              'jsonschema',
              'pytest>=3.6',
          ],
      },
      entry_points={
          'console_scripts': [
              'sbpatches = sbpatches.__main__:main_dispatch',
              'sbpatches-build = sbpatches.buildpatchesapp:main',
              'sbpatches-diff = sbpatches.sbdiffapp:main',
              'sbpatches-patch = sbpatches.sbpatchapp:main',
          ],
      },
      classifiers=[
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
          'Topic :: Games/Entertainment',
      ],
    )
