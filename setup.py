# coding=utf-8
# Copyright 2026 The Diffscript Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Setup script for diffscript."""

# pyformat: disable

from setuptools import find_packages
from setuptools import setup


_dct = {}
with open('diffscript/version.py', encoding='utf-8') as f:
  exec(f.read(), _dct)  # pylint: disable=exec-used
__version__ = _dct['__version__']

long_description = """
# diffscript

diffscript computes edit scripts ("diffs") between two lists or two dicts of
arbitrary, possibly nested values, and applies them to reconstruct one
collection from the other. Sequence diffs detect moved elements; values are
compared with a deep, type-aware equality that tolerates floating point noise.
"""

setup(
    name='diffscript',
    version=__version__,
    include_package_data=True,
    packages=find_packages(exclude=['docs']),  # Required
    python_requires='>=3.8',
    install_requires=[
        'absl-py',
    ],
    extras_require={
        'numpy': [
            'numpy',
        ],
        'testing': [
            'numpy',
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'diffscript=diffscript.cli:run',
        ],
    },
    description='diffscript: diffs and patches for nested lists and dicts',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='The Diffscript Authors',
    classifiers=[
        'Development Status :: 3 - Alpha',

        # Indicate who your project is intended for
        'Intended Audience :: Developers',

        'License :: OSI Approved :: Apache Software License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',

        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    license='Apache 2.0',
    keywords='diff patch edit script nested values json'
)
