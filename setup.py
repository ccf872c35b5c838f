#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# read_primitives can't be imported here, its dependencies may not be installed yet
_init = (Path(__file__).parent / 'read_primitives' / '__init__.py').read_text()
__version__ = re.search(r"^__version__ = '([^']+)'", _init, re.MULTILINE).group(1)

setup(
    name='read-primitives',
    version=__version__,
    description='Read fixed-width integers and floats from any byte source, in explicit byte order',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(include=('read_primitives', 'read_primitives.*')),
    install_requires=[
        'pydantic>=2',
        'pyyaml',
        'structlog',
        'typing_extensions>=4.4',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
