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

import os
import re

from setuptools import find_packages, setup


def get_version() -> str:
    version_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'polystr', 'version.py')
    with open(version_path) as fp:
        match = re.search(r"^__version__ = '([^']+)'", fp.read(), re.MULTILINE)
    assert match is not None
    return match.group(1)


setup(
    name='polystr',
    version=get_version(),
    description='Encoding generic strings with search, split, transcode and format operations',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('polystr_tests', 'polystr_tests.*')),
    package_data={'polystr.conf': ['*.yml']},
    install_requires=[
        'structlog>=22.3',
        'pydantic>=2.0,<3',
        'pyyaml>=6.0',
        'typing_extensions>=4.10',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
)
