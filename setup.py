#!/usr/bin/env python3
# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import re
from pathlib import Path

from setuptools import setup

# Get version without importing the package (its dependencies may not be installed yet)
file_dir = Path(__file__).parent.absolute()
version_file = (file_dir / "docsite_helpers" / "_version.py").read_text()
version = re.search(r'__version__ = "([^"]+)"', version_file).group(1)

# setup wheel
setup(
    name='docsite-helpers',
    version=version,
    description='Build extensions and template helpers for multi-version documentation sites',
    author='NVIDIA',
    packages=['docsite_helpers'],
    include_package_data=True,
    package_data={
        'docsite_helpers': ['*.py', 'schemas/*.json'],
    },
    install_requires=[
        'jsonschema>=4.18',
        'PyYAML>=6.0',
        'semver>=3.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'docsite-helpers=docsite_helpers.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.9',
)
