# This file is part of qcheck, a property based testing library.
#
# Copyright (C) 2026 the qcheck authors. See the git log if you need to
# determine who owns an individual contribution.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import os

import setuptools


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


SOURCE = local_file('src')
README = local_file('README.rst')


# Assignment to placate pyflakes. The actual version is from the exec that
# follows.
__version__ = None

with open(local_file('src/qcheck/version.py')) as o:
    exec(o.read())

assert __version__ is not None


extras = {
    'pytest': ['pytest>=3.0'],
    'test': ['pytest>=3.0', 'flaky'],
    'benchmark': ['pytest>=3.0', 'pytest-benchmark'],
}

install_requires = ['attrs>=17.4.0']

setuptools.setup(
    name='qcheck',
    version=__version__,
    packages=setuptools.find_packages(SOURCE),
    package_dir={'': SOURCE},
    license='MPL v2',
    description='A QuickCheck style library for property based testing',
    zip_safe=False,
    extras_require=extras,
    install_requires=install_requires,
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Testing',
    ],
    long_description=open(README).read(),
)
