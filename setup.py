#! /usr/bin/env python3
# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from setuptools import find_packages, setup

from shellword._metadata import APP, DESCRIPTION, VERSION

_tests_require = [
    'parameterized',
]

_extras_require = {
    'tests': _tests_require,
}

setup(
    name=APP,
    version=VERSION,

    license='GPLv3+',
    description=DESCRIPTION,
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',

    author='Sebastian Pipping',
    author_email='sebastian@pipping.org',

    python_requires='>=3.7',
    setup_requires=[
        'setuptools>=38.6.0',  # for long_description_content_type
    ],
    install_requires=[
        'colorama>=0.4.3',
    ],
    extras_require=_extras_require,

    packages=find_packages(),

    entry_points={
        'console_scripts': [
            f'{APP} = shellword.__main__:main',
            'shword = shellword.__main__:main',
        ],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: System :: Shells',
        'Topic :: Text Processing',
    ],
)
