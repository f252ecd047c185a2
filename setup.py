#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os.path
from setuptools import setup, find_packages
from pushid import version

def read(fname):
    try:
        return open(os.path.join(os.path.dirname(__file__), fname)).read()
    except IOError:
        return ''

AUTHOR = 'Xiongfei Shi'
AUTHOR_EMAIL = 'jenson.shixf@gmail.com'

CLASSIFIERS = [
    'Intended Audience :: Developers',
    'License :: OSI Approved :: Apache Software License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Software Development :: Libraries :: Python Modules',
    'Topic :: Database',
]

DESCRIPTION = 'Sortable 20-character push ids.'
LONG_DESCRIPTION = read('README.rst')
KEYWORDS = ['ID', 'Push ID', 'Sortable']

INSTALL_REQUIRES = []

EXTRAS_REQUIRE = {
    'test': [
        'pytest',
        'gevent',
    ],
}

setup(
    name='pushid',
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    classifiers=CLASSIFIERS,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    keywords=KEYWORDS,
    maintainer=AUTHOR,
    maintainer_email=AUTHOR_EMAIL,
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.6',
    url='https://github.com/shixiongfei/pushid',
    version=version
)
