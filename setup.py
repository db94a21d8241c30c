#!/usr/bin/env python
from setuptools import setup, find_packages

with open('README.rst') as f:
    long_description = f.read()

setup(
    name='bitnum',
    version='0.1.0',
    description='Arbitrary precision integers as binary trees and two\'s complement bit streams',
    long_description=long_description,
    packages=find_packages(exclude=('tests', 'docs')),
    python_requires='>=3.6',
    install_requires=[
        'attrs',
        'graphviz',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
