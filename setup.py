#!/usr/bin/env python

from setuptools import setup

setup(
    name='sabre-addressing',
    version='0.4.3',
    description='Python implementation of the state addressing scheme for Sabre smart contracts and Pike agents and organizations.',
    author='Hugo Martins',
    author_email='caramelo.martins@gmail.com',
    packages=['addressing'],
    install_requires=['pycryptodome', 'sawtooth-sdk'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['sabre-address=addressing.cli:main'],
    },
)
