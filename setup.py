#!/usr/bin/env python

from setuptools import setup, find_packages

setup (
    name='hmacdigest',
    version='1.0.0',
    description='HMAC (RFC 2104) over pluggable digest algorithms',
    license="MIT",
    packages=find_packages(exclude=['test', 'test.*']),
    python_requires='>=3.6',
    install_requires=['pycryptodome'],
    extras_require={
        'test': ['pytest'],
    },
)
