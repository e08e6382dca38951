#!/usr/bin/env python

""" canadapost_api setup """

from setuptools import setup, find_packages

setup(
    name="canadapost_api",
    version='1.0.0',
    description="Canada Post rating and tracking API client",
    long_description="",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.7',
    install_requires=[
        'setuptools',
        'requests>=2.11.1',
        'python-dateutil',
    ],
    extras_require={
        'test': [
            'pytest',
            'requests-mock',
        ],
    },
)
