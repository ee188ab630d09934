#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="tarsym",
    version="1.0.0",
    description="Follow symlinks inside ustar archives and extract what they point to",
    packages=find_packages(include=["tarsym", "tarsym.*"]),
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tarsym=tarsym.cli:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Archiving",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
