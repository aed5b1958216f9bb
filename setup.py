#!/usr/bin/env python3
"""
recurve-cache Setup Script
==========================
Allows installation of the recurve-cache package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="recurve-cache",
    version="1.0.0",
    description="Bounded in-memory cache with count and total cost eviction limits",
    packages=find_packages(exclude=("tests", "tests.*", "scripts")),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
