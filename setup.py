#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="danglescan",
    version="1.0.0",
    description="Dangling subdomain takeover scanner",
    author="DANGLESCAN Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "dnspython",
        "requests",
        "tqdm",
        "Flask",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "danglescan=danglescan.cli:main",
            "danglescan-server=danglescan.server:main",
        ],
    },
    python_requires=">=3.9",
)
