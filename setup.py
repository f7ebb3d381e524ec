#!/usr/bin/env python3
"""Setup script for mindcolumns."""

from setuptools import setup, find_packages

setup(
    name="mindcolumns",
    version="1.0.0",
    description="Column-based drill-down navigation for mind maps",
    author="mindcolumns Project",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyGObject>=3.46.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: X11 Applications :: GTK",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business",
    ],
)
