#!/usr/bin/env python
"""
Setup.py for pymatrixgraph.
"""

from setuptools import find_packages, setup

setup(
    name="pymatrixgraph",
    version="0.1.0",
    description="Connectivity and bipartiteness analysis for small undirected graphs",
    packages=find_packages(include=["matrixgraph", "matrixgraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "matrixgraph = matrixgraph.cli:main",
        ],
    },
)
